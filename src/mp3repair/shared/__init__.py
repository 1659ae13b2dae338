"""Types shared across features: errors, exit status, flag values and quoting helpers."""

from .errors import Mp3RepairError, ProgrammerError
from .exit_status import ExitStatus, exit_error_message
from .flags import FlagValue, FlagValues, get_bool, get_int, get_string
from .text import quoted

__all__ = [
    "ExitStatus",
    "FlagValue",
    "FlagValues",
    "Mp3RepairError",
    "ProgrammerError",
    "exit_error_message",
    "get_bool",
    "get_int",
    "get_string",
    "quoted",
]
