"""Process exit codes and the message logged when a command fails."""

from __future__ import annotations

from enum import IntEnum


class ExitStatus(IntEnum):
    """Exit codes returned by every command."""

    SUCCESS = 0
    USER_ERROR = 1
    PROGRAMMER_ERROR = 2
    SYSTEM_ERROR = 3

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def worst(self, other: "ExitStatus") -> "ExitStatus":
        """Return whichever status is more severe (the higher code)."""

        return self if self >= other else other


_DESCRIPTIONS = {
    ExitStatus.SUCCESS: "success",
    ExitStatus.USER_ERROR: "user error",
    ExitStatus.PROGRAMMER_ERROR: "programming error",
    ExitStatus.SYSTEM_ERROR: "system error",
}


def exit_error_message(command: str, status: ExitStatus) -> str:
    """Render the message logged when ``command`` ends with ``status``."""

    return f'command "{command}" terminated with an error: {status.description}'
