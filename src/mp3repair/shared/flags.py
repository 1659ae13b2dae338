"""
Summary: Resolved flag values and their typed accessors.
Why: A missing or mistyped flag entry is a programming error, never a user error.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ProgrammerError


@dataclass(slots=True, frozen=True)
class FlagValue:
    """A flag's effective value and whether the user set it explicitly."""

    value: Any
    user_set: bool = False


FlagValues = Mapping[str, FlagValue]


def _lookup(values: FlagValues, name: str, expected: type) -> FlagValue:
    flag = values.get(name)
    if flag is None:
        raise ProgrammerError(f'flag "{name}" is not found')
    # bool is an int subclass; keep the two apart
    value = flag.value
    if expected is int and isinstance(value, bool):
        raise ProgrammerError(f'value for flag "{name}" is not an integer')
    if not isinstance(value, expected):
        raise ProgrammerError(
            f'value for flag "{name}" is not {_TYPE_NAMES.get(expected, expected.__name__)}'
        )
    return flag


_TYPE_NAMES = {bool: "a boolean", str: "a string", int: "an integer"}


def get_bool(values: FlagValues, name: str) -> tuple[bool, bool]:
    """Return ``(value, user_set)`` for a boolean flag."""

    flag = _lookup(values, name, bool)
    return flag.value, flag.user_set


def get_string(values: FlagValues, name: str) -> tuple[str, bool]:
    """Return ``(value, user_set)`` for a string flag."""

    flag = _lookup(values, name, str)
    return flag.value, flag.user_set


def get_int(values: FlagValues, name: str) -> tuple[int, bool]:
    """Return ``(value, user_set)`` for an integer flag."""

    flag = _lookup(values, name, int)
    return flag.value, flag.user_set


__all__ = ["FlagValue", "FlagValues", "get_bool", "get_int", "get_string"]
