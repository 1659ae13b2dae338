"""Tests for resolved flag accessors and exit statuses."""

from collections.abc import Callable

import pytest

from mp3repair.shared import (
    ExitStatus,
    FlagValue,
    ProgrammerError,
    exit_error_message,
    get_bool,
    get_int,
    get_string,
    quoted,
)


def test_accessors_return_value_and_user_set() -> None:
    values = {
        "empty": FlagValue(True, True),
        "topDir": FlagValue("/music"),
        "maxOpenFiles": FlagValue(10, False),
    }

    assert get_bool(values, "empty") == (True, True)
    assert get_string(values, "topDir") == ("/music", False)
    assert get_int(values, "maxOpenFiles") == (10, False)


def test_missing_flag_is_a_programming_error() -> None:
    with pytest.raises(ProgrammerError, match='flag "files" is not found'):
        _ = get_bool({}, "files")


@pytest.mark.parametrize(
    ("value", "getter", "message"),
    [
        ("yes", get_bool, "is not a boolean"),
        (3, get_string, "is not a string"),
        (True, get_int, "is not an integer"),
    ],
)
def test_mistyped_flag_is_a_programming_error(
    value: object, getter: Callable[..., object], message: str
) -> None:
    with pytest.raises(ProgrammerError, match=message):
        _ = getter({"flag": FlagValue(value)}, "flag")


def test_worst_status() -> None:
    assert ExitStatus.SUCCESS.worst(ExitStatus.SYSTEM_ERROR) is ExitStatus.SYSTEM_ERROR
    assert ExitStatus.USER_ERROR.worst(ExitStatus.SUCCESS) is ExitStatus.USER_ERROR


def test_exit_error_message() -> None:
    assert exit_error_message("scan", ExitStatus.USER_ERROR) == (
        'command "scan" terminated with an error: user error'
    )


def test_quoted_escapes() -> None:
    assert quoted('say "hi"') == '"say \\"hi\\""'
