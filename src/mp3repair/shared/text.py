"""Text helpers for user-visible messages."""

from __future__ import annotations


def quoted(value: object) -> str:
    """Wrap ``value`` in double quotes, escaping backslashes and quotes."""

    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'
