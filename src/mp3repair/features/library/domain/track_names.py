"""
Summary: Parse ``<number> <simple name>.<ext>`` track file names.
Why: Track numbers and titles come from the file name, which repair treats as authoritative.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ParsedTrackName:
    simple_name: str
    number: int


def parse_track_name(file_name: str, extension: str) -> ParsedTrackName | None:
    """Split ``file_name`` into its number and simple name.

    Returns None when the name does not start with digits followed by
    whitespace, or does not end with ``extension``.
    """
    pattern = re.compile(rf"^(\d+)\s+(.+){re.escape(extension)}$")
    match = pattern.match(file_name)
    if match is None:
        return None
    return ParsedTrackName(simple_name=match.group(2), number=int(match.group(1)))


__all__ = ["ParsedTrackName", "parse_track_name"]
