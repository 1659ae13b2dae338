"""Where: ui/cli/args/flags.py
What: Flag declarations per command section and their resolution into values.
Why: A flag's effective value comes from the command line when given, else
     from the configuration file, else from a built-in default; commands
     also need to know which of these applied.
Assumptions: - argparse destinations default to None, so "not given" is detectable.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from mp3repair.config.config import Config
from mp3repair.config.paths import default_music_dir
from mp3repair.config.settings import DEFAULT_EXTENSIONS, DEFAULT_FILTER, DEFAULT_OPEN_FILES
from mp3repair.config.settings import MAX_OPEN_FILES, MIN_OPEN_FILES
from mp3repair.shared import FlagValue


@dataclass(slots=True, frozen=True)
class FlagSpec:
    """One command line flag and where its default comes from."""

    section: str
    name: str
    kind: type
    default: Any
    help: str
    short: str | None = None

    def default_value(self) -> Any:
        return self.default() if callable(self.default) else self.default

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        names = [f"-{self.short}", f"--{self.name}"] if self.short else [f"--{self.name}"]
        if self.kind is bool:
            _ = parser.add_argument(
                *names,
                dest=self.name,
                action=argparse.BooleanOptionalAction,
                default=None,
                help=self.help,
            )
        else:
            _ = parser.add_argument(
                *names,
                dest=self.name,
                type=self.kind,
                default=None,
                help=self.help,
            )


def _music_dir() -> str:
    return str(default_music_dir())


SEARCH_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("search", "topDir", str, _music_dir, "top directory specifying where to find music files"),
    FlagSpec("search", "artistFilter", str, DEFAULT_FILTER, "regular expression specifying which artists to select"),
    FlagSpec("search", "albumFilter", str, DEFAULT_FILTER, "regular expression specifying which albums to select"),
    FlagSpec("search", "trackFilter", str, DEFAULT_FILTER, "regular expression specifying which tracks to select"),
    FlagSpec("search", "extensions", str, DEFAULT_EXTENSIONS, "comma-delimited list of file extensions used by mp3 files"),
)

IO_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec(
        "io",
        "maxOpenFiles",
        int,
        DEFAULT_OPEN_FILES,
        "the maximum number of files that can be read simultaneously"
        f" (at least {MIN_OPEN_FILES}, at most {MAX_OPEN_FILES}, default {DEFAULT_OPEN_FILES})",
    ),
)

SCAN_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("scan", "empty", bool, False, "report empty album and artist directories", "e"),
    FlagSpec("scan", "files", bool, False, "report metadata/file inconsistencies", "f"),
    FlagSpec("scan", "numbering", bool, False, "report missing track numbers and duplicated track numbering", "n"),
)

REPAIR_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("repair", "dryRun", bool, False, "output what would have been repaired, but make no repairs"),
)

LIST_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("list", "albums", bool, False, "include album names in listing", "l"),
    FlagSpec("list", "artists", bool, False, "include artist names in listing", "r"),
    FlagSpec("list", "tracks", bool, False, "include track names in listing", "t"),
    FlagSpec("list", "annotate", bool, False, "annotate listings with album and artist names"),
    FlagSpec("list", "details", bool, False, "include details with tracks"),
    FlagSpec("list", "diagnostic", bool, False, "include diagnostic information with tracks"),
    FlagSpec("list", "byNumber", bool, False, "sort tracks by track number"),
    FlagSpec("list", "byTitle", bool, False, "sort tracks by track title"),
)


def add_flags(parser: argparse.ArgumentParser, *groups: Iterable[FlagSpec]) -> None:
    for group in groups:
        for spec in group:
            spec.add_to(parser)


def read_flags(
    namespace: argparse.Namespace,
    specs: Iterable[FlagSpec],
    config: Config,
) -> dict[str, FlagValue]:
    """Resolve each flag: command line, then configuration, then built-in default."""

    values: dict[str, FlagValue] = {}
    for spec in specs:
        given = getattr(namespace, spec.name, None)
        if given is not None:
            values[spec.name] = FlagValue(given, True)
            continue
        section = config.section(spec.section)
        if spec.name in section:
            values[spec.name] = FlagValue(section[spec.name], False)
        else:
            values[spec.name] = FlagValue(spec.default_value(), False)
    return values


__all__ = [
    "FlagSpec",
    "IO_FLAGS",
    "LIST_FLAGS",
    "REPAIR_FLAGS",
    "SCAN_FLAGS",
    "SEARCH_FLAGS",
    "add_flags",
    "read_flags",
]
