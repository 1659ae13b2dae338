"""Where: features/library/usecases/search.py
What: Validate the search flags, build the library graph and filter it.
Why: Every command starts from the same root/artist/album/track walk.
Assumptions: - Artists are directories directly under the music root, albums
               are directories under artists, tracks are regular files.
             - Directory read failures are reported and the level is treated
               as empty.
Trade-offs: - Filtering copies the graph so the unfiltered one stays available
              for empty-folder and numbering analysis.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import final

from mp3repair.platform.filesystem import FileSystem
from mp3repair.platform.output import OutputBus
from mp3repair.shared import FlagValues, get_string, quoted

from ..domain.models import Album, Artist, Track
from ..domain.track_names import parse_track_name

TOP_DIR_FLAG = "--topDir"
ARTIST_FILTER_FLAG = "--artistFilter"
ALBUM_FILTER_FLAG = "--albumFilter"
TRACK_FILTER_FLAG = "--trackFilter"
EXTENSIONS_FLAG = "--extensions"

REGEX_INSTRUCTIONS = """Here are some common errors in filter expressions and what to do:
Character class problems
Character classes are sets of 1 or more characters, enclosed in square brackets: []
A common error is to forget the final ] bracket.
Character classes can include a range of characters, like this: [a-z], which means
any character between a and z. Order is important - one might think that [z-a] would
mean the same thing, but it doesn't; z comes after a. Do an internet search for ASCII
table; that's the expected order for ranges of characters. And that means [A-z] means
any letter, and [a-Z] is an error.
Repetition problems
The characters '+' and '*' specify repetition: a+ means "one or more a's" and a* means
"0 or more a's". You can also put a count in curly braces - a{2} means "exactly two a's".
Repetition can only be used once for a character or character class. 'a++', 'a+*',
and so on, are not allowed.
For more (too much, often, you are warned) information, do a web search for
"python regular expression syntax"."""


@dataclass(slots=True, frozen=True)
class SearchSettings:
    """Validated search parameters."""

    music_root: Path
    artist_filter: re.Pattern[str]
    album_filter: re.Pattern[str]
    track_filter: re.Pattern[str]
    extensions: tuple[str, ...]

    @classmethod
    def from_values(
        cls,
        bus: OutputBus,
        values: FlagValues,
        filesystem: FileSystem,
    ) -> SearchSettings | None:
        """Validate the search flags; each failure is reported on ``bus``.

        Returns:
            The settings, or None when any flag value is unusable.
        """
        ok = True
        regex_ok = True
        patterns: dict[str, re.Pattern[str]] = {}
        for name, flag in (
            ("albumFilter", ALBUM_FILTER_FLAG),
            ("artistFilter", ARTIST_FILTER_FLAG),
            ("trackFilter", TRACK_FILTER_FLAG),
        ):
            pattern = _evaluate_filter(bus, values, name, flag)
            if pattern is None:
                ok = regex_ok = False
            else:
                patterns[name] = pattern
        if not regex_ok:
            bus.error_print(REGEX_INSTRUCTIONS)
        top_dir = _evaluate_top_dir(bus, values, filesystem)
        if top_dir is None:
            ok = False
        extensions = _evaluate_extensions(bus, values)
        if extensions is None:
            ok = False
        if not ok or top_dir is None or extensions is None:
            return None
        return cls(
            music_root=top_dir,
            artist_filter=patterns["artistFilter"],
            album_filter=patterns["albumFilter"],
            track_filter=patterns["trackFilter"],
            extensions=extensions,
        )


def _evaluate_filter(
    bus: OutputBus,
    values: FlagValues,
    name: str,
    flag: str,
) -> re.Pattern[str] | None:
    raw_value, user_set = get_string(values, name)
    try:
        return re.compile(raw_value)
    except re.error as e:
        bus.log(
            logging.ERROR,
            "the filter cannot be parsed as a regular expression",
            {flag: raw_value, "user-set": user_set, "error": str(e)},
        )
        bus.error_printf("the %s value %s cannot be used", flag, quoted(raw_value))
        if user_set:
            bus.error_printf(
                "Why?\nThe value of %s that you specified is not a valid regular expression: %s.",
                flag,
                e,
            )
            bus.error_printf(
                "What to do:\nEither try a different setting, or omit setting %s and try the"
                " default value.",
                flag,
            )
        else:
            bus.error_printf(
                "Why?\nThe configured default value of %s is not a valid regular expression: %s.",
                flag,
                e,
            )
            bus.error_printf(
                "What to do:\nEither edit the configuration file containing the settings, or"
                " explicitly set %s to a better value.",
                flag,
            )
        return None


def _evaluate_top_dir(bus: OutputBus, values: FlagValues, filesystem: FileSystem) -> Path | None:
    raw_value, user_set = get_string(values, "topDir")
    path = Path(raw_value).expanduser()
    try:
        _ = filesystem.stat(path)
    except OSError as e:
        bus.error_printf("The %s value, %s, cannot be used", TOP_DIR_FLAG, quoted(raw_value))
        bus.log(
            logging.ERROR,
            "invalid directory",
            {"error": str(e), TOP_DIR_FLAG: raw_value, "user-set": user_set},
        )
        bus.error_print("Why?")
        if user_set:
            bus.error_print("The value you specified is not a readable file.")
            bus.error_print("What to do:\nSpecify a value that is a readable file.")
        else:
            bus.error_print("The currently configured value is not a readable file.")
            bus.error_printf(
                "What to do:\nEdit the configuration file or specify %s with a value that is a"
                " readable file.",
                TOP_DIR_FLAG,
            )
        return None
    if filesystem.is_dir(path):
        return path
    bus.error_printf("The %s value, %s, cannot be used", TOP_DIR_FLAG, quoted(raw_value))
    bus.log(
        logging.ERROR,
        "the file is not a directory",
        {TOP_DIR_FLAG: raw_value, "user-set": user_set},
    )
    bus.error_print("Why?")
    if user_set:
        bus.error_print("The value you specified is not the name of a directory.")
        bus.error_print("What to do:\nSpecify a value that is the name of a directory.")
    else:
        bus.error_print("The currently configured value is not the name of a directory.")
        bus.error_printf(
            "What to do:\nEdit the configuration file or specify %s with a value that is the"
            " name of a directory.",
            TOP_DIR_FLAG,
        )
    return None


def _evaluate_extensions(bus: OutputBus, values: FlagValues) -> tuple[str, ...] | None:
    raw_value, _ = get_string(values, "extensions")
    accepted: list[str] = []
    rejected: list[str] = []
    for candidate in raw_value.split(","):
        if candidate.startswith(".") and len(candidate) >= 2:
            accepted.append(candidate)
        else:
            bus.error_printf("The extension %s cannot be used.", quoted(candidate))
            rejected.append(candidate)
    if rejected:
        bus.error_print("Why?")
        bus.error_print("Extensions must be at least two characters long and begin with '.'")
        bus.error_print("What to do:\nProvide appropriate extensions.")
        bus.log(
            logging.ERROR,
            "invalid file extensions",
            {"rejected": rejected, EXTENSIONS_FLAG: raw_value},
        )
        return None
    return tuple(accepted)


@final
class LibraryScanner:
    """Walk the music root into a graph, then filter copies of it."""

    def __init__(self, bus: OutputBus, filesystem: FileSystem) -> None:
        self.bus = bus
        self.filesystem = filesystem

    def load(self, settings: SearchSettings) -> list[Artist]:
        """Read the unfiltered graph; an empty result is reported as a user error."""

        artists: list[Artist] = []
        for entry in self._read_directory(settings.music_root):
            if self.filesystem.is_dir(entry):
                artist = Artist(name=entry.name, path=entry)
                self._add_albums(settings, artist)
                artists.append(artist)
        if not artists:
            self.bus.error_print("No music files could be found using the specified parameters.")
            self.bus.error_print("Why?")
            self.bus.error_printf(
                "There were no directories found in %s (the %s value)",
                quoted(settings.music_root),
                TOP_DIR_FLAG,
            )
            self.bus.error_printf(
                "What to do:\nSet %s to the path of a directory that contains artist directories",
                TOP_DIR_FLAG,
            )
            self.bus.log(
                logging.ERROR,
                "cannot find any artist directories",
                {TOP_DIR_FLAG: str(settings.music_root)},
            )
        return artists

    def filter(self, settings: SearchSettings, artists: list[Artist]) -> list[Artist]:
        """Copy the parts of ``artists`` that pass every filter.

        Albums and artists left without tracks are dropped; an empty result
        is reported as a user error.
        """
        filtered: list[Artist] = []
        for artist in artists:
            if not (settings.artist_filter.search(artist.name) and artist.has_albums):
                continue
            artist_copy = artist.copy()
            for album in artist.albums:
                if not (settings.album_filter.search(album.title) and album.has_tracks):
                    continue
                album_copy = album.copy(artist_copy, include_tracks=False)
                for track in album.tracks:
                    if settings.track_filter.search(track.simple_name):
                        _ = track.copy(album_copy)
                if not album_copy.has_tracks:
                    artist_copy.albums.remove(album_copy)
            if artist_copy.has_albums:
                filtered.append(artist_copy)
        if not filtered:
            self.bus.error_print("No music files remain after filtering.")
            self.bus.error_print("Why?")
            self.bus.error_printf(
                "After applying %s=%s, %s=%s, and %s=%s, no files remained",
                ARTIST_FILTER_FLAG,
                quoted(settings.artist_filter.pattern),
                ALBUM_FILTER_FLAG,
                quoted(settings.album_filter.pattern),
                TRACK_FILTER_FLAG,
                quoted(settings.track_filter.pattern),
            )
            self.bus.error_print("What to do:\nUse less restrictive filter settings.")
            self.bus.log(
                logging.ERROR,
                "no files remain after filtering",
                {
                    ARTIST_FILTER_FLAG: settings.artist_filter.pattern,
                    ALBUM_FILTER_FLAG: settings.album_filter.pattern,
                    TRACK_FILTER_FLAG: settings.track_filter.pattern,
                },
            )
        return filtered

    def scan(self, settings: SearchSettings) -> list[Artist]:
        """Load then filter; empty when either step finds nothing."""

        artists = self.load(settings)
        if not artists:
            return []
        return self.filter(settings, artists)

    def _read_directory(self, directory: Path) -> list[Path]:
        try:
            return self.filesystem.read_dir(directory)
        except OSError as e:
            self.bus.log(
                logging.ERROR,
                "cannot read directory",
                {"directory": str(directory), "error": str(e)},
            )
            self.bus.error_printf("The directory %s cannot be read: %s", quoted(directory), e)
            return []

    def _add_albums(self, settings: SearchSettings, artist: Artist) -> None:
        for entry in self._read_directory(artist.path):
            if self.filesystem.is_dir(entry):
                album = Album(title=entry.name, path=entry)
                artist.add_album(album)
                self._add_tracks(settings, album)

    def _add_tracks(self, settings: SearchSettings, album: Album) -> None:
        for entry in self._read_directory(album.path):
            if self.filesystem.is_dir(entry) or entry.suffix not in settings.extensions:
                continue
            parsed = parse_track_name(entry.name, entry.suffix)
            if parsed is None:
                self.bus.log(
                    logging.ERROR,
                    "the track name cannot be parsed",
                    {"trackName": entry.name, "path": str(album.path)},
                )
                self.bus.error_printf(
                    "The track %s on album %s by artist %s cannot be parsed.",
                    quoted(entry.name),
                    quoted(album.title),
                    quoted(album.artist_name),
                )
                continue
            album.add_track(
                Track(path=entry, simple_name=parsed.simple_name, number=parsed.number)
            )


__all__ = ["LibraryScanner", "REGEX_INSTRUCTIONS", "SearchSettings"]
