"""Where: ui/cli/display/listing.py
What: Render artists, albums and tracks for the ``list`` command.
Why: Each level can be shown or folded into its parent, and tracks can be
     annotated with the album and artist they belong to.
Assumptions: - Metadata was read when details or diagnostics are requested.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from mp3repair.features.library import Album, Artist, Track
from mp3repair.features.metadata import MetadataError, SourceType, track_details
from mp3repair.platform.output import OutputBus
from mp3repair.shared import quoted

V1Diagnostics = Callable[[Track], list[str]]


@dataclass(slots=True)
class ListingOptions:
    albums: bool = False
    artists: bool = False
    tracks: bool = False
    annotate: bool = False
    details: bool = False
    diagnostic: bool = False
    by_number: bool = False
    by_title: bool = False


@final
class ListingDisplay:
    """Prints a library graph according to ``ListingOptions``."""

    def __init__(self, bus: OutputBus, options: ListingOptions, v1_diagnostics: V1Diagnostics) -> None:
        self.bus = bus
        self.options = options
        self._v1_diagnostics = v1_diagnostics

    def show(self, artists: list[Artist]) -> None:
        if self.options.artists:
            for artist in sorted(artists, key=lambda a: a.name):
                self.bus.console_print(f"Artist: {artist.name}")
                self._show_albums(artist.albums, 2)
            return
        self._show_albums([album for artist in artists for album in artist.albums], 0)

    def annotate_album_name(self, album: Album) -> str:
        if not self.options.artists and self.options.annotate:
            return f"{quoted(album.title)} by {quoted(album.artist_name)}"
        return album.title

    def annotate_track_name(self, track: Track) -> str:
        if not self.options.annotate or self.options.albums:
            return track.simple_name
        parts = [quoted(track.simple_name), "on", quoted(track.album_name)]
        if not self.options.artists:
            parts.extend(["by", quoted(track.artist_name)])
        return " ".join(parts)

    def _show_albums(self, albums: list[Album], tab: int) -> None:
        if not self.options.albums:
            self._show_tracks([track for album in albums for track in album.tracks], tab)
            return
        named = sorted(((self.annotate_album_name(album), album) for album in albums), key=lambda p: p[0])
        for name, album in named:
            self.bus.console_print(f"{' ' * tab}Album: {name}")
            self._show_tracks(album.tracks, tab + 2)

    def _show_tracks(self, tracks: list[Track], tab: int) -> None:
        if not self.options.tracks:
            return
        if self.options.by_number:
            for track in sorted(tracks, key=lambda t: (t.number, t.simple_name)):
                self.bus.console_print(f"{' ' * tab}{track.number:2d}. {track.simple_name}")
                self._show_track_extras(track, tab + 2)
        elif self.options.by_title:
            named = sorted(((self.annotate_track_name(track), track) for track in tracks), key=lambda p: p[0])
            for name, track in named:
                self.bus.console_print(f"{' ' * tab}{name}")
                self._show_track_extras(track, tab + 2)

    def _show_track_extras(self, track: Track, tab: int) -> None:
        if self.options.details:
            self.show_details(track, tab)
        if self.options.diagnostic:
            self.show_v2_diagnostics(track, tab)
            self.show_v1_diagnostics(track, tab)

    def show_details(self, track: Track, tab: int) -> None:
        metadata = track.metadata
        if metadata is None:
            return
        if metadata.v2.error is not None:
            self.bus.log(
                logging.ERROR,
                "cannot get details",
                {"error": metadata.v2.error, "track": str(track)},
            )
            self.bus.error_printf(
                "The details are not available for track %s on album %s by artist %s: %s.",
                quoted(track.simple_name),
                quoted(track.album_name),
                quoted(track.artist_name),
                quoted(metadata.v2.error),
            )
            return
        details = track_details(metadata.v2.frame_strings)
        if not details:
            return
        self.bus.console_print(f"{' ' * tab}Details:")
        for key in sorted(details):
            self.bus.console_print(f"{' ' * (tab + 2)}{key} = {quoted(details[key])}")

    def show_v2_diagnostics(self, track: Track, tab: int) -> None:
        metadata = track.metadata
        if metadata is None:
            return
        v2 = metadata.v2
        if v2.error is not None:
            self._report_read_error(track, SourceType.ID3V2, v2.error)
            return
        pad = " " * tab
        self.bus.console_print(f"{pad}ID3V2 Version: {v2.version}")
        self.bus.console_print(f"{pad}ID3V2 Encoding: {quoted(v2.encoding)}")
        for frame_id in sorted(v2.frame_strings):
            values = ", ".join(quoted(value) for value in v2.frame_strings[frame_id])
            self.bus.console_print(f"{pad}ID3V2 {frame_id} = [{values}]")

    def show_v1_diagnostics(self, track: Track, tab: int) -> None:
        try:
            lines = self._v1_diagnostics(track)
        except (MetadataError, OSError) as e:
            self._report_read_error(track, SourceType.ID3V1, str(e))
            return
        for line in lines:
            self.bus.console_print(f"{' ' * tab}ID3V1 {line}")

    def _report_read_error(self, track: Track, source: SourceType, error: str) -> None:
        self.bus.log(
            logging.ERROR,
            "metadata read error",
            {"metadata": source.value, "track": str(track), "error": error},
        )


__all__ = ["ListingDisplay", "ListingOptions", "V1Diagnostics"]
