"""Where: features/library/domain/models.py
What: The library graph: Artist owns Albums, Album owns Tracks.
Why: Every command walks this graph; back-references exist for lookup only.
Assumptions: - A node belongs to exactly one parent.
Trade-offs: - Copies share TrackMetadata with the original so a read on a
              filtered copy is visible from the unfiltered graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mp3repair.features.metadata import TrackMetadata


@dataclass(slots=True, eq=False)
class Track:
    """A track file parsed as ``<number> <simple name>.<ext>``."""

    path: Path
    simple_name: str
    number: int
    album: Album | None = field(default=None, repr=False)
    metadata: TrackMetadata | None = field(default=None, repr=False)

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return self.path.suffix

    @property
    def album_name(self) -> str:
        return self.album.title if self.album is not None else ""

    @property
    def artist_name(self) -> str:
        if self.album is None or self.album.artist is None:
            return ""
        return self.album.artist.name

    def copy(self, album: Album) -> Track:
        duplicate = Track(
            path=self.path,
            simple_name=self.simple_name,
            number=self.number,
            metadata=self.metadata,
        )
        album.add_track(duplicate)
        return duplicate

    def __str__(self) -> str:
        return str(self.path)


@dataclass(slots=True, eq=False)
class Album:
    """An album directory; ``canonical_*`` values are set by the analyzer."""

    title: str
    path: Path
    artist: Artist | None = field(default=None, repr=False)
    tracks: list[Track] = field(default_factory=list, repr=False)
    canonical_title: str = ""
    genre: str = ""
    year: str = ""
    cd_identifier: bytes = b""

    def __post_init__(self) -> None:
        if not self.canonical_title:
            self.canonical_title = self.title

    def add_track(self, track: Track) -> None:
        track.album = self
        self.tracks.append(track)

    @property
    def has_tracks(self) -> bool:
        return bool(self.tracks)

    @property
    def artist_name(self) -> str:
        return self.artist.name if self.artist is not None else ""

    def copy(self, artist: Artist, include_tracks: bool) -> Album:
        duplicate = Album(
            title=self.title,
            path=self.path,
            canonical_title=self.canonical_title,
            genre=self.genre,
            year=self.year,
            cd_identifier=self.cd_identifier,
        )
        artist.add_album(duplicate)
        if include_tracks:
            for track in self.tracks:
                _ = track.copy(duplicate)
        return duplicate


@dataclass(slots=True, eq=False)
class Artist:
    """An artist directory directly under the music root."""

    name: str
    path: Path
    albums: list[Album] = field(default_factory=list, repr=False)
    canonical_name: str = ""

    def __post_init__(self) -> None:
        if not self.canonical_name:
            self.canonical_name = self.name

    def add_album(self, album: Album) -> None:
        album.artist = self
        self.albums.append(album)

    @property
    def has_albums(self) -> bool:
        return bool(self.albums)

    def copy(self) -> Artist:
        return Artist(name=self.name, path=self.path, canonical_name=self.canonical_name)

    def tracks(self) -> list[Track]:
        return [track for album in self.albums for track in album.tracks]


def all_tracks(artists: list[Artist]) -> list[Track]:
    return [track for artist in artists for track in artist.tracks()]


__all__ = ["Album", "Artist", "Track", "all_tracks"]
