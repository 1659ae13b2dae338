"""Where: features/analysis/domain/concerns.py
What: Concern maps attached to a parallel tree of artists, albums and tracks.
Why: Findings from every check land on one tree that rolls shared findings
     upward and renders deterministically.
Assumptions: - Track lookup keys by file name, album lookup by title, so a
               filtered copy of the library finds its concerned node.
Trade-offs: - Rollup moves one level per call; a second call can lift album
              findings that were produced by the first.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from mp3repair.features.library import Album, Artist, Track
from mp3repair.shared import quoted

INDENT = 2


class ConcernType(str, Enum):
    EMPTY = "empty"
    FILES = "files"
    NUMBERING = "numbering"
    CONFLICT = "metadata conflict"


class Concerns:
    """Messages grouped by concern type."""

    __slots__ = ("_messages",)

    def __init__(self) -> None:
        self._messages: dict[ConcernType, list[str]] = {}

    def add(self, kind: ConcernType, message: str) -> None:
        self._messages.setdefault(kind, []).append(message)

    def messages(self, kind: ConcernType) -> list[str]:
        return list(self._messages.get(kind, []))

    def items(self) -> Iterator[tuple[ConcernType, list[str]]]:
        for kind, messages in self._messages.items():
            if messages:
                yield kind, list(messages)

    def clear(self) -> None:
        self._messages.clear()

    @property
    def is_concerned(self) -> bool:
        return any(self._messages.values())

    def signature(self) -> tuple[tuple[str, tuple[str, ...]], ...]:
        """Order-independent identity used to decide whether siblings agree."""

        return tuple(
            sorted((kind.value, tuple(sorted(messages))) for kind, messages in self.items())
        )

    def lines(self) -> list[str]:
        """``* [kind] message`` lines, sorted."""

        return sorted(
            f"* [{kind.value}] {message}" for kind, messages in self.items() for message in messages
        )


def _roll_up(parent: Concerns, children: list[Concerns], label: str) -> bool:
    if len(children) < 2 or not all(child.is_concerned for child in children):
        return False
    signature = children[0].signature()
    if any(child.signature() != signature for child in children[1:]):
        return False
    for kind, messages in children[0].items():
        for message in messages:
            parent.add(kind, f"for all {label}: {message}")
    for child in children:
        child.clear()
    return True


class ConcernedTrack:
    __slots__ = ("concerns", "track")

    def __init__(self, track: Track) -> None:
        self.track = track
        self.concerns = Concerns()

    @property
    def name(self) -> str:
        return self.track.simple_name

    def add_concern(self, kind: ConcernType, message: str) -> None:
        self.concerns.add(kind, message)

    @property
    def is_concerned(self) -> bool:
        return self.concerns.is_concerned

    def render(self, depth: int = 2) -> list[str]:
        if not self.is_concerned:
            return []
        pad = " " * (INDENT * depth)
        return [f"{pad}Track {quoted(self.name)}"] + [
            f"{pad}{line}" for line in self.concerns.lines()
        ]


class ConcernedAlbum:
    __slots__ = ("album", "concerns", "tracks", "_track_map")

    def __init__(self, album: Album) -> None:
        self.album = album
        self.concerns = Concerns()
        self.tracks: list[ConcernedTrack] = []
        self._track_map: dict[str, ConcernedTrack] = {}
        for track in album.tracks:
            concerned = ConcernedTrack(track)
            self.tracks.append(concerned)
            self._track_map[track.file_name] = concerned

    @property
    def name(self) -> str:
        return self.album.title

    def add_concern(self, kind: ConcernType, message: str) -> None:
        self.concerns.add(kind, message)

    def lookup(self, track: Track) -> ConcernedTrack | None:
        return self._track_map.get(track.file_name)

    @property
    def is_concerned(self) -> bool:
        return self.concerns.is_concerned or any(t.is_concerned for t in self.tracks)

    def rollup(self) -> bool:
        """Lift concerns shared by every track into this album."""

        return _roll_up(self.concerns, [t.concerns for t in self.tracks], "tracks")

    def render(self, depth: int = 1) -> list[str]:
        if not self.is_concerned:
            return []
        pad = " " * (INDENT * depth)
        lines = [f"{pad}Album {quoted(self.name)}"]
        lines.extend(f"{pad}{line}" for line in self.concerns.lines())
        for concerned in sorted(self.tracks, key=lambda t: (t.name, t.track.file_name)):
            lines.extend(concerned.render(depth + 1))
        return lines


class ConcernedArtist:
    __slots__ = ("artist", "concerns", "albums", "_album_map")

    def __init__(self, artist: Artist) -> None:
        self.artist = artist
        self.concerns = Concerns()
        self.albums: list[ConcernedAlbum] = []
        self._album_map: dict[str, ConcernedAlbum] = {}
        for album in artist.albums:
            concerned = ConcernedAlbum(album)
            self.albums.append(concerned)
            self._album_map[album.title] = concerned

    @property
    def name(self) -> str:
        return self.artist.name

    def add_concern(self, kind: ConcernType, message: str) -> None:
        self.concerns.add(kind, message)

    def lookup(self, track: Track) -> ConcernedTrack | None:
        concerned_album = self._album_map.get(track.album_name)
        if concerned_album is None:
            return None
        return concerned_album.lookup(track)

    @property
    def is_concerned(self) -> bool:
        return self.concerns.is_concerned or any(a.is_concerned for a in self.albums)

    def rollup(self) -> bool:
        """Roll up each album, then lift concerns shared by every album."""

        for concerned_album in self.albums:
            _ = concerned_album.rollup()
        return _roll_up(self.concerns, [a.concerns for a in self.albums], "albums")

    def render(self) -> list[str]:
        if not self.is_concerned:
            return []
        lines = [f"Artist {quoted(self.name)}"]
        lines.extend(self.concerns.lines())
        for concerned in sorted(self.albums, key=lambda a: a.name):
            lines.extend(concerned.render())
        return lines


def prepare_concerned_artists(artists: Iterable[Artist]) -> list[ConcernedArtist]:
    return [ConcernedArtist(artist) for artist in artists]


def lookup_track(concerned_artists: Iterable[ConcernedArtist], track: Track) -> ConcernedTrack | None:
    """Find the concerned node for ``track``, which may belong to a copied graph."""

    artist_name = track.artist_name
    for concerned_artist in concerned_artists:
        if concerned_artist.name != artist_name:
            continue
        found = concerned_artist.lookup(track)
        if found is not None:
            return found
    return None


def render_concerns(concerned_artists: Iterable[ConcernedArtist]) -> list[str]:
    """Render every concerned artist, sorted by name."""

    lines: list[str] = []
    for concerned in sorted(concerned_artists, key=lambda a: a.name):
        lines.extend(concerned.render())
    return lines


__all__ = [
    "ConcernType",
    "ConcernedAlbum",
    "ConcernedArtist",
    "ConcernedTrack",
    "Concerns",
    "lookup_track",
    "prepare_concerned_artists",
    "render_concerns",
]
