"""Where: features/metadata/usecases/id3v1.py
What: Parse and serialize the fixed 128-byte ID3v1.1 trailer.
Why: mutagen can only rebuild the trailer from v2 frames; edits to
     individual v1 fields need a codec of their own.
Assumptions: - The trailer occupies the last 128 bytes and starts with "TAG".
Trade-offs: - Text is folded to ASCII on write, so non-ASCII names lose accents.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO, Final

from ..domain.charmap import to_v1_text
from ..domain.errors import NoID3V1MetadataError
from ..domain.genres import OTHER_GENRE_CODE, genre_code, genre_name
from ..domain.models import SourceMetadata

V1_TAG_LENGTH: Final[int] = 128
V1_NAME_LENGTH: Final[int] = 30
V1_MAX_TRACK: Final[int] = 255
_SIGNATURE: Final[bytes] = b"TAG"


@dataclass(frozen=True, slots=True)
class _Field:
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


_TITLE = _Field(3, V1_NAME_LENGTH)
_ARTIST = _Field(33, V1_NAME_LENGTH)
_ALBUM = _Field(63, V1_NAME_LENGTH)
_YEAR = _Field(93, 4)
_COMMENT = _Field(97, 28)
_ZERO_BYTE = 125
_TRACK = 126
_GENRE = 127


class ID3V1Tag:
    """Mutable view over a 128-byte trailer."""

    def __init__(self, data: bytes | None = None) -> None:
        if data is None:
            data = _SIGNATURE + bytes(V1_TAG_LENGTH - len(_SIGNATURE))
        if len(data) != V1_TAG_LENGTH:
            raise ValueError(f"ID3v1 trailer must be {V1_TAG_LENGTH} bytes, got {len(data)}")
        self._data = bytearray(data)

    @property
    def is_valid(self) -> bool:
        return bytes(self._data[: len(_SIGNATURE)]) == _SIGNATURE

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def _read_text(self, spec: _Field) -> str:
        raw = bytes(self._data[spec.offset : spec.end])
        return raw.split(b"\x00", 1)[0].rstrip(b" ").decode("latin-1")

    def _write_text(self, spec: _Field, value: str) -> None:
        encoded = to_v1_text(value).encode("ascii", errors="replace")[: spec.length]
        self._data[spec.offset : spec.end] = encoded.ljust(spec.length, b"\x00")

    @property
    def title(self) -> str:
        return self._read_text(_TITLE)

    @title.setter
    def title(self, value: str) -> None:
        self._write_text(_TITLE, value)

    @property
    def artist(self) -> str:
        return self._read_text(_ARTIST)

    @artist.setter
    def artist(self, value: str) -> None:
        self._write_text(_ARTIST, value)

    @property
    def album(self) -> str:
        return self._read_text(_ALBUM)

    @album.setter
    def album(self, value: str) -> None:
        self._write_text(_ALBUM, value)

    @property
    def year(self) -> str:
        return self._read_text(_YEAR)

    @year.setter
    def year(self, value: str) -> None:
        self._write_text(_YEAR, value)

    @property
    def comment(self) -> str:
        return self._read_text(_COMMENT)

    @property
    def track(self) -> int | None:
        """Track number; only ID3v1.1 trailers (zero byte cleared) carry one."""

        if self._data[_ZERO_BYTE] != 0:
            return None
        return self._data[_TRACK]

    def set_track(self, number: int) -> bool:
        if not 1 <= number <= V1_MAX_TRACK:
            return False
        self._data[_ZERO_BYTE] = 0
        self._data[_TRACK] = number
        return True

    @property
    def genre(self) -> str | None:
        return genre_name(self._data[_GENRE])

    @genre.setter
    def genre(self, value: str) -> None:
        code = genre_code(value)
        self._data[_GENRE] = OTHER_GENRE_CODE if code is None else code

    def to_source_metadata(self) -> SourceMetadata:
        return SourceMetadata(
            artist_name=self.artist,
            album_name=self.album,
            track_name=self.title,
            track_number=self.track or 0,
            year=self.year,
            genre=self.genre or "",
            comment=self.comment,
        )

    def diagnostics(self) -> list[str]:
        """Describe every populated field, one ``Name: value`` line each."""

        lines = [f"Artist: {self.artist}", f"Album: {self.album}", f"Title: {self.title}"]
        if (track := self.track) is not None:
            lines.append(f"Track: {track}")
        lines.append(f"Year: {self.year}")
        if (genre := self.genre) is not None:
            lines.append(f"Genre: {genre}")
        if comment := self.comment:
            lines.append(f"Comment: {comment}")
        return lines


def read_v1_tag(fileobj: BinaryIO) -> ID3V1Tag:
    """Read the trailer from an open file.

    Raises:
        NoID3V1MetadataError: When the file is too short or lacks the signature.
        OSError: When the file cannot be read.
    """
    size = fileobj.seek(0, io.SEEK_END)
    if size < V1_TAG_LENGTH:
        raise NoID3V1MetadataError()
    _ = fileobj.seek(-V1_TAG_LENGTH, io.SEEK_END)
    data = fileobj.read(V1_TAG_LENGTH)
    if len(data) != V1_TAG_LENGTH:
        raise OSError(f"only {len(data)} bytes of ID3v1 metadata could be read")
    tag = ID3V1Tag(data)
    if not tag.is_valid:
        raise NoID3V1MetadataError()
    return tag


def write_v1_tag(fileobj: BinaryIO, tag: ID3V1Tag) -> None:
    """Overwrite the trailing 128 bytes of an open file with ``tag``."""

    _ = fileobj.seek(-V1_TAG_LENGTH, io.SEEK_END)
    written = fileobj.write(tag.to_bytes())
    if written != V1_TAG_LENGTH:
        raise OSError(f"wrote {written} bytes of ID3v1 metadata, expected {V1_TAG_LENGTH}")


__all__ = [
    "ID3V1Tag",
    "V1_MAX_TRACK",
    "V1_NAME_LENGTH",
    "V1_TAG_LENGTH",
    "read_v1_tag",
    "write_v1_tag",
]
