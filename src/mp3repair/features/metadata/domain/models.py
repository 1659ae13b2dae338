"""Data structures describing the metadata embedded in a track file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SourceType(str, Enum):
    """The two tag formats a track file can carry."""

    ID3V1 = "ID3V1"
    ID3V2 = "ID3V2"


# Order in which sources are compared, written and reported.
SOURCE_ORDER: tuple[SourceType, ...] = (SourceType.ID3V1, SourceType.ID3V2)


class MetadataField(str, Enum):
    """Fields the analyzer checks and the repair engine rewrites."""

    TRACK_NUMBER = "track number"
    TRACK_NAME = "track name"
    ALBUM_NAME = "album name"
    ARTIST_NAME = "artist name"
    GENRE = "album genre"
    YEAR = "album year"
    CD_IDENTIFIER = "MCDI frame"


@dataclass(slots=True)
class SourceMetadata:
    """Values read from, or destined for, one tag format.

    Empty strings, ``0`` and ``b""`` mean "no value". When a record
    describes desired values, an empty field places no requirement on the
    file.
    """

    artist_name: str = ""
    album_name: str = ""
    track_name: str = ""
    track_number: int = 0
    year: str = ""
    genre: str = ""
    comment: str = ""
    cd_identifier: bytes = b""
    encoding: str = ""
    version: int = 0
    frame_strings: dict[str, list[str]] = field(default_factory=dict)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class TrackMetadata:
    """Both per-source records of a track plus the canonical-source tag."""

    v1: SourceMetadata = field(default_factory=SourceMetadata)
    v2: SourceMetadata = field(default_factory=SourceMetadata)
    canonical_source: SourceType | None = None

    def source(self, source_type: SourceType) -> SourceMetadata:
        return self.v1 if source_type is SourceType.ID3V1 else self.v2

    @property
    def is_valid(self) -> bool:
        return self.canonical_source is not None

    @property
    def canonical(self) -> SourceMetadata | None:
        if self.canonical_source is None:
            return None
        return self.source(self.canonical_source)

    def errors(self) -> dict[SourceType, str]:
        """Return the recorded read error of each failing source."""

        return {
            source_type: record.error
            for source_type in SOURCE_ORDER
            if (record := self.source(source_type)).error is not None
        }

    @classmethod
    def expected(
        cls,
        *,
        track_number: int,
        track_name: str,
        album_name: str,
        artist_name: str,
        year: str = "",
        genre: str = "",
        cd_identifier: bytes = b"",
    ) -> "TrackMetadata":
        """Build the values a track file should carry in both sources."""

        def _record(with_cd_identifier: bool) -> SourceMetadata:
            return SourceMetadata(
                artist_name=artist_name,
                album_name=album_name,
                track_name=track_name,
                track_number=track_number,
                year=year,
                genre=genre,
                cd_identifier=cd_identifier if with_cd_identifier else b"",
            )

        return cls(v1=_record(False), v2=_record(True))


@dataclass(slots=True, frozen=True)
class FieldDifference:
    """One field of one source that disagrees with its expected value."""

    source: SourceType
    field: MetadataField
    actual: object
    expected: object


__all__ = [
    "FieldDifference",
    "MetadataField",
    "SOURCE_ORDER",
    "SourceMetadata",
    "SourceType",
    "TrackMetadata",
]
