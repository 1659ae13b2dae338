"""Where: features/analysis/usecases/reconcile.py
What: Compare a track's metadata with its file name, album and artist.
Why: ``scan --files`` reports the differences and ``repair`` fixes them;
     both must see the same set.
Assumptions: - Canonical album and artist values are derived before reconciling.
"""

from __future__ import annotations

from dataclasses import dataclass

from mp3repair.features.library import Track
from mp3repair.features.metadata import (
    MISSING_METADATA_MESSAGES,
    FieldDifference,
    MetadataField,
    SourceType,
    TrackMetadata,
    track_differences,
)
from mp3repair.shared import quoted

NOT_READ_PROBLEM = "differences cannot be determined: metadata has not been read"
CORRUPT_PROBLEM = "differences cannot be determined: track metadata may be corrupted"
NO_METADATA_PROBLEM = "differences cannot be determined: the track file contains no metadata"

CONFLICT_SENTENCES: dict[MetadataField, str] = {
    MetadataField.ARTIST_NAME: (
        "the artist name field does not match the name of the artist directory"
    ),
    MetadataField.ALBUM_NAME: "the album name field does not match the name of the album directory",
    MetadataField.GENRE: "the genre field does not match the other tracks in the album",
    MetadataField.CD_IDENTIFIER: (
        "the music CD identifier field does not match the other tracks in the album"
    ),
    MetadataField.TRACK_NUMBER: "the track number field does not match the track's file name",
    MetadataField.TRACK_NAME: "the track name field does not match the track's file name",
    MetadataField.YEAR: "the year field does not match the other tracks in the album",
}


@dataclass(slots=True, frozen=True)
class MetadataState:
    """Outcome of reconciling one track."""

    not_read: bool = False
    corrupt: bool = False
    no_metadata: bool = False
    differences: tuple[FieldDifference, ...] = ()

    def has_conflict(self, metadata_field: MetadataField) -> bool:
        return any(d.field is metadata_field for d in self.differences)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.differences)

    def conflicting_fields(self) -> list[MetadataField]:
        return [f for f in MetadataField if self.has_conflict(f)]


def expected_metadata(track: Track) -> TrackMetadata:
    """The values ``track`` should carry, from its name and its album and artist."""

    album = track.album
    artist = album.artist if album is not None else None
    return TrackMetadata.expected(
        track_number=track.number,
        track_name=track.simple_name,
        album_name=album.canonical_title if album is not None else "",
        artist_name=artist.canonical_name if artist is not None else "",
        year=album.year if album is not None else "",
        genre=album.genre if album is not None else "",
        cd_identifier=album.cd_identifier if album is not None else b"",
    )


def reconcile(track: Track) -> MetadataState:
    metadata = track.metadata
    if metadata is None:
        return MetadataState(not_read=True)
    errors = metadata.errors()
    if len(errors) == 2 and set(errors.values()) <= MISSING_METADATA_MESSAGES:
        return MetadataState(no_metadata=True)
    if not metadata.is_valid:
        return MetadataState(corrupt=True)
    return MetadataState(differences=tuple(track_differences(metadata, expected_metadata(track))))


def _render_value(value: object) -> str:
    if isinstance(value, bytes):
        return value.hex()
    return str(value)


def _describe(difference: FieldDifference) -> str:
    actual = _render_value(difference.actual)
    expected = difference.expected
    if difference.field is MetadataField.CD_IDENTIFIER:
        return (
            f"{SourceType.ID3V2.value} metadata [{actual}] does not agree with the MCDI frame"
            f' "{_render_value(expected)}"'
        )
    if difference.field is MetadataField.TRACK_NUMBER:
        rendered = str(expected)
    else:
        rendered = quoted(expected)
    return (
        f"{difference.source.value} metadata [{actual}] does not agree with"
        f" {difference.field.value} {rendered}"
    )


def report_metadata_problems(track: Track) -> list[str]:
    """Describe every way ``track``'s metadata disagrees with its surroundings, sorted."""

    state = reconcile(track)
    if state.corrupt:
        return [CORRUPT_PROBLEM]
    if state.no_metadata:
        return [NO_METADATA_PROBLEM]
    if state.not_read:
        return [NOT_READ_PROBLEM]
    return sorted(_describe(difference) for difference in state.differences)


def conflict_messages(state: MetadataState) -> list[str]:
    """One fixed sentence per conflicting field."""

    return [CONFLICT_SENTENCES[f] for f in state.conflicting_fields()]


__all__ = [
    "CONFLICT_SENTENCES",
    "CORRUPT_PROBLEM",
    "MetadataState",
    "NOT_READ_PROBLEM",
    "NO_METADATA_PROBLEM",
    "conflict_messages",
    "expected_metadata",
    "reconcile",
    "report_metadata_problems",
]
