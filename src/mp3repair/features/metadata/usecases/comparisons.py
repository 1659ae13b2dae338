"""Where: features/metadata/usecases/comparisons.py
What: Rules deciding whether a metadata value agrees with its expected value.
Why: The analyzer and write-differences must agree exactly, or a repaired
     track would still report problems.
"""

from __future__ import annotations

from ..domain.charmap import substitute, to_v1_text
from ..domain.genres import is_known_genre, normalize_genre_name
from ..domain.models import (
    SOURCE_ORDER,
    FieldDifference,
    MetadataField,
    SourceMetadata,
    SourceType,
    TrackMetadata,
)
from .id3v1 import V1_MAX_TRACK, V1_NAME_LENGTH


def years_match(metadata_year: str, album_year: str) -> bool:
    """Compare years by prefix, so "1999" agrees with "1999-05-01"."""

    if len(metadata_year) < len(album_year):
        return metadata_year != "" and album_year.startswith(metadata_year)
    if len(metadata_year) > len(album_year):
        return album_year != "" and metadata_year.startswith(album_year)
    return metadata_year == album_year


def _same_name(external: str, metadata: str) -> bool:
    external = external.lower()
    metadata = metadata.lower().rstrip(" ")
    return metadata == external or substitute(metadata) == external


def v2_name_matches(external: str, metadata: str) -> bool:
    return _same_name(external, metadata)


def v1_name_matches(external: str, metadata: str) -> bool:
    """Compare against the form ``external`` takes once written to a v1 field."""

    folded = to_v1_text(external)[:V1_NAME_LENGTH].rstrip(" ")
    return _same_name(folded, metadata) or _same_name(external, metadata)


def v1_genre_matches(external: str, metadata: str) -> bool:
    if not is_known_genre(external) and normalize_genre_name(metadata) == "other":
        return True
    return normalize_genre_name(external) == normalize_genre_name(metadata)


def v2_genre_matches(external: str, metadata: str) -> bool:
    return normalize_genre_name(external) == normalize_genre_name(metadata)


_NAME_MATCHERS = {SourceType.ID3V1: v1_name_matches, SourceType.ID3V2: v2_name_matches}
_GENRE_MATCHERS = {SourceType.ID3V1: v1_genre_matches, SourceType.ID3V2: v2_genre_matches}


def name_matches(source: SourceType, external: str, metadata: str) -> bool:
    return _NAME_MATCHERS[source](external, metadata)


def _track_number_required(source: SourceType, number: int) -> bool:
    if source is SourceType.ID3V1:
        return 1 <= number <= V1_MAX_TRACK
    return number != 0


def source_differences(
    source: SourceType,
    actual: SourceMetadata,
    expected: SourceMetadata,
) -> list[FieldDifference]:
    """List the fields of ``actual`` that disagree with ``expected``.

    Empty expected values place no requirement and are skipped, as does a
    track number the one-byte v1 field cannot hold.
    """

    found: list[FieldDifference] = []

    def _add(metadata_field: MetadataField, actual_value: object, expected_value: object) -> None:
        found.append(FieldDifference(source, metadata_field, actual_value, expected_value))

    if _track_number_required(source, expected.track_number) and (
        actual.track_number != expected.track_number
    ):
        _add(MetadataField.TRACK_NUMBER, actual.track_number, expected.track_number)
    names = (
        (MetadataField.TRACK_NAME, actual.track_name, expected.track_name),
        (MetadataField.ALBUM_NAME, actual.album_name, expected.album_name),
        (MetadataField.ARTIST_NAME, actual.artist_name, expected.artist_name),
    )
    for metadata_field, actual_name, expected_name in names:
        if expected_name and not name_matches(source, expected_name, actual_name):
            _add(metadata_field, actual_name, expected_name)
    if expected.genre and not _GENRE_MATCHERS[source](expected.genre, actual.genre):
        _add(MetadataField.GENRE, actual.genre, expected.genre)
    if expected.year and not years_match(actual.year, expected.year):
        _add(MetadataField.YEAR, actual.year, expected.year)
    if (
        source is SourceType.ID3V2
        and expected.cd_identifier
        and actual.cd_identifier != expected.cd_identifier
    ):
        _add(MetadataField.CD_IDENTIFIER, actual.cd_identifier, expected.cd_identifier)
    return found


def track_differences(metadata: TrackMetadata, expected: TrackMetadata) -> list[FieldDifference]:
    """Differences across every source that was read without error."""

    found: list[FieldDifference] = []
    for source in SOURCE_ORDER:
        actual = metadata.source(source)
        if actual.ok:
            found.extend(source_differences(source, actual, expected.source(source)))
    return found


__all__ = [
    "name_matches",
    "source_differences",
    "track_differences",
    "v1_genre_matches",
    "v1_name_matches",
    "v2_genre_matches",
    "v2_name_matches",
    "years_match",
]
