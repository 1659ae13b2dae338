"""Tests for reconciling track metadata with the library layout."""

from pathlib import Path

from mp3repair.features.analysis import (
    conflict_messages,
    expected_metadata,
    reconcile,
    report_metadata_problems,
)
from mp3repair.features.analysis.usecases.reconcile import (
    CORRUPT_PROBLEM,
    NO_METADATA_PROBLEM,
    NOT_READ_PROBLEM,
)
from mp3repair.features.library import Album, Artist, Track
from mp3repair.features.metadata import MetadataField, SourceMetadata, SourceType, TrackMetadata


def _track(**v2_values: object) -> Track:
    artist = Artist(name="A", path=Path("/music/A"))
    album = Album(title="X", path=artist.path / "X", genre="Rock", year="1999")
    artist.add_album(album)
    track = Track(path=album.path / "02 title.mp3", simple_name="title", number=2)
    album.add_track(track)
    values: dict[str, object] = {
        "artist_name": "A",
        "album_name": "X",
        "track_name": "title",
        "track_number": 2,
        "genre": "Rock",
        "year": "1999",
    }
    values.update(v2_values)
    track.metadata = TrackMetadata(
        v1=SourceMetadata(error="no ID3V1 metadata found"),
        v2=SourceMetadata(**values),  # pyright: ignore[reportArgumentType]
        canonical_source=SourceType.ID3V2,
    )
    return track


def test_expected_metadata_uses_canonical_values() -> None:
    track = _track()
    assert track.album is not None
    track.album.canonical_title = "X (Deluxe)"
    track.album.cd_identifier = b"\x01"

    expected = expected_metadata(track)

    assert expected.v2.album_name == "X (Deluxe)"
    assert expected.v2.cd_identifier == b"\x01"
    assert expected.v1.cd_identifier == b""
    assert expected.v1.track_number == 2


def test_consistent_track_has_no_problems() -> None:
    track = _track()

    assert report_metadata_problems(track) == []
    assert not reconcile(track).has_conflicts


def test_unread_track() -> None:
    track = _track()
    track.metadata = None

    assert report_metadata_problems(track) == [NOT_READ_PROBLEM]


def test_track_without_any_tags() -> None:
    track = _track()
    track.metadata = TrackMetadata(
        v1=SourceMetadata(error="no ID3V1 metadata found"),
        v2=SourceMetadata(error="no ID3V2 metadata found"),
    )

    assert report_metadata_problems(track) == [NO_METADATA_PROBLEM]


def test_corrupt_track() -> None:
    track = _track()
    track.metadata = TrackMetadata(
        v1=SourceMetadata(error="no ID3V1 metadata found"),
        v2=SourceMetadata(error="frame size exceeds tag size"),
    )

    assert report_metadata_problems(track) == [CORRUPT_PROBLEM]


def test_differences_are_described_and_sorted() -> None:
    track = _track(track_number=3, track_name="Other")

    assert report_metadata_problems(track) == [
        "ID3V2 metadata [3] does not agree with track number 2",
        'ID3V2 metadata [Other] does not agree with track name "title"',
    ]


def test_cd_identifier_difference_is_rendered_as_hex() -> None:
    track = _track()
    assert track.album is not None
    track.album.cd_identifier = b"\x01\x02"

    assert report_metadata_problems(track) == [
        'ID3V2 metadata [] does not agree with the MCDI frame "0102"'
    ]


def test_conflict_messages_follow_field_order() -> None:
    state = reconcile(_track(track_name="Other", track_number=3, year="2001"))

    assert state.has_conflict(MetadataField.YEAR)
    assert conflict_messages(state) == [
        "the track number field does not match the track's file name",
        "the track name field does not match the track's file name",
        "the year field does not match the other tracks in the album",
    ]
