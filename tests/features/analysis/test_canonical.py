"""Tests for majority-vote canonical values."""

from collections import Counter
from pathlib import Path

import pytest

from mp3repair.features.analysis import canonical_choice, derive_canonical_values, encode_choices
from mp3repair.features.library import Album, Artist, Track
from mp3repair.features.metadata import SourceMetadata, SourceType, TrackMetadata
from support import CapturedBus


def _album_with(records: list[SourceMetadata]) -> tuple[Artist, Album]:
    artist = Artist(name="A", path=Path("/music/A"))
    album = Album(title="X", path=artist.path / "X")
    artist.add_album(album)
    for number, record in enumerate(records, start=1):
        track = Track(path=album.path / f"{number:02d} t{number}.mp3", simple_name=f"t{number}", number=number)
        track.metadata = TrackMetadata(
            v1=SourceMetadata(error="no ID3V1 metadata found"),
            v2=record,
            canonical_source=SourceType.ID3V2,
        )
        album.add_track(track)
    return artist, album


@pytest.mark.parametrize(
    ("votes", "expected"),
    [
        (Counter({"a": 2, "b": 1}), ("a", True)),
        (Counter({"a": 1, "b": 1}), ("", False)),
        (Counter({"a": 2, "b": 2}), ("", False)),
        (Counter(), ("", True)),
    ],
)
def test_canonical_choice(votes: Counter[str], expected: tuple[str, bool]) -> None:
    assert canonical_choice(votes) == expected


def test_encode_choices() -> None:
    assert encode_choices(Counter({"b": 2, "a": 1})) == '{"a": 1 instance, "b": 2 instances}'


def test_derive_canonical_values_by_majority(captured_bus: CapturedBus) -> None:
    records = [
        SourceMetadata(artist_name="the a", album_name="x", genre="Rock", year="1999", cd_identifier=b"\x01"),
        SourceMetadata(artist_name="the a", album_name="x", genre="Rock", year="1999", cd_identifier=b"\x01"),
        SourceMetadata(artist_name="A", album_name="X", genre="Jazz", year="1999", cd_identifier=b"\x02"),
    ]
    artist, album = _album_with(records)

    derive_canonical_values(captured_bus.bus, [artist])

    assert album.genre == "Rock"
    assert album.year == "1999"
    assert album.canonical_title == "x"
    assert album.cd_identifier == b"\x01"
    # "the a" does not match the directory name, so only "A" votes.
    assert artist.canonical_name == "A"
    assert captured_bus.err == ""


def test_unknown_genres_do_not_vote(captured_bus: CapturedBus) -> None:
    records = [
        SourceMetadata(genre="Unknown"),
        SourceMetadata(genre="Rock"),
    ]
    artist, album = _album_with(records)

    derive_canonical_values(captured_bus.bus, [artist])

    assert album.genre == "Rock"


def test_ambiguous_genre_is_reported(captured_bus: CapturedBus) -> None:
    artist, album = _album_with([SourceMetadata(genre="Rock"), SourceMetadata(genre="Jazz")])

    derive_canonical_values(captured_bus.bus, [artist])

    assert album.genre == ""
    assert captured_bus.err_lines() == [
        'There are multiple genre fields for "X by A", and there is no unambiguously preferred'
        ' choice; candidates are {"Jazz": 1 instance, "Rock": 1 instance}.'
    ]


def test_tracks_without_valid_metadata_do_not_vote(captured_bus: CapturedBus) -> None:
    artist, album = _album_with([SourceMetadata(genre="Rock")])
    stray = Track(path=album.path / "02 stray.mp3", simple_name="stray", number=2)
    stray.metadata = TrackMetadata(
        v1=SourceMetadata(error="bad"),
        v2=SourceMetadata(error="bad"),
    )
    album.add_track(stray)

    derive_canonical_values(captured_bus.bus, [artist])

    assert album.genre == "Rock"
