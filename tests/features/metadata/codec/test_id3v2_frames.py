"""Tests for the ID3v2 helpers layered over mutagen."""

from pathlib import Path
from typing import Callable

import pytest

from mp3repair.features.metadata import NoID3V2MetadataError
from mp3repair.features.metadata.domain.errors import TrackNumberError
from mp3repair.features.metadata.usecases.id3v2 import (
    interpret_genre,
    load_v2_tag,
    parse_track_number,
    to_source_metadata,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("7", 7), ("07/12", 7), ("\ufeff3", 3), ("12abc", 12)],
)
def test_parse_track_number(value: str, expected: int) -> None:
    assert parse_track_number(value) == expected


def test_parse_track_number_errors() -> None:
    with pytest.raises(TrackNumberError, match="track number is zero length"):
        _ = parse_track_number("")
    with pytest.raises(TrackNumberError, match="track number first character is not a digit"):
        _ = parse_track_number("x1")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("(17)", "Rock"),
        ("(17)Rock", "Rock"),
        ("17", "Rock"),
        ("(17)Jazz", "(17)Jazz"),
        ("Progressive Rock", "Progressive Rock"),
    ],
)
def test_interpret_genre(value: str, expected: str) -> None:
    assert interpret_genre(value) == expected


def test_load_and_project_frames(tmp_path: Path, mp3_factory: Callable[..., Path]) -> None:
    path = mp3_factory(
        tmp_path / "01 Song.mp3",
        frames={"TIT2": "Song", "TPE1": "Band", "TALB": "Record", "TRCK": "1/10", "TYER": "1999"},
        mcdi=b"\x01\x02",
    )
    with open(path, "rb") as fileobj:
        record = to_source_metadata(load_v2_tag(fileobj))

    assert record.track_name == "Song"
    assert record.artist_name == "Band"
    assert record.album_name == "Record"
    assert record.track_number == 1
    assert record.year == "1999"
    assert record.cd_identifier == b"\x01\x02"
    assert record.version == 3
    assert record.encoding == "ISO-8859-1"
    assert record.frame_strings["TIT2"] == ["Song"]


def test_load_without_tag(tmp_path: Path, mp3_factory: Callable[..., Path]) -> None:
    path = mp3_factory(tmp_path / "01 Song.mp3")
    with open(path, "rb") as fileobj, pytest.raises(NoID3V2MetadataError):
        _ = load_v2_tag(fileobj)
