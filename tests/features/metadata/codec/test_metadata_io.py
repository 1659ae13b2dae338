"""Tests for reading both sources and writing only the differences."""

from pathlib import Path
from typing import Callable

import pytest
from mutagen.id3 import ID3, Encoding, Frames, ID3v1SaveOptions

from mp3repair.features.metadata import (
    FieldDifference,
    MetadataField,
    NoEditRequiredError,
    NoID3V1MetadataError,
    SourceType,
    TrackMetadata,
    read_track_metadata,
    read_v1_diagnostics,
    write_differences,
)
from mp3repair.features.metadata.usecases.id3v1 import ID3V1Tag
from mp3repair.features.metadata.usecases.metadata_io import apply_v1_differences
from mp3repair.platform.filesystem import LocalFileSystem
from support import PAYLOAD

FRAMES = {"TIT2": "Song", "TPE1": "Band", "TALB": "Record", "TRCK": "99", "TYER": "1999", "TCON": "Rock"}
V1 = {"title": "Song", "artist": "Band", "album": "Record", "year": "1999", "genre": "Rock", "track": 99}


def _expected(number: int = 1) -> TrackMetadata:
    return TrackMetadata.expected(
        track_number=number,
        track_name="Song",
        album_name="Record",
        artist_name="Band",
        year="1999",
        genre="Rock",
    )


def test_read_both_sources(tmp_path: Path, mp3_factory: Callable[..., Path]) -> None:
    path = mp3_factory(tmp_path / "01 Song.mp3", frames=FRAMES, v1=V1)

    metadata = read_track_metadata(path, LocalFileSystem())

    assert metadata.canonical_source is SourceType.ID3V2
    assert metadata.errors() == {}
    assert metadata.v2.track_number == 99
    assert metadata.v1.track_number == 99
    assert metadata.v1.genre == "Rock"


def test_read_falls_back_to_v1(tmp_path: Path, mp3_factory: Callable[..., Path]) -> None:
    path = mp3_factory(tmp_path / "01 Song.mp3", v1=V1)

    metadata = read_track_metadata(path, LocalFileSystem())

    assert metadata.canonical_source is SourceType.ID3V1
    assert metadata.errors() == {SourceType.ID3V2: "no ID3V2 metadata found"}


def test_read_missing_file_records_both_errors(tmp_path: Path) -> None:
    metadata = read_track_metadata(tmp_path / "missing.mp3", LocalFileSystem())

    assert not metadata.is_valid
    assert set(metadata.errors()) == {SourceType.ID3V1, SourceType.ID3V2}


def test_write_differences_fixes_both_sources(
    tmp_path: Path, mp3_factory: Callable[..., Path]
) -> None:
    path = mp3_factory(tmp_path / "01 Song.mp3", frames=FRAMES, v1=V1)
    filesystem = LocalFileSystem()

    assert write_differences(path, _expected(1), filesystem) == []

    metadata = read_track_metadata(path, filesystem)
    assert metadata.v2.track_number == 1
    assert metadata.v1.track_number == 1
    assert metadata.v1.track_name == "Song"
    assert metadata.v1.genre == "Rock"
    assert metadata.v2.track_name == "Song"


def test_write_differences_is_idempotent(tmp_path: Path, mp3_factory: Callable[..., Path]) -> None:
    path = mp3_factory(tmp_path / "01 Song.mp3", frames=FRAMES, v1=V1)
    filesystem = LocalFileSystem()
    assert write_differences(path, _expected(1), filesystem) == []
    before = path.read_bytes()

    errors = write_differences(path, _expected(1), filesystem)

    assert len(errors) == 1
    assert isinstance(errors[0], NoEditRequiredError)
    assert path.read_bytes() == before


def test_write_differences_reports_unopenable_file(tmp_path: Path) -> None:
    errors = write_differences(tmp_path / "missing.mp3", _expected(), LocalFileSystem())

    assert len(errors) == 1
    assert isinstance(errors[0], OSError)


def test_v1_diagnostics(tmp_path: Path, mp3_factory: Callable[..., Path]) -> None:
    path = mp3_factory(tmp_path / "01 Song.mp3", v1=V1)

    lines = read_v1_diagnostics(path, LocalFileSystem())

    assert "Track: 99" in lines
    assert "Genre: Rock" in lines


def test_v1_diagnostics_without_trailer(tmp_path: Path, mp3_factory: Callable[..., Path]) -> None:
    path = mp3_factory(tmp_path / "01 Song.mp3", frames=FRAMES)

    with pytest.raises(NoID3V1MetadataError):
        _ = read_v1_diagnostics(path, LocalFileSystem())


def test_v1_track_number_that_does_not_fit_is_an_error() -> None:
    tag = ID3V1Tag()
    difference = FieldDifference(SourceType.ID3V1, MetadataField.TRACK_NUMBER, 1, 300)

    with pytest.raises(ValueError, match="does not fit"):
        apply_v1_differences(tag, [difference])


def test_write_differences_leaves_oversized_v1_track_number(
    tmp_path: Path, mp3_factory: Callable[..., Path]
) -> None:
    frames = FRAMES | {"TRCK": "1"}
    path = mp3_factory(tmp_path / "300 Song.mp3", frames=frames, v1=V1 | {"track": 1})
    filesystem = LocalFileSystem()

    assert write_differences(path, _expected(300), filesystem) == []

    metadata = read_track_metadata(path, filesystem)
    assert metadata.v2.track_number == 300
    assert metadata.v1.track_number == 1
    assert isinstance(write_differences(path, _expected(300), filesystem)[0], NoEditRequiredError)


@pytest.mark.parametrize(
    ("v2_version", "encoding"),
    [
        (3, Encoding.UTF16),
        (4, Encoding.UTF8),
        (4, Encoding.UTF16BE),
    ],
)
def test_write_differences_keeps_frame_encoding_and_payload(
    tmp_path: Path, v2_version: int, encoding: Encoding
) -> None:
    path = tmp_path / "01 Song.mp3"
    _ = path.write_bytes(PAYLOAD)
    tags = ID3()
    for frame_id, text in FRAMES.items():
        tags.add(Frames[frame_id](encoding=encoding, text=[text]))
    tags.save(path, v1=ID3v1SaveOptions.REMOVE, v2_version=v2_version)

    assert write_differences(path, _expected(1), LocalFileSystem()) == []

    after = ID3(path)
    assert after.version == (2, v2_version, 0)
    assert after["TRCK"].text == ["1"]
    assert after["TRCK"].encoding == encoding
    assert after["TIT2"].encoding == encoding
    assert path.read_bytes().endswith(PAYLOAD)
