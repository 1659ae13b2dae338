"""Tests for the repair engine: dry runs, backups and rewrites."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from mp3repair.features.analysis import prepare_concerned_artists
from mp3repair.features.library import Album, Artist, Track
from mp3repair.features.metadata import (
    MetadataError,
    NoEditRequiredError,
    SourceMetadata,
    SourceType,
    TrackMetadata,
)
from mp3repair.features.repair import NOTHING_TO_DO, DirtyMarker, RepairEngine
from mp3repair.platform.filesystem import LocalFileSystem
from mp3repair.shared import ExitStatus
from support import CapturedBus


def _library(root: Path, *, conflicted: bool = True) -> tuple[Artist, Track]:
    artist = Artist(name="A", path=root / "A")
    album = Album(title="X", path=artist.path / "X")
    artist.add_album(album)
    album.path.mkdir(parents=True)
    track = Track(path=album.path / "02 two.mp3", simple_name="two", number=2)
    _ = track.path.write_bytes(b"original bytes")
    track.metadata = TrackMetadata(
        v1=SourceMetadata(error="no ID3V1 metadata found"),
        v2=SourceMetadata(
            artist_name="A",
            album_name="X",
            track_name="two",
            track_number=5 if conflicted else 2,
        ),
        canonical_source=SourceType.ID3V2,
    )
    album.add_track(track)
    return artist, track


@pytest.fixture
def writer(mocker: MockerFixture) -> MagicMock:
    return mocker.MagicMock(return_value=[])


def _engine(captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock) -> RepairEngine:
    filesystem = LocalFileSystem()
    marker = DirtyMarker(tmp_path / "appdata", filesystem)
    return RepairEngine(captured_bus.bus, filesystem, marker, writer=writer)


def test_dry_run_lists_conflicts_without_touching_files(
    captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock
) -> None:
    artist, track = _library(tmp_path / "music")
    engine = _engine(captured_bus, tmp_path, writer)

    status = engine.run(prepare_concerned_artists([artist]), dry_run=True)

    assert status is ExitStatus.SUCCESS
    assert captured_bus.out_lines() == [
        "The following concerns can be repaired:",
        'Artist "A"',
        '  Album "X"',
        '    Track "two"',
        "    * [metadata conflict] the track number field does not match the track's file name",
    ]
    writer.assert_not_called()
    assert not (track.path.parent / "pre-repair-backup").exists()


def test_dry_run_without_conflicts(captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock) -> None:
    artist, _ = _library(tmp_path / "music", conflicted=False)

    status = _engine(captured_bus, tmp_path, writer).run(prepare_concerned_artists([artist]), dry_run=True)

    assert status is ExitStatus.SUCCESS
    assert captured_bus.out_lines() == [NOTHING_TO_DO]


def test_nothing_to_repair(captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock) -> None:
    artist, _ = _library(tmp_path / "music", conflicted=False)

    status = _engine(captured_bus, tmp_path, writer).run(prepare_concerned_artists([artist]), dry_run=False)

    assert status is ExitStatus.SUCCESS
    assert captured_bus.out_lines() == [NOTHING_TO_DO]
    writer.assert_not_called()


def test_repair_backs_up_then_rewrites(captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock) -> None:
    artist, track = _library(tmp_path / "music")
    engine = _engine(captured_bus, tmp_path, writer)

    status = engine.run(prepare_concerned_artists([artist]), dry_run=False)

    backup = track.path.parent / "pre-repair-backup" / "2.mp3"
    assert status is ExitStatus.SUCCESS
    assert backup.read_bytes() == b"original bytes"
    assert captured_bus.out_lines() == [
        f'The track file "{track.path}" has been backed up to "{backup}".',
        f'"{track.path}" repaired.',
    ]
    writer.assert_called_once()
    path, expected, _ = writer.call_args.args
    assert path == track.path
    assert expected.v2.track_number == 2
    assert expected.v2.track_name == "two"
    assert (tmp_path / "appdata" / "metadata.dirty").is_file()


def test_existing_backup_blocks_repair(captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock) -> None:
    artist, track = _library(tmp_path / "music")
    backup_dir = track.path.parent / "pre-repair-backup"
    backup_dir.mkdir()
    backup = backup_dir / "2.mp3"
    _ = backup.write_bytes(b"older backup")

    status = _engine(captured_bus, tmp_path, writer).run(prepare_concerned_artists([artist]), dry_run=False)

    assert status is ExitStatus.SYSTEM_ERROR
    assert captured_bus.err_lines() == [
        f'The backup file for track file "{track.path}", "{backup}", already exists.',
        f'The track file "{track.path}" will not be repaired.',
    ]
    assert backup.read_bytes() == b"older backup"
    writer.assert_not_called()
    assert not (tmp_path / "appdata" / "metadata.dirty").exists()


def test_no_edit_required_is_silent(captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock) -> None:
    artist, track = _library(tmp_path / "music")
    writer.return_value = [NoEditRequiredError(), NoEditRequiredError()]

    status = _engine(captured_bus, tmp_path, writer).run(prepare_concerned_artists([artist]), dry_run=False)

    assert status is ExitStatus.SUCCESS
    assert f'"{track.path}" repaired.' not in captured_bus.out_lines()
    assert not (tmp_path / "appdata" / "metadata.dirty").exists()


def test_write_failure_is_reported(captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock) -> None:
    artist, track = _library(tmp_path / "music")
    writer.return_value = [MetadataError("disk full")]

    status = _engine(captured_bus, tmp_path, writer).run(prepare_concerned_artists([artist]), dry_run=False)

    assert status is ExitStatus.SYSTEM_ERROR
    assert captured_bus.err_lines() == [f'An error occurred repairing track "{track.path}".']


def test_unwritable_backup_directory(
    captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock, mocker: MockerFixture
) -> None:
    artist, track = _library(tmp_path / "music")
    engine = _engine(captured_bus, tmp_path, writer)
    _ = mocker.patch.object(LocalFileSystem, "mkdir", side_effect=PermissionError("denied"))

    status = engine.run(prepare_concerned_artists([artist]), dry_run=False)

    backup_dir = track.path.parent / "pre-repair-backup"
    assert status is ExitStatus.SYSTEM_ERROR
    assert captured_bus.err_lines() == [
        f'The directory "{backup_dir}" cannot be created: denied.',
        f'The track files in the directory "{track.path.parent}" will not be repaired.',
    ]
    writer.assert_not_called()


def test_every_repaired_track_marks_metadata_dirty(
    captured_bus: CapturedBus, tmp_path: Path, writer: MagicMock, mocker: MockerFixture
) -> None:
    artists: list[Artist] = []
    for artist_name in ("A", "B"):
        artist = Artist(name=artist_name, path=tmp_path / "music" / artist_name)
        for title in ("X", "Y", "Z"):
            album = Album(title=title, path=artist.path / title)
            artist.add_album(album)
            album.path.mkdir(parents=True)
            for number in range(1, 5):
                track = Track(path=album.path / f"{number:02d} t{number}.mp3", simple_name=f"t{number}", number=number)
                _ = track.path.write_bytes(b"audio")
                track.metadata = TrackMetadata(
                    v1=SourceMetadata(error="no ID3V1 metadata found"),
                    v2=SourceMetadata(track_name=f"t{number}", track_number=99),
                    canonical_source=SourceType.ID3V2,
                )
                album.add_track(track)
        artists.append(artist)
    marker = mocker.MagicMock(spec=DirtyMarker)
    engine = RepairEngine(captured_bus.bus, LocalFileSystem(), marker, writer=writer)

    status = engine.run(prepare_concerned_artists(artists), dry_run=False)

    assert status is ExitStatus.SUCCESS
    repaired = [line for line in captured_bus.out_lines() if line.endswith(" repaired.")]
    assert len(repaired) == 24
    assert marker.mark_dirty.call_count == 24
    assert writer.call_count == 24
