"""Tests for the concurrent metadata reader."""

import threading
import time
from pathlib import Path

import pytest

from mp3repair.features.library import Album, Artist, MetadataReader, Track, clamp_open_file_limit
from mp3repair.features.metadata import SourceMetadata, SourceType, TrackMetadata
from mp3repair.platform.filesystem import FileSystem, LocalFileSystem
from support import CapturedBus


def _artists(track_count: int) -> list[Artist]:
    artist = Artist(name="Band", path=Path("/music/Band"))
    album = Album(title="Record", path=artist.path / "Record")
    artist.add_album(album)
    for number in range(1, track_count + 1):
        album.add_track(
            Track(path=album.path / f"{number:02d} Song {number}.mp3", simple_name=f"Song {number}", number=number)
        )
    return [artist]


@pytest.mark.parametrize(("limit", "expected"), [(0, 1), (-5, 1), (1000, 1000), (100000, 32767)])
def test_clamp_open_file_limit(limit: int, expected: int) -> None:
    assert clamp_open_file_limit(limit) == expected


def test_reads_every_track_within_the_open_file_limit(captured_bus: CapturedBus) -> None:
    artists = _artists(20)
    lock = threading.Lock()
    active = 0
    peak = 0

    def _loader(path: Path, filesystem: FileSystem) -> TrackMetadata:
        nonlocal active, peak
        _ = filesystem
        with lock:
            active += 1
            peak = max(peak, active)
        time.sleep(0.005)
        with lock:
            active -= 1
        return TrackMetadata(v2=SourceMetadata(track_name=path.stem), canonical_source=SourceType.ID3V2)

    progress: list[tuple[int, int]] = []
    reader = MetadataReader(captured_bus.bus, LocalFileSystem(), loader=_loader)

    reader.read(artists, 3, lambda done, total, _path: progress.append((done, total)))

    tracks = artists[0].albums[0].tracks
    assert all(t.metadata is not None for t in tracks)
    assert peak <= 3
    assert sorted(progress) == [(n, 20) for n in range(1, 21)]
    assert captured_bus.out_lines() == ["Reading track metadata."]


def test_skips_tracks_already_read(captured_bus: CapturedBus) -> None:
    artists = _artists(2)
    existing = TrackMetadata()
    artists[0].albums[0].tracks[0].metadata = existing
    calls: list[Path] = []

    def _loader(path: Path, filesystem: FileSystem) -> TrackMetadata:
        _ = filesystem
        calls.append(path)
        return TrackMetadata()

    MetadataReader(captured_bus.bus, LocalFileSystem(), loader=_loader).read(artists, 10)

    assert calls == [artists[0].albums[0].tracks[1].path]
    assert artists[0].albums[0].tracks[0].metadata is existing


def test_read_errors_are_logged(captured_bus: CapturedBus, caplog: pytest.LogCaptureFixture) -> None:
    artists = _artists(1)

    def _loader(path: Path, filesystem: FileSystem) -> TrackMetadata:
        _ = (path, filesystem)
        return TrackMetadata(
            v1=SourceMetadata(error="no ID3V1 metadata found"),
            v2=SourceMetadata(track_number=1),
            canonical_source=SourceType.ID3V2,
        )

    with caplog.at_level("ERROR", logger="mp3repair"):
        MetadataReader(captured_bus.bus, LocalFileSystem(), loader=_loader).read(artists, 1)

    records = [r for r in caplog.records if r.getMessage() == "metadata read error"]
    assert len(records) == 1
    assert records[0].fields["metadata"] == "ID3V1"


def test_nothing_to_read_prints_nothing(captured_bus: CapturedBus) -> None:
    MetadataReader(captured_bus.bus, LocalFileSystem()).read(_artists(0), 10)

    assert captured_bus.out == ""
