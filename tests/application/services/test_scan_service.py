"""Tests for the scan application service."""

import re
from collections.abc import Callable
from pathlib import Path

from mp3repair.application.services import LibraryService, ScanRequest, ScanService
from mp3repair.features.library import SearchSettings
from mp3repair.features.analysis import render_concerns
from support import CapturedBus


def _settings(root: Path, track_filter: str = ".*") -> SearchSettings:
    return SearchSettings(
        music_root=root,
        artist_filter=re.compile(".*"),
        album_filter=re.compile(".*"),
        track_filter=re.compile(track_filter),
        extensions=(".mp3",),
    )


def test_file_check_sees_only_filtered_tracks(
    captured_bus: CapturedBus, tmp_path: Path, track_factory: Callable[..., Path]
) -> None:
    root = tmp_path / "music"
    _ = track_factory(root, "A", "X", 1, "one", tagged_number=4)
    _ = track_factory(root, "A", "X", 2, "two", tagged_number=5)
    service = ScanService(LibraryService(captured_bus.bus))

    report = service.run(_settings(root, "^one$"), ScanRequest(files=True))

    assert report is not None
    assert report.files_found
    lines = render_concerns(report.concerned_artists)
    assert '    Track "one"' in lines
    assert '    Track "two"' not in lines


def test_clean_albums_render_only_empty_folders(
    captured_bus: CapturedBus, tmp_path: Path, track_factory: Callable[..., Path]
) -> None:
    root = tmp_path / "music"
    _ = track_factory(root, "A", "X", 1, "one", year="1999")
    _ = track_factory(root, "A", "X", 2, "two", year="1999")
    _ = track_factory(root, "A", "Y", 1, "three")
    (root / "A" / "Z").mkdir()
    service = ScanService(LibraryService(captured_bus.bus))

    report = service.run(_settings(root), ScanRequest(empty=True, numbering=True, files=True))

    assert report is not None
    assert report.empty_found
    assert not report.numbering_found
    assert not report.files_found
    assert render_concerns(report.concerned_artists) == [
        'Artist "A"',
        '  Album "Z"',
        "  * [empty] no tracks found",
    ]


def test_missing_artists_yield_no_report(captured_bus: CapturedBus, tmp_path: Path) -> None:
    root = tmp_path / "music"
    root.mkdir()

    assert ScanService(LibraryService(captured_bus.bus)).run(_settings(root), ScanRequest(empty=True)) is None
    assert captured_bus.err_lines()[0] == "No music files could be found using the specified parameters."


def test_shared_track_findings_roll_up(
    captured_bus: CapturedBus, tmp_path: Path, track_factory: Callable[..., Path]
) -> None:
    root = tmp_path / "music"
    _ = track_factory(root, "Someone Else", "X", 1, "one")
    _ = track_factory(root, "Someone Else", "X", 2, "two")
    _ = (root / "Someone Else").rename(root / "A")
    service = ScanService(LibraryService(captured_bus.bus))

    report = service.run(_settings(root), ScanRequest(files=True))

    assert report is not None
    assert render_concerns(report.concerned_artists) == [
        'Artist "A"',
        '  Album "X"',
        '  * [files] for all tracks: ID3V1 metadata [Someone Else] does not agree with artist name "A"',
        '  * [files] for all tracks: ID3V2 metadata [Someone Else] does not agree with artist name "A"',
    ]
