"""Application service for the ``scan`` command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import final

from mp3repair.features.analysis import (
    ConcernedArtist,
    analyze_empty,
    analyze_files,
    analyze_numbering,
    prepare_concerned_artists,
)
from mp3repair.features.library import ProgressCallback, SearchSettings

from .library_service import LibraryService


@dataclass(slots=True)
class ScanRequest:
    """Which checks to run."""

    empty: bool = False
    files: bool = False
    numbering: bool = False
    open_file_limit: int = 1000


@dataclass(slots=True)
class ScanReport:
    """Concerns found, with one flag per check telling whether it found any."""

    concerned_artists: list[ConcernedArtist] = field(default_factory=list)
    empty_found: bool = False
    numbering_found: bool = False
    files_found: bool = False


@final
class ScanService:
    def __init__(self, library: LibraryService) -> None:
        self.library = library

    def run(
        self,
        settings: SearchSettings,
        request: ScanRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> ScanReport | None:
        """Run the requested checks and roll up the findings.

        Empty-folder and numbering checks see the whole library; the file
        check sees only the filtered tracks.

        Returns:
            The report, or None when no artist directories were found.
        """
        artists = self.library.load(settings)
        if not artists:
            return None
        report = ScanReport(concerned_artists=prepare_concerned_artists(artists))
        if request.empty:
            report.empty_found = analyze_empty(report.concerned_artists)
        if request.numbering:
            report.numbering_found = analyze_numbering(report.concerned_artists)
        if request.files:
            filtered = self.library.filter(settings, artists)
            if filtered:
                self.library.read_metadata(filtered, request.open_file_limit, progress_callback)
                report.files_found = analyze_files(report.concerned_artists, filtered)
        for concerned_artist in report.concerned_artists:
            _ = concerned_artist.rollup()
        return report


__all__ = ["ScanReport", "ScanRequest", "ScanService"]
