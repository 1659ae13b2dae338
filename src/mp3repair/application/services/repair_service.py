"""Application service for the ``repair`` command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import final

from mp3repair.config.paths import default_app_data_dir
from mp3repair.features.analysis import prepare_concerned_artists
from mp3repair.features.library import Artist, ProgressCallback, SearchSettings
from mp3repair.features.metadata import write_differences
from mp3repair.features.repair import DirtyMarker, MetadataWriter, RepairEngine
from mp3repair.shared import ExitStatus

from .library_service import LibraryService


@dataclass(slots=True)
class RepairServiceRequest:
    dry_run: bool = False
    open_file_limit: int = 1000


@final
class RepairService:
    """Application facade wiring the library, the engine and the dirty marker."""

    def __init__(
        self,
        library: LibraryService,
        *,
        app_data_dir: Path | None = None,
        writer: MetadataWriter = write_differences,
    ) -> None:
        self.library = library
        self.dirty_marker = DirtyMarker(app_data_dir or default_app_data_dir(), library.filesystem)
        self.engine = RepairEngine(library.bus, library.filesystem, self.dirty_marker, writer=writer)

    def prepare(
        self,
        settings: SearchSettings,
        request: RepairServiceRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> list[Artist] | None:
        """Load the filtered library and read its metadata.

        Returns:
            The artists, or None when nothing was found to repair.
        """
        artists = self.library.load_filtered(settings)
        if not artists:
            return None
        self.library.read_metadata(artists, request.open_file_limit, progress_callback)
        return artists

    def repair(self, artists: list[Artist], request: RepairServiceRequest) -> ExitStatus:
        return self.engine.run(prepare_concerned_artists(artists), request.dry_run)

    def run(
        self,
        settings: SearchSettings,
        request: RepairServiceRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> ExitStatus:
        artists = self.prepare(settings, request, progress_callback)
        if artists is None:
            return ExitStatus.USER_ERROR
        return self.repair(artists, request)


__all__ = ["RepairService", "RepairServiceRequest"]
