"""Application service for the ``postRepair`` command."""

from __future__ import annotations

from typing import final

from mp3repair.features.library import SearchSettings
from mp3repair.features.repair import BackupCleaner
from mp3repair.shared import ExitStatus

from .library_service import LibraryService


@final
class PostRepairService:
    def __init__(self, library: LibraryService) -> None:
        self.library = library
        self.cleaner = BackupCleaner(library.bus, library.filesystem)

    def run(self, settings: SearchSettings) -> ExitStatus:
        artists = self.library.load_filtered(settings)
        if not artists:
            return ExitStatus.USER_ERROR
        return self.cleaner.remove_backups(artists)


__all__ = ["PostRepairService"]
