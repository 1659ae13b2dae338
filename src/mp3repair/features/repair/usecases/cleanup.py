"""Delete the backup directories left behind by repair."""

from __future__ import annotations

import logging
from typing import final

from mp3repair.features.library import Artist
from mp3repair.platform.filesystem import FileSystem
from mp3repair.platform.output import OutputBus
from mp3repair.shared import ExitStatus

from ..domain.backups import backup_directory


@final
class BackupCleaner:
    def __init__(self, bus: OutputBus, filesystem: FileSystem) -> None:
        self.bus = bus
        self.filesystem = filesystem

    def remove_backups(self, artists: list[Artist]) -> ExitStatus:
        """Remove each album's backup directory; any failure yields SYSTEM_ERROR."""

        status = ExitStatus.SUCCESS
        directories = sorted(
            directory
            for artist in artists
            for album in artist.albums
            if self.filesystem.is_dir(directory := backup_directory(album))
        )
        self.bus.console_printf("Backup directories to delete: %d.", len(directories))
        if not directories:
            return status
        deleted = 0
        for directory in directories:
            try:
                self.filesystem.remove_tree(directory)
            except OSError as e:
                self.bus.log(
                    logging.ERROR,
                    "cannot delete directory",
                    {"directory": str(directory), "error": str(e)},
                )
                status = ExitStatus.SYSTEM_ERROR
                continue
            self.bus.log(logging.INFO, "directory deleted", {"directory": str(directory)})
            deleted += 1
        self.bus.console_printf("Backup directories deleted: %d.", deleted)
        return status


__all__ = ["BackupCleaner"]
