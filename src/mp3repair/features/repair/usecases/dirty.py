"""Where: features/repair/usecases/dirty.py
What: The metadata dirty marker in the app data directory.
Why: Downstream caches of track metadata check the marker to learn that
     files were rewritten.
Assumptions: - Writing the marker is best effort; a failure is logged only.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import final

from mp3repair.config.settings import DIRTY_FILE_NAME
from mp3repair.platform.filesystem import FileSystem
from mp3repair.platform.output import OutputBus


@final
class DirtyMarker:
    def __init__(self, app_data_dir: Path, filesystem: FileSystem) -> None:
        self.app_data_dir = app_data_dir
        self.filesystem = filesystem

    @property
    def path(self) -> Path:
        return self.app_data_dir / DIRTY_FILE_NAME

    def is_dirty(self) -> bool:
        return self.filesystem.is_file(self.path)

    def mark_dirty(self, bus: OutputBus) -> None:
        """Write the marker unless it already exists."""

        if self.filesystem.exists(self.path):
            return
        try:
            if not self.filesystem.is_dir(self.app_data_dir):
                self.filesystem.mkdir(self.app_data_dir)
            self.filesystem.write_file(self.path, b"dirty")
        except OSError as e:
            bus.log(
                logging.ERROR,
                "cannot write metadata dirty file",
                {"fileName": str(self.path), "error": str(e)},
            )
            return
        bus.log(logging.INFO, "metadata dirty file written", {"fileName": str(self.path)})

    def clear_dirty(self, bus: OutputBus) -> None:
        if not self.is_dirty():
            return
        try:
            self.filesystem.remove(self.path)
        except OSError as e:
            bus.log(
                logging.ERROR,
                "cannot delete metadata dirty file",
                {"fileName": str(self.path), "error": str(e)},
            )
            return
        bus.log(logging.INFO, "metadata dirty file deleted", {"fileName": str(self.path)})


__all__ = ["DirtyMarker"]
