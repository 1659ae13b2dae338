"""Repair: backed-up metadata rewrites, backup cleanup and the dirty marker."""

from .domain.backups import backup_directory, backup_path
from .usecases.cleanup import BackupCleaner
from .usecases.dirty import DirtyMarker
from .usecases.engine import NOTHING_TO_DO, MetadataWriter, RepairEngine

__all__ = [
    "BackupCleaner",
    "DirtyMarker",
    "MetadataWriter",
    "NOTHING_TO_DO",
    "RepairEngine",
    "backup_directory",
    "backup_path",
]
