"""Where: src/mp3repair/config/settings.py
What: Constants shared by the scanner, reader and repair engine.
Why: Keep contract values (names, bounds, defaults) in one place.
Assumptions: - Values are fixed at import time; per-run tuning goes through flags.
Trade-offs: - No runtime override beyond the documented flags.
"""

from __future__ import annotations

from typing import Final

# Name of the per-album directory holding byte-exact copies of repaired tracks.
BACKUP_DIR_NAME: Final[str] = "pre-repair-backup"

# Marker written to the app data directory after metadata is rewritten.
DIRTY_FILE_NAME: Final[str] = "metadata.dirty"

# Open-file budget for the concurrent reader.
MIN_OPEN_FILES: Final[int] = 1
MAX_OPEN_FILES: Final[int] = 32767
DEFAULT_OPEN_FILES: Final[int] = 1000

# Worker threads never exceed this, whatever the open-file budget.
MAX_READER_WORKERS: Final[int] = 32

DEFAULT_EXTENSIONS: Final[str] = ".mp3"
DEFAULT_FILTER: Final[str] = ".*"

if not (MIN_OPEN_FILES <= DEFAULT_OPEN_FILES <= MAX_OPEN_FILES):
    raise ValueError("DEFAULT_OPEN_FILES must lie within the open-file bounds")

__all__ = [
    "BACKUP_DIR_NAME",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_FILTER",
    "DEFAULT_OPEN_FILES",
    "DIRTY_FILE_NAME",
    "MAX_OPEN_FILES",
    "MAX_READER_WORKERS",
    "MIN_OPEN_FILES",
]
