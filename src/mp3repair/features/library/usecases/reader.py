"""Where: features/library/usecases/reader.py
What: Read metadata for every track in parallel under an open-file budget.
Why: Large libraries hold thousands of tracks; reading them one at a time
     is dominated by file latency.
Assumptions: - Each task writes only its own Track.metadata.
             - Per-track failures are recorded in the metadata, never raised.
Trade-offs: - The worker pool is capped separately from the semaphore; the
              semaphore still bounds open files when the pool is larger.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import final

from mp3repair.config.settings import MAX_OPEN_FILES, MAX_READER_WORKERS, MIN_OPEN_FILES
from mp3repair.features.metadata import TrackMetadata, read_track_metadata
from mp3repair.platform.filesystem import FileSystem
from mp3repair.platform.output import OutputBus

from ..domain.models import Artist, Track, all_tracks

ProgressCallback = Callable[[int, int, Path], None]
MetadataLoader = Callable[[Path, FileSystem], TrackMetadata]


def clamp_open_file_limit(limit: int) -> int:
    return max(MIN_OPEN_FILES, min(MAX_OPEN_FILES, limit))


@final
class MetadataReader:
    """Populate ``Track.metadata`` for every track of a graph."""

    def __init__(
        self,
        bus: OutputBus,
        filesystem: FileSystem,
        *,
        loader: MetadataLoader = read_track_metadata,
    ) -> None:
        self.bus = bus
        self.filesystem = filesystem
        self._loader = loader

    def read(
        self,
        artists: list[Artist],
        open_file_limit: int,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Read every unread track; returns once all reads have finished.

        Args:
            artists: Graph whose tracks are read.
            open_file_limit: Maximum number of simultaneously open track files.
            progress_callback: Called with ``(completed, total, path)`` as
                each read finishes.
        """
        pending = [track for track in all_tracks(artists) if track.metadata is None]
        if not pending:
            return
        self.bus.console_print("Reading track metadata.")
        limit = clamp_open_file_limit(open_file_limit)
        permits = threading.BoundedSemaphore(limit)
        counter_lock = threading.Lock()
        total = len(pending)
        completed = 0

        def _read_one(track: Track) -> None:
            nonlocal completed
            with permits:
                track.metadata = self._loader(track.path, self.filesystem)
            with counter_lock:
                completed += 1
                done = completed
            if progress_callback is not None:
                progress_callback(done, total, track.path)

        workers = min(limit, MAX_READER_WORKERS, total)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="mp3-reader") as executor:
            futures = [executor.submit(_read_one, track) for track in pending]
            for future in as_completed(futures):
                future.result()

        self._report_read_errors(pending)

    def _report_read_errors(self, tracks: list[Track]) -> None:
        for track in tracks:
            if track.metadata is None:
                continue
            for source, error in track.metadata.errors().items():
                self.bus.log(
                    logging.ERROR,
                    "metadata read error",
                    {"metadata": source.value, "track": str(track), "error": error},
                )


__all__ = ["MetadataReader", "ProgressCallback", "clamp_open_file_limit"]
