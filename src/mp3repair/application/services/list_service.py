"""Application service for the ``list`` command."""

from __future__ import annotations

from typing import final

from mp3repair.features.library import Artist, ProgressCallback, SearchSettings, Track
from mp3repair.features.metadata import read_v1_diagnostics

from .library_service import LibraryService


@final
class ListService:
    def __init__(self, library: LibraryService) -> None:
        self.library = library

    def load(
        self,
        settings: SearchSettings,
        *,
        with_metadata: bool,
        open_file_limit: int,
        progress_callback: ProgressCallback | None = None,
    ) -> list[Artist] | None:
        """Load the filtered library, reading metadata when details are wanted.

        Returns:
            The artists, or None when nothing could be listed.
        """
        artists = self.library.load_filtered(settings)
        if not artists:
            return None
        if with_metadata:
            self.library.read_metadata(artists, open_file_limit, progress_callback)
        return artists

    def v1_diagnostics(self, track: Track) -> list[str]:
        """Raises the codec's error when the track has no readable v1 trailer."""

        return read_v1_diagnostics(track.path, self.library.filesystem)


__all__ = ["ListService"]
