"""Application service shared by every command that walks the library."""

from __future__ import annotations

from typing import final

from mp3repair.features.analysis import derive_canonical_values
from mp3repair.features.library import (
    Artist,
    LibraryScanner,
    MetadataReader,
    ProgressCallback,
    SearchSettings,
)
from mp3repair.platform.filesystem import FileSystem, LocalFileSystem
from mp3repair.platform.output import OutputBus
from mp3repair.shared import FlagValues


@final
class LibraryService:
    """Application facade over the scanner and the concurrent reader."""

    bus: OutputBus
    filesystem: FileSystem

    def __init__(
        self,
        bus: OutputBus,
        *,
        filesystem: FileSystem | None = None,
        reader: MetadataReader | None = None,
    ) -> None:
        self.bus = bus
        self.filesystem = filesystem or LocalFileSystem()
        self._scanner = LibraryScanner(bus, self.filesystem)
        self._reader = reader or MetadataReader(bus, self.filesystem)

    def search_settings(self, values: FlagValues) -> SearchSettings | None:
        return SearchSettings.from_values(self.bus, values, self.filesystem)

    def load(self, settings: SearchSettings) -> list[Artist]:
        return self._scanner.load(settings)

    def filter(self, settings: SearchSettings, artists: list[Artist]) -> list[Artist]:
        return self._scanner.filter(settings, artists)

    def load_filtered(self, settings: SearchSettings) -> list[Artist]:
        return self._scanner.scan(settings)

    def read_metadata(
        self,
        artists: list[Artist],
        open_file_limit: int,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Read every track, then settle album and artist canonical values."""

        self._reader.read(artists, open_file_limit, progress_callback)
        derive_canonical_values(self.bus, artists)


__all__ = ["LibraryService"]
