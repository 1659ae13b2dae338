"""src/mp3repair/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Every command validates the search flags, bounds the open-file limit
     and shows reader progress the same way.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from mp3repair.application.services import LibraryService
from mp3repair.features.library import SearchSettings, clamp_open_file_limit
from mp3repair.platform.filesystem import FileSystem
from mp3repair.platform.output import OutputBus
from mp3repair.shared import ExitStatus, get_int
from mp3repair.ui.cli.args.options import CLIArgs
from mp3repair.ui.cli.display.progress import ProgressDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    bus: OutputBus
    library: LibraryService
    progress_display: ProgressDisplay

    def __init__(
        self,
        args: CLIArgs,
        *,
        bus: OutputBus | None = None,
        filesystem: FileSystem | None = None,
        app_data_dir: Path | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            bus: Output destination; defaults to stdout, stderr and the package logger.
            filesystem: Filesystem adapter; defaults to the local filesystem.
            app_data_dir: Directory holding the dirty marker.
        """
        self.args = args
        self.bus = bus or OutputBus()
        self.library = LibraryService(self.bus, filesystem=filesystem)
        self.app_data_dir = app_data_dir
        self.progress_display = ProgressDisplay(self.bus.error_console)

    @abstractmethod
    def execute(self) -> ExitStatus:
        """Execute the command.

        Returns:
            The process exit status.
        """

    def search_settings(self) -> SearchSettings | None:
        return self.library.search_settings(self.args.values)

    def open_file_limit(self) -> int:
        """The ``--maxOpenFiles`` value, clamped into its bounds."""

        raw_value, _ = get_int(self.args.values, "maxOpenFiles")
        limit = clamp_open_file_limit(raw_value)
        if limit != raw_value:
            self.bus.log(
                logging.WARNING,
                "user-supplied value replaced",
                {"flag": "--maxOpenFiles", "providedValue": raw_value, "replacedBy": limit},
            )
        return limit


__all__ = ["CommandExecutor"]
