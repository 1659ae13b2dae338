"""postRepair command implementation for the CLI."""

from __future__ import annotations

from typing import final

from mp3repair.application.services import PostRepairService
from mp3repair.shared import ExitStatus
from mp3repair.ui.cli.commands.executor import CommandExecutor


@final
class PostRepairCommand(CommandExecutor):
    """Delete the backup directories left behind by ``repair``."""

    def execute(self) -> ExitStatus:
        settings = self.search_settings()
        if settings is None:
            return ExitStatus.USER_ERROR
        return PostRepairService(self.library).run(settings)


__all__ = ["PostRepairCommand"]
