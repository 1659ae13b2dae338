"""Repair command implementation for the CLI."""

from __future__ import annotations

from typing import final

from mp3repair.application.services import RepairService, RepairServiceRequest
from mp3repair.shared import ExitStatus, get_bool
from mp3repair.ui.cli.commands.executor import CommandExecutor


@final
class RepairCommand(CommandExecutor):
    """Back up and rewrite conflicted tracks, or list them with ``--dryRun``."""

    def execute(self) -> ExitStatus:
        dry_run, _ = get_bool(self.args.values, "dryRun")
        settings = self.search_settings()
        if settings is None:
            return ExitStatus.USER_ERROR
        request = RepairServiceRequest(dry_run=dry_run, open_file_limit=self.open_file_limit())
        service = RepairService(self.library, app_data_dir=self.app_data_dir)
        artists = self.progress_display.run(lambda cb: service.prepare(settings, request, cb))
        if artists is None:
            return ExitStatus.USER_ERROR
        return service.repair(artists, request)


__all__ = ["RepairCommand"]
