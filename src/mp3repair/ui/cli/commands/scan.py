"""Scan command implementation for the CLI."""

from __future__ import annotations

from typing import final

from mp3repair.application.services import ScanRequest, ScanService
from mp3repair.shared import ExitStatus, FlagValue, get_bool
from mp3repair.ui.cli.commands.executor import CommandExecutor
from mp3repair.ui.cli.display.concerns import ConcernsDisplay

SCAN_CHECK_FLAGS: tuple[tuple[str, str], ...] = (
    ("empty", "--empty"),
    ("files", "--files"),
    ("numbering", "--numbering"),
)


@final
class ScanCommand(CommandExecutor):
    """Run the requested checks and print the concern tree."""

    def execute(self) -> ExitStatus:
        checks = {name: FlagValue(*get_bool(self.args.values, name)) for name, _ in SCAN_CHECK_FLAGS}
        if not self.has_work_to_do(checks):
            return ExitStatus.USER_ERROR
        settings = self.search_settings()
        if settings is None:
            return ExitStatus.USER_ERROR
        limit = self.open_file_limit()
        request = ScanRequest(
            empty=checks["empty"].value,
            files=checks["files"].value,
            numbering=checks["numbering"].value,
            open_file_limit=limit,
        )
        service = ScanService(self.library)
        report = self.progress_display.run(lambda cb: service.run(settings, request, cb))
        if report is None:
            return ExitStatus.USER_ERROR
        ConcernsDisplay(self.bus).show_report(
            report, empty=request.empty, numbering=request.numbering, files=request.files
        )
        return ExitStatus.SUCCESS

    def has_work_to_do(self, checks: dict[str, FlagValue]) -> bool:
        """Explain, on the error console, why nothing would be scanned."""

        if any(flag.value for flag in checks.values()):
            return True
        user_set = [option for name, option in SCAN_CHECK_FLAGS if checks[name].user_set]
        configured = [option for name, option in SCAN_CHECK_FLAGS if not checks[name].user_set]
        self.bus.error_print("No scans will be performed.")
        self.bus.error_print("Why?")
        if not user_set:
            self.bus.error_print("The flags --empty, --files, and --numbering are all configured false.")
        elif not configured:
            self.bus.error_print("You explicitly set --empty, --files, and --numbering false.")
        else:
            self.bus.error_printf(
                "In addition to %s configured false, you explicitly set %s false.",
                " and ".join(configured),
                " and ".join(user_set),
            )
        self.bus.error_print("What to do:")
        self.bus.error_print("Either:")
        self.bus.begin_error_list(True)
        self.bus.error_print("Edit the configuration file so that at least one of these flags is true, or")
        self.bus.error_print("Explicitly set at least one of these flags true on the command line.")
        self.bus.end_error_list()
        return False


__all__ = ["ScanCommand"]
