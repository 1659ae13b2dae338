"""Render the concern tree produced by ``scan``."""

from typing import final

from mp3repair.application.services import ScanReport
from mp3repair.features.analysis import render_concerns
from mp3repair.platform.output import OutputBus


@final
class ConcernsDisplay:
    """Prints concerns, then a clean line for each check that found nothing."""

    def __init__(self, bus: OutputBus) -> None:
        self.bus = bus

    def show_report(self, report: ScanReport, *, empty: bool, numbering: bool, files: bool) -> None:
        for line in render_concerns(report.concerned_artists):
            self.bus.console_print(line)
        if empty and not report.empty_found:
            self.bus.console_print("Empty Folder Analysis: no empty folders found.")
        if numbering and not report.numbering_found:
            self.bus.console_print("Numbering Analysis: no missing or duplicate tracks found.")
        if files and not report.files_found:
            self.bus.console_print("File Analysis: no inconsistencies found.")


__all__ = ["ConcernsDisplay"]
