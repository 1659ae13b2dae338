"""Where: platform/output.py
What: The output bus shared by every command: console, error console and log.
Why: Commands print user-facing text and structured logs through one object
     so tests can capture both streams with in-memory consoles.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, final

from rich.console import Console

from .logging import logger as app_logger


@final
class OutputBus:
    """Route console text, error text and structured log records.

    Text is printed literally: rich markup, highlighting and emoji codes are
    disabled so bracketed strings such as ``[empty]`` survive unchanged.
    """

    console: Console
    error_console: Console
    logger: logging.Logger

    def __init__(
        self,
        *,
        console: Console | None = None,
        error_console: Console | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.console = console or Console(soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, soft_wrap=True)
        self.logger = logger or app_logger
        self._list_depth: list[int | None] = []

    def console_print(self, text: str = "") -> None:
        """Print one line on the console."""

        self._emit(self.console, text)

    def console_printf(self, template: str, *args: Any) -> None:
        """Print ``template % args`` on the console."""

        self._emit(self.console, template % args if args else template)

    def error_print(self, text: str = "") -> None:
        """Print one line on the error console."""

        if self._list_depth:
            counter = self._list_depth[-1]
            if counter is None:
                text = f"* {text}"
            else:
                counter += 1
                self._list_depth[-1] = counter
                text = f"{counter}. {text}"
        self._emit(self.error_console, text)

    def error_printf(self, template: str, *args: Any) -> None:
        """Print ``template % args`` on the error console."""

        self.error_print(template % args if args else template)

    def begin_error_list(self, numbered: bool) -> None:
        """Start prefixing error lines as list items."""

        self._list_depth.append(0 if numbered else None)

    def end_error_list(self) -> None:
        """Stop the innermost error list."""

        if self._list_depth:
            _ = self._list_depth.pop()

    def log(self, level: int, message: str, fields: Mapping[str, Any] | None = None) -> None:
        """Emit a structured log record."""

        self.logger.log(level, message, extra={"fields": dict(fields or {})})

    @staticmethod
    def _emit(target: Console, text: str) -> None:
        for line in text.rstrip("\n").split("\n"):
            target.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


__all__ = ["OutputBus"]
