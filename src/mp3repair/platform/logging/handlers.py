"""Where: platform/logging/handlers.py
What: Render structured log fields for the console and the log file.
Why: Log calls carry ``extra={"fields": {...}}``; both sinks must show them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


def record_fields(record: logging.LogRecord) -> Mapping[str, Any]:
    """Return the structured fields attached to ``record`` (possibly empty)."""

    fields = getattr(record, "fields", None)
    if isinstance(fields, Mapping):
        return fields
    return {}


def format_fields(fields: Mapping[str, Any]) -> str:
    """Render fields as space separated ``key=value`` pairs, sorted by key."""

    parts: list[str] = []
    for key in sorted(fields):
        value = fields[key]
        rendered = f'"{value}"' if isinstance(value, str) and " " in value else str(value)
        parts.append(f"{key}={rendered}")
    return " ".join(parts)


class FieldsRichHandler(RichHandler):
    """Rich handler that appends structured fields to each message."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        fields = record_fields(record)
        if not fields:
            return super().render_message(record, message)

        text = Text(message)
        for key in sorted(fields):
            _ = text.append(" ")
            _ = text.append(key, style=Style(color="cyan"))
            _ = text.append("=", style=Style(color="magenta"))
            _ = text.append(str(fields[key]), style=Style(color="white"))
        return text


class FieldsFormatter(logging.Formatter):
    """Plain-text formatter that appends structured fields."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        rendered = super().format(record)
        fields = record_fields(record)
        if fields:
            rendered = f"{rendered} {format_fields(fields)}"
        return rendered


__all__ = ["FieldsFormatter", "FieldsRichHandler", "format_fields", "record_fields"]
