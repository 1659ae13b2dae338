"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, setup helper and custom handlers.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import FieldsFormatter, FieldsRichHandler, format_fields

__all__ = [
    "FieldsFormatter",
    "FieldsRichHandler",
    "LOGGER_NAME",
    "format_fields",
    "logger",
    "setup_logger",
]
