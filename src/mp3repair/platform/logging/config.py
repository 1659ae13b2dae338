"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure handlers and expose the shared application logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import FieldsFormatter, FieldsRichHandler


LOGGER_NAME: Final[str] = "mp3repair"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up and configure the application logger.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output. Defaults to WARNING.
        file_level: Logging level for file output. Defaults to DEBUG.

    Returns:
        logging.Logger: Configured logger instance.
    """
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)

    for handler in list(configured.handlers):
        handler.close()
    configured.handlers.clear()

    file_formatter = FieldsFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console = Console(stderr=True, soft_wrap=True)
    console_handler = FieldsRichHandler(console=console)
    console_handler.setLevel(console_level)
    configured.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        configured.addHandler(file_handler)

    return configured


# Shared application logger; handlers are attached by setup_logger at startup.
logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
