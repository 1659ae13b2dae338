"""Shared path utilities for configuration and data locations.

This module centralizes how the application discovers the locations of
its configuration file, its log file and the metadata dirty marker.

Policy:
- App data: ``~/.mp3repair`` unless overridden by ``MP3REPAIR_APPDATA_DIR``.
- Config: ``<app data>/config.toml``.
- Logs: ``<app data>/logs/mp3repair.log``.
- Music: ``~/Music`` is the default library root.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_APPDATA_DIR: Final[str] = "MP3REPAIR_APPDATA_DIR"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_app_data_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory holding configuration, logs and the dirty marker."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_APPDATA_DIR,
        default_factory=lambda: Path.home() / ".mp3repair",
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default path to the TOML config file."""

    return default_app_data_dir(env) / "config.toml"


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return default_app_data_dir(env) / "logs" / "mp3repair.log"


def default_music_dir() -> Path:
    """Get the default root of the music library."""

    return (Path.home() / "Music").resolve()


__all__ = [
    "default_app_data_dir",
    "default_config_path",
    "default_log_file",
    "default_music_dir",
    "resolve_overridable_path",
]
