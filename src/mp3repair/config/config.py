"""Configuration management for mp3repair.

The configuration file is TOML. Top-level keys configure the application
itself; each table names a command section and maps flag names to the
default value that flag takes when the user does not set it::

    log_file = "/var/log/mp3repair.log"

    [scan]
    files = true

    [search]
    topDir = "/music"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from mp3repair.config.paths import default_config_path
from mp3repair.platform.logging import logger


class ConfigError(Exception):
    """Raised when the configuration file exists but cannot be used."""


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = None

    # Flag defaults keyed by command section, then flag name
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file) if self.log_file else None

    def section(self, name: str) -> dict[str, Any]:
        """Return the flag defaults configured for ``name`` (possibly empty)."""

        return self.sections.get(name, {})

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML content."""

        log_file: Any = None
        sections: dict[str, dict[str, Any]] = {}
        for key, value in raw.items():
            if isinstance(value, dict):
                sections[key] = dict(value)
            elif key == "log_file":
                log_file = value
            else:
                logger.warning(
                    "ignoring unknown configuration value",
                    extra={"fields": {"key": key, "value": value}},
                )
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(f"log_file must be a string, not {type(log_file).__name__}")
        return cls(log_file=log_file, sections=sections)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file is not an error: it yields an empty configuration so
        that every flag falls back to its built-in default.

        Args:
            path: Explicit configuration file; defaults to the policy location.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None and (path is None or path == cls._loaded_from):
            return cls._instance

        config_file = path or default_config_path()
        if not config_file.exists():
            logger.debug("no configuration file found at %s", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    raw = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"cannot read configuration file {config_file}: {e}") from e
            instance = cls.from_mapping(raw)
            logger.info("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` rereads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError"]
