"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from mp3repair.config.config import Config
from support import CapturedBus, captured_output_bus, consistent_track, write_mp3


@pytest.fixture
def captured_bus() -> CapturedBus:
    """OutputBus whose consoles write into in-memory buffers."""

    return captured_output_bus()


@pytest.fixture
def mp3_factory() -> Callable[..., Path]:
    return write_mp3


@pytest.fixture
def track_factory() -> Callable[..., Path]:
    return consistent_track


@pytest.fixture
def app_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the app data directory at a temporary location and reset the config cache."""

    directory = tmp_path / "appdata"
    directory.mkdir()
    monkeypatch.setenv("MP3REPAIR_APPDATA_DIR", str(directory))
    Config.reset()
    try:
        yield directory
    finally:
        Config.reset()
