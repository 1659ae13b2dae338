"""Smoke tests for unified entry points.

These tests assert that `python -m mp3repair` and the console script
both resolve to the CLI's `main` function exposed under `mp3repair.ui.cli.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m mp3repair` path exposes a `main` callable."""
    m = import_module("mp3repair.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `mp3repair.ui.cli.cli:main` and is importable."""
    m = import_module("mp3repair.ui.cli.cli")
    assert callable(m.main)
