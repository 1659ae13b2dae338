"""Test configuration management."""

from pathlib import Path

import pytest

from mp3repair.config.config import Config, ConfigError


def test_missing_file_yields_empty_config(app_data_dir: Path) -> None:
    config = Config.load()

    assert config.log_file is None
    assert config.section("scan") == {}
    assert not (app_data_dir / "config.toml").exists()


def test_load_sections_and_log_file(app_data_dir: Path) -> None:
    _ = (app_data_dir / "config.toml").write_text(
        'log_file = "/tmp/mp3repair/app.log"\n'
        "\n"
        "[scan]\n"
        "files = true\n"
        "\n"
        "[search]\n"
        'topDir = "/music"\n'
        "\n"
        "[io]\n"
        "maxOpenFiles = 50\n",
        encoding="utf-8",
    )

    config = Config.load()

    assert config.log_file == Path("/tmp/mp3repair/app.log")
    assert config.section("scan") == {"files": True}
    assert config.section("search") == {"topDir": "/music"}
    assert config.section("io") == {"maxOpenFiles": 50}


def test_load_is_cached_until_reset(app_data_dir: Path) -> None:
    first = Config.load()
    _ = (app_data_dir / "config.toml").write_text("[list]\ntracks = true\n", encoding="utf-8")

    assert Config.load() is first

    Config.reset()
    assert Config.load().section("list") == {"tracks": True}


def test_invalid_toml_raises(app_data_dir: Path) -> None:
    _ = (app_data_dir / "config.toml").write_text("[scan\nfiles = ", encoding="utf-8")

    with pytest.raises(ConfigError):
        _ = Config.load()


def test_from_mapping_rejects_non_string_log_file() -> None:
    with pytest.raises(ConfigError):
        _ = Config.from_mapping({"log_file": 3})


def test_from_mapping_ignores_unknown_top_level_values() -> None:
    config = Config.from_mapping({"colour": "blue", "repair": {"dryRun": True}})

    assert config.log_file is None
    assert config.sections == {"repair": {"dryRun": True}}
