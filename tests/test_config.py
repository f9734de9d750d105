"""Tests for TOML-based application config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.config import DEFAULT_CONFIG_PATH, default_app_config, load_app_config


def test_load_app_config_from_file(tmp_path: Path) -> None:
    config_path = tmp_path / "paintraid.toml"
    config_path.write_text(
        """
[storage]
db_url = "sqlite:///roster.db"
teams_key = "teams.v2"
matches_key = "matches.v2"

[logging]
level = "debug"
json = true
""".strip()
    )

    config = load_app_config(config_path)

    assert config.file_path == config_path
    assert config.storage.db_url == "sqlite:///roster.db"
    assert config.storage.teams_key == "teams.v2"
    assert config.storage.matches_key == "matches.v2"
    assert config.logging.level == "DEBUG"
    assert config.logging.json is True


def test_defaults_when_sections_omitted(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.toml"
    config_path.write_text("")

    config = load_app_config(config_path)

    assert config.storage == default_app_config().storage
    assert config.storage.teams_key == "savedTeams"
    assert config.storage.matches_key == "savedMatches"
    assert config.logging.level == "INFO"
    assert config.logging.json is False


def test_shipped_config_loads() -> None:
    config = load_app_config(DEFAULT_CONFIG_PATH)
    assert config.as_config_json()["storage"]["teams_key"] == "savedTeams"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_app_config(tmp_path / "nope.toml")


def test_empty_key_raises_validation_error(tmp_path: Path) -> None:
    config_path = tmp_path / "invalid.toml"
    config_path.write_text('[storage]\nteams_key = "  "\n')

    with pytest.raises(ValueError, match=r"\[storage\].teams_key must not be empty"):
        load_app_config(config_path)


def test_identical_keys_raise_validation_error(tmp_path: Path) -> None:
    config_path = tmp_path / "same.toml"
    config_path.write_text('[storage]\nteams_key = "roster"\nmatches_key = "roster"\n')

    with pytest.raises(ValueError, match="must differ"):
        load_app_config(config_path)


def test_unknown_log_level_raises_validation_error(tmp_path: Path) -> None:
    config_path = tmp_path / "level.toml"
    config_path.write_text('[logging]\nlevel = "chatty"\n')

    with pytest.raises(ValueError, match=r"\[logging\].level"):
        load_app_config(config_path)
