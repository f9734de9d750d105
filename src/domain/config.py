"""Load application settings from a TOML file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import tomllib

from app_logging import normalize_log_level

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = ROOT_DIR / "configs" / "paintraid.toml"

DEFAULT_DB_URL = "sqlite:///paintraid.db"
DEFAULT_TEAMS_KEY = "savedTeams"
DEFAULT_MATCHES_KEY = "savedMatches"


@dataclass(frozen=True)
class StorageConfig:
    db_url: str = DEFAULT_DB_URL
    teams_key: str = DEFAULT_TEAMS_KEY
    matches_key: str = DEFAULT_MATCHES_KEY


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    json: bool = False


@dataclass(frozen=True)
class AppConfig:
    """Settings for one PaintRaid installation."""

    file_path: Path | None
    storage: StorageConfig
    logging: LoggingConfig

    def as_config_json(self) -> dict[str, Any]:
        return {
            "storage": {
                "db_url": self.storage.db_url,
                "teams_key": self.storage.teams_key,
                "matches_key": self.storage.matches_key,
            },
            "logging": {
                "level": self.logging.level,
                "json": self.logging.json,
            },
        }


def default_app_config() -> AppConfig:
    return AppConfig(file_path=None, storage=StorageConfig(), logging=LoggingConfig())


def load_app_config(config_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Read and validate one TOML config file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    if not config_path.is_file():
        raise IsADirectoryError(f"Config path is not a file: {config_path}")

    with config_path.open("rb") as file:
        raw = tomllib.load(file)
    return _parse_app_config(raw, config_path)


def _parse_app_config(raw: dict[str, Any], file_path: Path) -> AppConfig:
    storage_raw = raw.get("storage", {})
    logging_raw = raw.get("logging", {})

    storage = StorageConfig(
        db_url=str(storage_raw.get("db_url", DEFAULT_DB_URL)).strip(),
        teams_key=str(storage_raw.get("teams_key", DEFAULT_TEAMS_KEY)).strip(),
        matches_key=str(storage_raw.get("matches_key", DEFAULT_MATCHES_KEY)).strip(),
    )
    logging_config = LoggingConfig(
        level=str(logging_raw.get("level", "INFO")).strip().upper(),
        json=bool(logging_raw.get("json", False)),
    )
    _validate(file_path=file_path, storage=storage, logging_config=logging_config)

    return AppConfig(file_path=file_path, storage=storage, logging=logging_config)


def _validate(*, file_path: Path, storage: StorageConfig, logging_config: LoggingConfig) -> None:
    if not storage.db_url:
        raise ValueError(f"{file_path}: [storage].db_url is required")
    if not storage.teams_key:
        raise ValueError(f"{file_path}: [storage].teams_key must not be empty")
    if not storage.matches_key:
        raise ValueError(f"{file_path}: [storage].matches_key must not be empty")
    if storage.teams_key == storage.matches_key:
        raise ValueError(f"{file_path}: [storage].teams_key and matches_key must differ")
    try:
        normalize_log_level(logging_config.level)
    except ValueError as exc:
        raise ValueError(f"{file_path}: [logging].level {exc}") from exc


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "StorageConfig",
    "default_app_config",
    "load_app_config",
]
