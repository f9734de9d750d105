"""Roster domain modules."""

from domain.app_state import AppState, Tab
from domain.config import AppConfig, load_app_config

__all__ = ["AppConfig", "AppState", "Tab", "load_app_config"]
