"""Explicit application state passed between the shell and its screens."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum


class Tab(IntEnum):
    HOME = 0
    TEAMS = 1
    MATCHES = 2
    STATS = 3
    MAP = 4
    ASSISTANT = 5


@dataclass(frozen=True)
class AppState:
    """Snapshot of navigation state; `select_tab` returns a new snapshot."""

    selected_tab: Tab = Tab.HOME

    def select_tab(self, tab: int) -> AppState:
        try:
            resolved = Tab(tab)
        except ValueError:
            return self
        return replace(self, selected_tab=resolved)


__all__ = ["AppState", "Tab"]
