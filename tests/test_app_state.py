"""Tests for explicit navigation state."""

from __future__ import annotations

from domain.app_state import AppState, Tab


def test_default_tab_is_home() -> None:
    assert AppState().selected_tab is Tab.HOME


def test_select_tab_returns_new_state() -> None:
    state = AppState()
    updated = state.select_tab(Tab.MATCHES)
    assert updated.selected_tab is Tab.MATCHES
    assert state.selected_tab is Tab.HOME


def test_select_tab_accepts_plain_index() -> None:
    assert AppState().select_tab(3).selected_tab is Tab.STATS


def test_out_of_range_tab_is_ignored() -> None:
    state = AppState(selected_tab=Tab.TEAMS)
    assert state.select_tab(42) is state
