"""Tests for team color hex parsing and formatting."""

from __future__ import annotations

import pytest

from domain.roster.colors import DEFAULT_TEAM_COLOR, TeamColor, parse_color


def test_six_digit_hex_round_trips() -> None:
    color = TeamColor.from_hex("#5A189A")
    assert color == TeamColor(red=0x5A, green=0x18, blue=0x9A)
    assert color is not None and color.to_hex() == "#5A189A"


def test_hex_without_hash_and_lowercase_is_accepted() -> None:
    assert TeamColor.from_hex("c77dff") == TeamColor(red=0xC7, green=0x7D, blue=0xFF)


def test_three_digit_hex_expands_each_nibble() -> None:
    assert TeamColor.from_hex("#F0A") == TeamColor(red=255, green=0, blue=170)


def test_eight_digit_hex_ignores_alpha() -> None:
    assert TeamColor.from_hex("#805A189A") == TeamColor(red=0x5A, green=0x18, blue=0x9A)


@pytest.mark.parametrize("value", ["", "#", "#12345", "#GGGGGG", "purple", "#5A189A00FF"])
def test_unparseable_hex_returns_none(value: str) -> None:
    assert TeamColor.from_hex(value) is None


def test_parse_color_falls_back_to_default() -> None:
    assert parse_color("not-a-color") == DEFAULT_TEAM_COLOR
    assert parse_color(None) == DEFAULT_TEAM_COLOR
    assert parse_color("#240046") == TeamColor(red=0x24, green=0x00, blue=0x46)


def test_channels_are_clamped() -> None:
    color = TeamColor(red=300, green=-5, blue=128)
    assert color.to_hex() == "#FF0080"
