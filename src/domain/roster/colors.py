"""Team display colors and their hex representation."""

from __future__ import annotations

import string
from dataclasses import dataclass


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class TeamColor:
    """An opaque sRGB color with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", _clamp_channel(self.red))
        object.__setattr__(self, "green", _clamp_channel(self.green))
        object.__setattr__(self, "blue", _clamp_channel(self.blue))

    @classmethod
    def from_hex(cls, value: str) -> TeamColor | None:
        """Parse `#RGB`, `#RRGGBB` or `#AARRGGBB`; return None when unparseable."""
        digits = value.strip().lstrip("#")
        if not digits or any(char not in string.hexdigits for char in digits):
            return None

        number = int(digits, 16)
        if len(digits) == 3:
            return cls(
                red=(number >> 8) * 17,
                green=(number >> 4 & 0xF) * 17,
                blue=(number & 0xF) * 17,
            )
        if len(digits) in (6, 8):
            # Alpha in the 8-digit form is dropped; team colors are opaque.
            return cls(
                red=number >> 16 & 0xFF,
                green=number >> 8 & 0xFF,
                blue=number & 0xFF,
            )
        return None

    def to_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


DEFAULT_TEAM_COLOR = TeamColor(red=0x00, green=0x7A, blue=0xFF)

DEEP_PURPLE = TeamColor(red=0x5A, green=0x18, blue=0x9A)
LIGHT_PURPLE = TeamColor(red=0xC7, green=0x7D, blue=0xFF)


def parse_color(value: object) -> TeamColor:
    """Parse a persisted hex color, falling back to the default team color."""
    if not isinstance(value, str):
        return DEFAULT_TEAM_COLOR
    parsed = TeamColor.from_hex(value)
    return parsed if parsed is not None else DEFAULT_TEAM_COLOR


__all__ = [
    "DEEP_PURPLE",
    "DEFAULT_TEAM_COLOR",
    "LIGHT_PURPLE",
    "TeamColor",
    "parse_color",
]
