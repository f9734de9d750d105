"""Players, their roles and their counting stats."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4

DEFAULT_AVATAR = "person.circle.fill"


class PlayerRole(str, Enum):
    """Fixed set of in-game roles a player can take."""

    SNIPER = "Sniper"
    SCOUT = "Scout"
    SUPPORT = "Support"
    ASSAULT = "Assault"
    MEDIC = "Medic"
    CAPTAIN = "Captain"


@dataclass(frozen=True)
class PlayerStats:
    """Raw per-player counters; ratios are derived on read."""

    eliminations: int = 0
    deaths: int = 0
    assists: int = 0
    objective_captures: int = 0
    matches_played: int = 0
    matches_won: int = 0

    def __post_init__(self) -> None:
        for name in (
            "eliminations",
            "deaths",
            "assists",
            "objective_captures",
            "matches_played",
            "matches_won",
        ):
            object.__setattr__(self, name, max(0, int(getattr(self, name))))

    @property
    def kd_ratio(self) -> float:
        if self.deaths > 0:
            return self.eliminations / self.deaths
        return float(self.eliminations)

    @property
    def win_rate(self) -> float:
        """Percentage of played matches won, 0 when nothing was played."""
        if self.matches_played > 0:
            return self.matches_won / self.matches_played * 100.0
        return 0.0


@dataclass(frozen=True)
class Player:
    name: str
    nickname: str
    role: PlayerRole
    avatar: str = DEFAULT_AVATAR
    stats: PlayerStats = field(default_factory=PlayerStats)
    id: UUID = field(default_factory=uuid4)


__all__ = ["DEFAULT_AVATAR", "Player", "PlayerRole", "PlayerStats"]
