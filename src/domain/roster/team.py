"""Team roster record."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from domain.roster.colors import DEFAULT_TEAM_COLOR, TeamColor
from domain.roster.player import Player

DEFAULT_TEAM_ICON = "bolt.circle.fill"


@dataclass(frozen=True)
class Team:
    """A named team with an ordered roster and the ids of matches it played."""

    name: str
    color: TeamColor = DEFAULT_TEAM_COLOR
    players: tuple[Player, ...] = ()
    icon_name: str = DEFAULT_TEAM_ICON
    match_history: tuple[UUID, ...] = ()
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "match_history", tuple(self.match_history))

    def find_player(self, player_id: UUID) -> Player | None:
        for player in self.players:
            if player.id == player_id:
                return player
        return None


__all__ = ["DEFAULT_TEAM_ICON", "Team"]
