"""Team, player and match records for the paintball roster."""

from domain.roster.colors import DEFAULT_TEAM_COLOR, TeamColor, parse_color
from domain.roster.match import EventType, Match, MatchEvent, MatchStatus, Position
from domain.roster.player import Player, PlayerRole, PlayerStats
from domain.roster.team import Team

__all__ = [
    "DEFAULT_TEAM_COLOR",
    "EventType",
    "Match",
    "MatchEvent",
    "MatchStatus",
    "Player",
    "PlayerRole",
    "PlayerStats",
    "Position",
    "Team",
    "TeamColor",
    "parse_color",
]
