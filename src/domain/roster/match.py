"""Matches, their status and the in-game events recorded during them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from uuid import UUID, uuid4

from domain.roster.team import Team


class MatchStatus(str, Enum):
    SCHEDULED = "Scheduled"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class EventType(str, Enum):
    """Kinds of in-game events tracked on the arena."""

    ELIMINATION = "elimination"
    OBJECTIVE_CAPTURE = "objectiveCapture"
    RESUPPLY = "resupply"
    TEAM_REVIVE = "teamRevive"
    FLAG_PICKUP = "flagPickup"
    FLAG_DROP = "flagDrop"


@dataclass(frozen=True)
class Position:
    """A point on the arena map; both coordinates are always present."""

    x: float
    y: float

    @classmethod
    def from_coordinates(cls, x: float | None, y: float | None) -> Position | None:
        """Build a position only when both coordinates are given."""
        if x is None or y is None:
            return None
        return cls(x=float(x), y=float(y))


@dataclass(frozen=True)
class MatchEvent:
    timestamp: datetime
    event_type: EventType
    player_id: UUID
    target_player_id: UUID | None = None
    position: Position | None = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.position is not None and not isinstance(self.position, Position):
            object.__setattr__(self, "position", None)

    @classmethod
    def create(
        cls,
        *,
        timestamp: datetime,
        event_type: EventType,
        player_id: UUID,
        target_player_id: UUID | None = None,
        x: float | None = None,
        y: float | None = None,
        id: UUID | None = None,
    ) -> MatchEvent:
        """Create an event from loose coordinates; a lone x or y means no position."""
        return cls(
            timestamp=timestamp,
            event_type=event_type,
            player_id=player_id,
            target_player_id=target_player_id,
            position=Position.from_coordinates(x, y),
            id=id if id is not None else uuid4(),
        )


@dataclass(frozen=True)
class Match:
    """One scheduled, running or finished match between teams.

    `score` is a read-only view that only keeps entries for participating
    teams; it takes part in equality but not in the hash. `winner` is
    dropped when it does not name one of them.
    """

    date: datetime
    teams: tuple[Team, ...]
    location: str
    status: MatchStatus
    events: tuple[MatchEvent, ...] = ()
    winner: UUID | None = None
    score: Mapping[UUID, int] = field(default_factory=dict, hash=False)
    duration: float = 0.0
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        teams = tuple(self.teams)
        team_ids = {team.id for team in teams}
        object.__setattr__(self, "teams", teams)
        object.__setattr__(self, "events", tuple(self.events))
        score = {
            team_id: int(value) for team_id, value in self.score.items() if team_id in team_ids
        }
        object.__setattr__(self, "score", MappingProxyType(score))
        if self.winner is not None and self.winner not in team_ids:
            object.__setattr__(self, "winner", None)
        object.__setattr__(self, "duration", max(0.0, float(self.duration)))

    @property
    def team_ids(self) -> tuple[UUID, ...]:
        return tuple(team.id for team in self.teams)

    def score_for(self, team_id: UUID) -> int:
        return self.score.get(team_id, 0)

    def is_winner(self, team_id: UUID) -> bool:
        return self.winner is not None and self.winner == team_id


__all__ = ["EventType", "Match", "MatchEvent", "MatchStatus", "Position"]
