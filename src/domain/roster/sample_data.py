"""Deterministic seed roster used on first run and in tests.

Identifiers are derived with uuid5 from stable names, so two generations are
equal field for field. Match dates are offsets from `now`.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import NAMESPACE_URL, UUID, uuid5

from domain.roster.colors import DEEP_PURPLE, LIGHT_PURPLE
from domain.roster.match import Match, MatchStatus
from domain.roster.player import Player, PlayerRole, PlayerStats
from domain.roster.team import Team

_SAMPLE_NAMESPACE = uuid5(NAMESPACE_URL, "paintraid:sample-data")


def sample_id(name: str) -> UUID:
    return uuid5(_SAMPLE_NAMESPACE, name)


def generate_players() -> tuple[Player, ...]:
    return (
        Player(
            id=sample_id("player:quickshot"),
            name="Alex Johnson",
            nickname="Quickshot",
            role=PlayerRole.SNIPER,
            stats=PlayerStats(
                eliminations=42,
                deaths=12,
                assists=8,
                objective_captures=3,
                matches_played=10,
                matches_won=7,
            ),
        ),
        Player(
            id=sample_id("player:shadow"),
            name="Sam Rivera",
            nickname="Shadow",
            role=PlayerRole.SCOUT,
            stats=PlayerStats(
                eliminations=26,
                deaths=18,
                assists=15,
                objective_captures=12,
                matches_played=12,
                matches_won=8,
            ),
        ),
        Player(
            id=sample_id("player:tank"),
            name="Jordan Smith",
            nickname="Tank",
            role=PlayerRole.ASSAULT,
            stats=PlayerStats(
                eliminations=56,
                deaths=23,
                assists=4,
                objective_captures=2,
                matches_played=14,
                matches_won=9,
            ),
        ),
        Player(
            id=sample_id("player:doc"),
            name="Taylor Wong",
            nickname="Doc",
            role=PlayerRole.MEDIC,
            stats=PlayerStats(
                eliminations=12,
                deaths=15,
                assists=36,
                objective_captures=5,
                matches_played=11,
                matches_won=7,
            ),
        ),
        Player(
            id=sample_id("player:commander"),
            name="Morgan Chen",
            nickname="Commander",
            role=PlayerRole.CAPTAIN,
            stats=PlayerStats(
                eliminations=38,
                deaths=16,
                assists=24,
                objective_captures=9,
                matches_played=13,
                matches_won=10,
            ),
        ),
    )


def generate_teams() -> tuple[Team, ...]:
    players = generate_players()
    return (
        Team(
            id=sample_id("team:purple-reign"),
            name="Purple Reign",
            color=DEEP_PURPLE,
            players=players[:3],
            icon_name="bolt.circle.fill",
        ),
        Team(
            id=sample_id("team:neon-strikers"),
            name="Neon Strikers",
            color=LIGHT_PURPLE,
            players=players[-2:],
            icon_name="star.circle.fill",
        ),
    )


def generate_matches(now: datetime | None = None) -> tuple[Match, ...]:
    """Three matches between the sample teams: finished, upcoming and live."""
    now = now or datetime.now(UTC).replace(tzinfo=None)
    team1, team2 = generate_teams()
    teams = (team1, team2)

    completed = Match(
        id=sample_id("match:evergreen"),
        date=now - timedelta(days=7),
        teams=teams,
        location="Evergreen Arena",
        status=MatchStatus.COMPLETED,
        winner=team1.id,
        score={team1.id: 12, team2.id: 8},
        duration=3600.0,
    )
    scheduled = Match(
        id=sample_id("match:urban-warfare"),
        date=now + timedelta(days=3),
        teams=teams,
        location="Urban Warfare Center",
        status=MatchStatus.SCHEDULED,
        score={team1.id: 0, team2.id: 0},
        duration=0.0,
    )
    in_progress = Match(
        id=sample_id("match:woodland"),
        date=now,
        teams=teams,
        location="Woodland Arena",
        status=MatchStatus.IN_PROGRESS,
        score={team1.id: 5, team2.id: 7},
        duration=1800.0,
    )
    return (completed, scheduled, in_progress)


__all__ = ["generate_matches", "generate_players", "generate_teams", "sample_id"]
