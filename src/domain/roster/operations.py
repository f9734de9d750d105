"""Pure collection updates and queries over teams and matches.

Every update returns a new tuple (or a new record) rather than mutating the
input, so a caller can persist the whole result with one save.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID

from app_logging import get_logger
from domain.roster.match import Match, MatchEvent, MatchStatus
from domain.roster.player import Player
from domain.roster.team import Team

logger = get_logger(__name__)

MAX_SCORE = 100
MAX_MATCH_TEAMS = 2

_ALLOWED_TRANSITIONS: dict[MatchStatus, frozenset[MatchStatus]] = {
    MatchStatus.SCHEDULED: frozenset({MatchStatus.IN_PROGRESS, MatchStatus.CANCELLED}),
    MatchStatus.IN_PROGRESS: frozenset({MatchStatus.COMPLETED, MatchStatus.CANCELLED}),
    MatchStatus.COMPLETED: frozenset(),
    MatchStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class TeamTotals:
    """Roster-wide sums of player counters."""

    eliminations: int
    deaths: int
    assists: int
    objective_captures: int
    player_count: int


def add_team(teams: Sequence[Team], team: Team) -> tuple[Team, ...]:
    return (*teams, team)


def replace_team(teams: Sequence[Team], team: Team) -> tuple[Team, ...]:
    """Swap in the team with the same id; unknown ids leave the collection as is."""
    return tuple(team if existing.id == team.id else existing for existing in teams)


def remove_team(teams: Sequence[Team], team_id: UUID) -> tuple[Team, ...]:
    return tuple(team for team in teams if team.id != team_id)


def add_player(teams: Sequence[Team], team_id: UUID, player: Player) -> tuple[Team, ...]:
    return tuple(
        replace(team, players=(*team.players, player)) if team.id == team_id else team
        for team in teams
    )


def update_player(teams: Sequence[Team], team_id: UUID, player: Player) -> tuple[Team, ...]:
    updated: list[Team] = []
    for team in teams:
        if team.id == team_id:
            players = tuple(
                player if existing.id == player.id else existing for existing in team.players
            )
            team = replace(team, players=players)
        updated.append(team)
    return tuple(updated)


def remove_player(teams: Sequence[Team], team_id: UUID, player_id: UUID) -> tuple[Team, ...]:
    return tuple(
        replace(team, players=tuple(p for p in team.players if p.id != player_id))
        if team.id == team_id
        else team
        for team in teams
    )


def add_match(matches: Sequence[Match], match: Match) -> tuple[Match, ...]:
    return (*matches, match)


def replace_match(matches: Sequence[Match], match: Match) -> tuple[Match, ...]:
    return tuple(match if existing.id == match.id else existing for existing in matches)


def remove_match(matches: Sequence[Match], match_id: UUID) -> tuple[Match, ...]:
    return tuple(match for match in matches if match.id != match_id)


def schedule_match(
    teams: Sequence[Team],
    team_ids: Sequence[UUID],
    *,
    date: datetime,
    location: str,
    status: MatchStatus = MatchStatus.SCHEDULED,
) -> Match:
    """Create a new match between the selected teams with every score at zero."""
    selected_ids = list(dict.fromkeys(team_ids))[:MAX_MATCH_TEAMS]
    match_teams = tuple(team for team in teams if team.id in selected_ids)
    if len(match_teams) < MAX_MATCH_TEAMS:
        raise ValueError(
            f"A match needs {MAX_MATCH_TEAMS} known teams, got {len(match_teams)}"
        )
    location = location.strip()
    if not location:
        raise ValueError("A match needs a location")

    return Match(
        date=date,
        teams=match_teams,
        location=location,
        status=status,
        score={team.id: 0 for team in match_teams},
    )


def set_score(match: Match, team_id: UUID, value: int) -> Match:
    """Return the match with one team's score set, clamped to 0..MAX_SCORE."""
    if team_id not in match.team_ids:
        return match
    score = dict(match.score)
    score[team_id] = max(0, min(MAX_SCORE, int(value)))
    return replace(match, score=score)


def record_event(match: Match, event: MatchEvent) -> Match:
    return replace(match, events=(*match.events, event))


def can_transition(current: MatchStatus, target: MatchStatus) -> bool:
    return target in _ALLOWED_TRANSITIONS[current]


def transition_status(match: Match, status: MatchStatus) -> Match:
    """Move a match along Scheduled -> In Progress -> Completed, or cancel it.

    Completed and Cancelled are terminal; a disallowed move returns the match
    unchanged.
    """
    if match.status == status:
        return match
    if not can_transition(match.status, status):
        logger.debug(
            "match_status_transition_ignored",
            match_id=str(match.id),
            current=match.status.value,
            requested=status.value,
        )
        return match
    return replace(match, status=status)


def complete_match(match: Match, winner: UUID | None) -> Match:
    if match.status == MatchStatus.SCHEDULED:
        match = transition_status(match, MatchStatus.IN_PROGRESS)
    completed = transition_status(match, MatchStatus.COMPLETED)
    if completed.status != MatchStatus.COMPLETED:
        return match
    return replace(completed, winner=winner)


def filter_matches(
    matches: Iterable[Match],
    status: MatchStatus | None = None,
) -> list[Match]:
    """Matches with the given status (all when None), newest first."""
    selected = [match for match in matches if status is None or match.status == status]
    return sorted(selected, key=lambda match: match.date, reverse=True)


def all_players(teams: Iterable[Team]) -> list[Player]:
    return [player for team in teams for player in team.players]


def player_leaderboard(teams: Sequence[Team], team_id: UUID | None = None) -> list[Player]:
    """Players ranked by eliminations, optionally restricted to one team."""
    if team_id is None:
        players = all_players(teams)
    else:
        players = all_players(team for team in teams if team.id == team_id)
    return sorted(players, key=lambda player: player.stats.eliminations, reverse=True)


def team_totals(team: Team) -> TeamTotals:
    return TeamTotals(
        eliminations=sum(p.stats.eliminations for p in team.players),
        deaths=sum(p.stats.deaths for p in team.players),
        assists=sum(p.stats.assists for p in team.players),
        objective_captures=sum(p.stats.objective_captures for p in team.players),
        player_count=len(team.players),
    )


def format_duration(seconds: float) -> str:
    """Abbreviated hours/minutes, e.g. `1h 30m`; zero renders as `0m`."""
    total_minutes = int(max(0.0, seconds) // 60)
    hours, minutes = divmod(total_minutes, 60)
    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"


__all__ = [
    "MAX_MATCH_TEAMS",
    "MAX_SCORE",
    "TeamTotals",
    "add_match",
    "add_player",
    "add_team",
    "all_players",
    "can_transition",
    "complete_match",
    "filter_matches",
    "format_duration",
    "player_leaderboard",
    "record_event",
    "remove_match",
    "remove_player",
    "remove_team",
    "replace_match",
    "replace_team",
    "schedule_match",
    "set_score",
    "team_totals",
    "transition_status",
]
