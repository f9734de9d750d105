#!/usr/bin/env python3
"""Manage the PaintRaid roster and match list stored in the local database."""

from __future__ import annotations

import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Annotated
from uuid import UUID

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from app_logging import configure_logging
from domain.config import DEFAULT_CONFIG_PATH, AppConfig, load_app_config
from domain.roster.colors import TeamColor
from domain.roster.display import role_icon, status_color
from domain.roster.match import Match, MatchStatus
from domain.roster.operations import (
    add_match,
    add_player,
    add_team,
    filter_matches,
    format_duration,
    player_leaderboard,
    replace_match,
    schedule_match,
    set_score,
    team_totals,
    transition_status,
)
from domain.roster.player import Player, PlayerRole
from domain.roster.team import Team
from repositories import CollectionRepository, SqlKeyValueStore, match_repository, team_repository

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="PaintRaid roster and match jobs.",
)

ConfigOption = Annotated[
    Path,
    typer.Option("--config", help="Path to the PaintRaid TOML config file."),
]


def _open(config_path: Path) -> tuple[CollectionRepository[Team], CollectionRepository[Match]]:
    config: AppConfig = load_app_config(config_path)
    configure_logging(config.logging.level, json=config.logging.json)
    store = SqlKeyValueStore.from_url(config.storage.db_url)
    return (
        team_repository(store, key=config.storage.teams_key),
        match_repository(store, key=config.storage.matches_key),
    )


def _find_team(teams: tuple[Team, ...], reference: str) -> Team:
    for team in teams:
        if str(team.id) == reference or team.name.casefold() == reference.casefold():
            return team
    raise typer.BadParameter(f"Unknown team: {reference}")


def _find_match(matches: tuple[Match, ...], reference: str) -> Match:
    try:
        match_id = UUID(reference)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid match id: {reference}") from exc
    for match in matches:
        if match.id == match_id:
            return match
    raise typer.BadParameter(f"Unknown match: {reference}")


def _echo_match(match: Match) -> None:
    scores = " vs ".join(f"{team.name} {match.score_for(team.id)}" for team in match.teams)
    winner = next((team.name for team in match.teams if match.is_winner(team.id)), "-")
    typer.echo(
        f"{match.id} {match.date:%Y-%m-%d %H:%M} "
        f"status={match.status.value} ({status_color(match.status)}) "
        f"location={match.location!r} {scores} "
        f"winner={winner} duration={format_duration(match.duration)}"
    )


@app.command("teams")
def show_teams(config: ConfigOption = DEFAULT_CONFIG_PATH) -> None:
    """List teams with their roster and totals."""
    teams_repo, _ = _open(config)
    for team in teams_repo.load():
        totals = team_totals(team)
        typer.echo(
            f"{team.id} {team.name} color={team.color.to_hex()} "
            f"players={totals.player_count} eliminations={totals.eliminations} "
            f"captures={totals.objective_captures}"
        )
        for player in team.players:
            typer.echo(
                f"  - {player.nickname} ({player.name}) role={player.role.value} "
                f"icon={role_icon(player.role)} kd={player.stats.kd_ratio:.2f} "
                f"win_rate={player.stats.win_rate:.1f}%"
            )


@app.command("matches")
def show_matches(
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    status: Annotated[
        MatchStatus | None,
        typer.Option("--status", help="Only show matches with this status."),
    ] = None,
) -> None:
    """List matches, newest first."""
    _, matches_repo = _open(config)
    selected = filter_matches(matches_repo.load(), status)
    if not selected:
        typer.echo("no matches")
        return
    for match in selected:
        _echo_match(match)


@app.command("leaderboard")
def show_leaderboard(
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    team: Annotated[str | None, typer.Option("--team", help="Team name or id.")] = None,
    top_n: Annotated[int, typer.Option("--top-n")] = 10,
) -> None:
    """Rank players by eliminations."""
    if top_n <= 0:
        raise typer.BadParameter("--top-n must be greater than 0")
    teams_repo, _ = _open(config)
    teams = teams_repo.load()
    team_id = _find_team(teams, team).id if team is not None else None
    for rank, player in enumerate(player_leaderboard(teams, team_id)[:top_n], start=1):
        typer.echo(
            f"#{rank} {player.nickname} eliminations={player.stats.eliminations} "
            f"kd={player.stats.kd_ratio:.2f}"
        )


@app.command("add-team")
def create_team(
    name: Annotated[str, typer.Argument(help="Team name.")],
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    color: Annotated[str, typer.Option("--color", help="Hex color, e.g. #5A189A.")] = "#5A189A",
    icon: Annotated[str, typer.Option("--icon")] = "bolt.circle.fill",
) -> None:
    """Create an empty team."""
    parsed_color = TeamColor.from_hex(color)
    if parsed_color is None:
        raise typer.BadParameter(f"--color is not a hex color: {color}")
    teams_repo, _ = _open(config)
    team = Team(name=name.strip() or "New Team", color=parsed_color, icon_name=icon)
    teams_repo.save(add_team(teams_repo.load(), team))
    typer.echo(f"created team={team.id} name={team.name}")


@app.command("add-player")
def create_player(
    team: Annotated[str, typer.Argument(help="Team name or id.")],
    name: Annotated[str, typer.Argument(help="Full name.")],
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    nickname: Annotated[str, typer.Option("--nickname")] = "Rookie",
    role: Annotated[PlayerRole, typer.Option("--role")] = PlayerRole.ASSAULT,
) -> None:
    """Add a player with empty stats to a team."""
    teams_repo, _ = _open(config)
    teams = teams_repo.load()
    target = _find_team(teams, team)
    player = Player(
        name=name.strip() or "New Player",
        nickname=nickname.strip() or "Rookie",
        role=role,
    )
    teams_repo.save(add_player(teams, target.id, player))
    typer.echo(f"added player={player.id} nickname={player.nickname} team={target.name}")


@app.command("schedule")
def create_match(
    team_a: Annotated[str, typer.Argument(help="First team name or id.")],
    team_b: Annotated[str, typer.Argument(help="Second team name or id.")],
    location: Annotated[str, typer.Option("--location")],
    date: Annotated[datetime, typer.Option("--date", formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M"])],
    config: ConfigOption = DEFAULT_CONFIG_PATH,
) -> None:
    """Schedule a match between two teams."""
    teams_repo, matches_repo = _open(config)
    teams = teams_repo.load()
    team_ids = [_find_team(teams, team_a).id, _find_team(teams, team_b).id]
    try:
        match = schedule_match(teams, team_ids, date=date, location=location)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    matches_repo.save(add_match(matches_repo.load(), match))
    typer.echo(f"scheduled match={match.id}")


@app.command("score")
def update_score(
    match_id: Annotated[str, typer.Argument(help="Match id.")],
    team: Annotated[str, typer.Argument(help="Team name or id.")],
    value: Annotated[int, typer.Argument(min=0, max=100)],
    config: ConfigOption = DEFAULT_CONFIG_PATH,
) -> None:
    """Set one team's score in a match."""
    _, matches_repo = _open(config)
    matches = matches_repo.load()
    match = _find_match(matches, match_id)
    target = _find_team(match.teams, team)
    updated = set_score(match, target.id, value)
    matches_repo.save(replace_match(matches, updated))
    _echo_match(updated)


@app.command("status")
def update_status(
    match_id: Annotated[str, typer.Argument(help="Match id.")],
    status: Annotated[MatchStatus, typer.Argument()],
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    winner: Annotated[str | None, typer.Option("--winner", help="Winning team name or id.")] = None,
) -> None:
    """Move a match to a new status, optionally recording the winner."""
    _, matches_repo = _open(config)
    matches = matches_repo.load()
    match = _find_match(matches, match_id)
    if winner is not None and status != MatchStatus.COMPLETED:
        raise typer.BadParameter("--winner is only valid when moving a match to Completed")
    updated = transition_status(match, status)
    if updated.status != status:
        raise typer.BadParameter(
            f"cannot move match from {match.status.value} to {status.value}"
        )
    if winner is not None:
        updated = replace(updated, winner=_find_team(updated.teams, winner).id)
    matches_repo.save(replace_match(matches, updated))
    _echo_match(updated)


@app.command("reset")
def reset_storage(config: ConfigOption = DEFAULT_CONFIG_PATH) -> None:
    """Drop stored teams and matches; the next load uses sample data."""
    teams_repo, matches_repo = _open(config)
    teams_repo.clear()
    matches_repo.clear()
    typer.echo("cleared stored teams and matches")


if __name__ == "__main__":
    app()
