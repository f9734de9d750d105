"""JSON codec for persisted team and match collections.

Optional fields are omitted when absent; a present-but-null optional is a
schema mismatch. Match scores travel as parallel `scoreKeys`/`scoreValues`
lists because not every format keeps arbitrary map keys intact.
"""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from domain.roster.colors import parse_color
from domain.roster.match import EventType, Match, MatchEvent, MatchStatus, Position
from domain.roster.player import Player, PlayerRole, PlayerStats
from domain.roster.team import Team

_STATS_FIELDS = (
    ("eliminations", "eliminations"),
    ("deaths", "deaths"),
    ("assists", "assists"),
    ("objective_captures", "objectiveCaptures"),
    ("matches_played", "matchesPlayed"),
    ("matches_won", "matchesWon"),
)


class DecodeError(ValueError):
    """Persisted payload does not match the expected schema."""


class EncodeError(ValueError):
    """In-memory state could not be serialized."""


def encode_teams(teams: Sequence[Team]) -> str:
    return _dumps([team_to_payload(team) for team in teams])


def decode_teams(raw: str | bytes) -> tuple[Team, ...]:
    payload = _loads(raw)
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a list of teams, got {type(payload).__name__}")
    return tuple(team_from_payload(item) for item in payload)


def encode_matches(matches: Sequence[Match]) -> str:
    return _dumps([match_to_payload(match) for match in matches])


def decode_matches(raw: str | bytes) -> tuple[Match, ...]:
    payload = _loads(raw)
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a list of matches, got {type(payload).__name__}")
    return tuple(match_from_payload(item) for item in payload)


def player_to_payload(player: Player) -> dict[str, Any]:
    return {
        "id": str(player.id),
        "name": player.name,
        "nickname": player.nickname,
        "role": player.role.value,
        "avatar": player.avatar,
        "stats": {key: getattr(player.stats, attr) for attr, key in _STATS_FIELDS},
    }


def player_from_payload(payload: Any) -> Player:
    data = _require_object(payload, "player")
    stats_raw = _require_object(_require(data, "stats"), "player stats")
    stats = PlayerStats(**{attr: _require_int(stats_raw, key) for attr, key in _STATS_FIELDS})
    return Player(
        id=_require_uuid(data, "id"),
        name=_require_str(data, "name"),
        nickname=_require_str(data, "nickname"),
        role=_require_enum(data, "role", PlayerRole),
        avatar=_require_str(data, "avatar"),
        stats=stats,
    )


def team_to_payload(team: Team) -> dict[str, Any]:
    return {
        "id": str(team.id),
        "name": team.name,
        "colorHex": team.color.to_hex(),
        "players": [player_to_payload(player) for player in team.players],
        "iconName": team.icon_name,
        "matchHistory": [str(match_id) for match_id in team.match_history],
    }


def team_from_payload(payload: Any) -> Team:
    data = _require_object(payload, "team")
    # A bad color degrades to the default instead of failing the whole load.
    color = parse_color(_require_str(data, "colorHex"))
    return Team(
        id=_require_uuid(data, "id"),
        name=_require_str(data, "name"),
        color=color,
        players=tuple(player_from_payload(item) for item in _require_list(data, "players")),
        icon_name=_require_str(data, "iconName"),
        match_history=tuple(
            _parse_uuid(item, "matchHistory") for item in _require_list(data, "matchHistory")
        ),
    )


def event_to_payload(event: MatchEvent) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": str(event.id),
        "timestamp": event.timestamp.isoformat(),
        "eventType": event.event_type.value,
        "playerId": str(event.player_id),
    }
    if event.target_player_id is not None:
        payload["targetPlayerId"] = str(event.target_player_id)
    if event.position is not None:
        payload["x"] = event.position.x
        payload["y"] = event.position.y
    return payload


def event_from_payload(payload: Any) -> MatchEvent:
    data = _require_object(payload, "match event")
    target_player_id = _require_uuid(data, "targetPlayerId") if "targetPlayerId" in data else None

    position = None
    if "x" in data and "y" in data:
        position = Position(x=_require_number(data, "x"), y=_require_number(data, "y"))

    return MatchEvent(
        id=_require_uuid(data, "id"),
        timestamp=_require_datetime(data, "timestamp"),
        event_type=_require_enum(data, "eventType", EventType),
        player_id=_require_uuid(data, "playerId"),
        target_player_id=target_player_id,
        position=position,
    )


def match_to_payload(match: Match) -> dict[str, Any]:
    score_keys = sorted(match.score, key=str)
    payload: dict[str, Any] = {
        "id": str(match.id),
        "date": match.date.isoformat(),
        "teams": [team_to_payload(team) for team in match.teams],
        "location": match.location,
        "events": [event_to_payload(event) for event in match.events],
        "status": match.status.value,
        "duration": match.duration,
        "scoreKeys": [str(team_id) for team_id in score_keys],
        "scoreValues": [match.score[team_id] for team_id in score_keys],
    }
    if match.winner is not None:
        payload["winner"] = str(match.winner)
    return payload


def match_from_payload(payload: Any) -> Match:
    data = _require_object(payload, "match")

    score_keys = [_parse_uuid(item, "scoreKeys") for item in _require_list(data, "scoreKeys")]
    score_values = _require_list(data, "scoreValues")
    if len(score_keys) != len(score_values):
        raise DecodeError(
            f"scoreKeys/scoreValues length mismatch: {len(score_keys)} != {len(score_values)}"
        )
    if len(set(score_keys)) != len(score_keys):
        raise DecodeError("scoreKeys contains duplicate team ids")
    score = {key: _as_int(value, "scoreValues") for key, value in zip(score_keys, score_values)}

    return Match(
        id=_require_uuid(data, "id"),
        date=_require_datetime(data, "date"),
        teams=tuple(team_from_payload(item) for item in _require_list(data, "teams")),
        location=_require_str(data, "location"),
        events=tuple(event_from_payload(item) for item in _require_list(data, "events")),
        status=_require_enum(data, "status", MatchStatus),
        winner=_require_uuid(data, "winner") if "winner" in data else None,
        score=score,
        duration=_require_number(data, "duration"),
    )


def _dumps(payload: list[dict[str, Any]]) -> str:
    try:
        return json.dumps(payload, allow_nan=False, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise EncodeError(str(exc)) from exc


def _loads(raw: str | bytes) -> Any:
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise DecodeError(f"Invalid JSON payload: {exc}") from exc


def _reject_constant(name: str) -> Any:
    raise DecodeError(f"Non-finite number {name} is not allowed")


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise DecodeError(f"Missing required field {key!r}")
    value = data[key]
    if value is None:
        raise DecodeError(f"Field {key!r} must not be null")
    return value


def _require_object(value: Any, label: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"Expected {label} object, got {type(value).__name__}")
    return value


def _require_list(data: dict[str, Any], key: str) -> list[Any]:
    value = _require(data, key)
    if not isinstance(value, list):
        raise DecodeError(f"Field {key!r} must be a list")
    return value


def _require_str(data: dict[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise DecodeError(f"Field {key!r} must be a string")
    return value


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Field {key!r} must be an integer, got {value!r}")
    return value


def _require_int(data: dict[str, Any], key: str) -> int:
    return _as_int(_require(data, key), key)


def _require_number(data: dict[str, Any], key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"Field {key!r} must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise DecodeError(f"Field {key!r} is out of range") from exc
    if not math.isfinite(number):
        raise DecodeError(f"Field {key!r} must be finite, got {number!r}")
    return number


def _parse_uuid(value: Any, key: str) -> UUID:
    if not isinstance(value, str):
        raise DecodeError(f"Field {key!r} must hold UUID strings, got {value!r}")
    try:
        return UUID(value)
    except ValueError as exc:
        raise DecodeError(f"Field {key!r} has invalid UUID {value!r}") from exc


def _require_uuid(data: dict[str, Any], key: str) -> UUID:
    return _parse_uuid(_require(data, key), key)


def _require_datetime(data: dict[str, Any], key: str) -> datetime:
    value = _require_str(data, key)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise DecodeError(f"Field {key!r} has invalid timestamp {value!r}") from exc
    # Stored timestamps are naive UTC; offsets are folded in on read.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def _require_enum(data: dict[str, Any], key: str, enum_type: type[Any]) -> Any:
    value = _require_str(data, key)
    try:
        return enum_type(value)
    except ValueError as exc:
        raise DecodeError(f"Field {key!r} has unknown value {value!r}") from exc


__all__ = [
    "DecodeError",
    "EncodeError",
    "decode_matches",
    "decode_teams",
    "encode_matches",
    "encode_teams",
    "match_from_payload",
    "match_to_payload",
    "team_from_payload",
    "team_to_payload",
]
