"""Tests for saving and restoring roster collections with sample-data fallback."""

from __future__ import annotations

import json
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from domain.roster.match import EventType, MatchEvent
from domain.roster.operations import add_player, filter_matches
from domain.roster.player import Player, PlayerRole
from domain.roster.sample_data import generate_matches, generate_teams
from repositories import (
    InMemoryKeyValueStore,
    SqlKeyValueStore,
    match_repository,
    team_repository,
)
from repositories.codec import encode_matches

FIXED_NOW = datetime(2026, 6, 1, 12, 0, 0)


def test_missing_key_loads_sample_teams() -> None:
    repo = team_repository(InMemoryKeyValueStore())

    with capture_logs() as logs:
        teams = repo.load()

    assert teams == generate_teams()
    assert [entry["event"] for entry in logs] == ["collection_missing_using_sample_data"]


def test_corrupt_matches_fall_back_to_three_sample_matches() -> None:
    store = InMemoryKeyValueStore({"savedMatches": '[{"id": "3f2c", "date": '})
    repo = match_repository(store, now=lambda: FIXED_NOW)

    matches = repo.load()

    assert len(matches) == 3
    assert matches == generate_matches(FIXED_NOW)


def test_decode_failure_is_logged_distinctly() -> None:
    store = InMemoryKeyValueStore({"savedTeams": "\x00\x17garbage"})
    repo = team_repository(store)

    with capture_logs() as logs:
        repo.load()

    assert len(logs) == 1
    assert logs[0]["event"] == "collection_decode_failed"
    assert logs[0]["log_level"] == "warning"
    assert logs[0]["collection"] == "teams"
    assert logs[0]["error_type"] == "JSONDecodeError"


def test_schema_mismatch_falls_back_instead_of_partial_result() -> None:
    store = InMemoryKeyValueStore()
    repo = team_repository(store)
    teams = generate_teams()
    repo.save(teams)
    stored = store.get("savedTeams")
    assert stored is not None
    store.set("savedTeams", stored.replace('"nickname"', '"callsign"'))

    assert repo.load() == generate_teams()


def test_saved_teams_load_back_in_order() -> None:
    store = InMemoryKeyValueStore()
    repo = team_repository(store)
    teams = generate_teams()
    rookie = Player(name="Casey Park", nickname="Rookie", role=PlayerRole.SUPPORT)
    updated = add_player(teams, teams[1].id, rookie)

    assert repo.save(updated) is True
    loaded = repo.load()

    assert loaded == updated
    assert [p.nickname for p in loaded[1].players] == ["Doc", "Commander", "Rookie"]


def test_saving_twice_then_loading_is_idempotent() -> None:
    store = InMemoryKeyValueStore()
    repo = match_repository(store, now=lambda: FIXED_NOW)
    matches = generate_matches(FIXED_NOW)

    repo.save(matches)
    repo.save(matches)

    assert repo.load() == matches


def test_encode_failure_skips_write_and_keeps_previous_value() -> None:
    store = InMemoryKeyValueStore()
    repo = match_repository(store, now=lambda: FIXED_NOW)
    matches = generate_matches(FIXED_NOW)
    repo.save(matches)
    previous = store.get("savedMatches")

    broken_event = MatchEvent.create(
        timestamp=FIXED_NOW,
        event_type=EventType.ELIMINATION,
        player_id=matches[0].teams[0].players[0].id,
        x=float("inf"),
        y=0.0,
    )
    broken = (replace(matches[0], events=(broken_event,)), *matches[1:])

    with capture_logs() as logs:
        saved = repo.save(broken)

    assert saved is False
    assert store.get("savedMatches") == previous
    assert logs[0]["event"] == "collection_encode_failed"
    assert logs[0]["log_level"] == "error"


def test_custom_key_is_used() -> None:
    store = InMemoryKeyValueStore()
    repo = team_repository(store, key="teams.v2")
    repo.save(generate_teams())

    assert store.keys() == ["teams.v2"]


def test_clear_restores_sample_fallback() -> None:
    store = InMemoryKeyValueStore()
    repo = team_repository(store)
    repo.save(generate_teams()[:1])

    repo.clear()

    assert len(repo.load()) == 2


def test_sql_store_persists_across_instances(tmp_path: Path) -> None:
    db_url = f"sqlite:///{tmp_path / 'paintraid.db'}"
    teams = generate_teams()
    team_repository(SqlKeyValueStore.from_url(db_url)).save(teams[::-1])

    reopened = team_repository(SqlKeyValueStore.from_url(db_url))

    assert reopened.load() == teams[::-1]


def _stored_matches_with_duration(value: object) -> str:
    payload = json.loads(encode_matches(generate_matches(FIXED_NOW)))
    payload[0]["duration"] = value
    return json.dumps(payload)


@pytest.mark.parametrize(
    ("raw", "error_type"),
    [
        (_stored_matches_with_duration(10**400), "OverflowError"),
        (_stored_matches_with_duration(float("inf")), "DecodeError"),
        (_stored_matches_with_duration(float("nan")), "DecodeError"),
        ("[" * 100_000 + "]" * 100_000, "RecursionError"),
    ],
    ids=["huge-int", "infinity", "nan", "deep-nesting"],
)
def test_out_of_range_json_falls_back_to_sample_matches(raw: str, error_type: str) -> None:
    store = InMemoryKeyValueStore({"savedMatches": raw})
    repo = match_repository(store, now=lambda: FIXED_NOW)

    with capture_logs() as logs:
        matches = repo.load()

    assert matches == generate_matches(FIXED_NOW)
    assert logs[0]["event"] == "collection_decode_failed"
    assert logs[0]["error_type"] == error_type


def test_loaded_non_finite_value_does_not_block_later_saves() -> None:
    store = InMemoryKeyValueStore({"savedMatches": _stored_matches_with_duration(float("inf"))})
    repo = match_repository(store, now=lambda: FIXED_NOW)

    assert repo.save(repo.load()) is True
    assert repo.load() == generate_matches(FIXED_NOW)


def test_offset_dates_sort_alongside_naive_dates() -> None:
    payload = json.loads(encode_matches(generate_matches(FIXED_NOW)))
    payload[0]["date"] = "2026-05-25T12:00:00+00:00"
    store = InMemoryKeyValueStore({"savedMatches": json.dumps(payload)})
    repo = match_repository(store, now=lambda: FIXED_NOW)

    ordered = filter_matches(repo.load())

    assert len(ordered) == 3
    assert datetime(2026, 5, 25, 12, 0) in [match.date for match in ordered]
