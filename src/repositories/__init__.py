"""Persistence helpers for roster collections."""

from repositories.collection_repository import (
    MATCHES_KEY,
    TEAMS_KEY,
    CollectionRepository,
    match_repository,
    team_repository,
)
from repositories.store import (
    InMemoryKeyValueStore,
    KeyValueStore,
    SqlKeyValueStore,
    ensure_kv_schema,
)

__all__ = [
    "MATCHES_KEY",
    "TEAMS_KEY",
    "CollectionRepository",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "ensure_kv_schema",
    "match_repository",
    "team_repository",
]
