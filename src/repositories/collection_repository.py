"""Save and restore whole roster collections under fixed store keys."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Generic, TypeVar

from app_logging import get_logger
from domain.roster.match import Match
from domain.roster.sample_data import generate_matches, generate_teams
from domain.roster.team import Team
from repositories.codec import (
    decode_matches,
    decode_teams,
    encode_matches,
    encode_teams,
)
from repositories.store import KeyValueStore

logger = get_logger(__name__)

ItemT = TypeVar("ItemT")

TEAMS_KEY = "savedTeams"
MATCHES_KEY = "savedMatches"


class CollectionRepository(Generic[ItemT]):
    """Persist one collection as a single value and never fail a load.

    A missing key or any decode failure yields the fallback collection; the
    two cases are logged as separate events so silent substitution stays
    visible in diagnostics.
    """

    def __init__(
        self,
        *,
        store: KeyValueStore,
        key: str,
        encode: Callable[[Sequence[ItemT]], str],
        decode: Callable[[str], tuple[ItemT, ...]],
        fallback: Callable[[], tuple[ItemT, ...]],
        label: str,
    ) -> None:
        self.store = store
        self.key = key
        self.encode = encode
        self.decode = decode
        self.fallback = fallback
        self.label = label

    def save(self, items: Sequence[ItemT]) -> bool:
        """Write the full collection; an encode failure skips the write."""
        try:
            payload = self.encode(items)
        except (TypeError, ValueError) as exc:
            logger.error(
                "collection_encode_failed",
                collection=self.label,
                key=self.key,
                error=str(exc),
            )
            return False

        self.store.set(self.key, payload)
        logger.info("collection_saved", collection=self.label, key=self.key, count=len(items))
        return True

    def load(self) -> tuple[ItemT, ...]:
        raw = self.store.get(self.key)
        if raw is None:
            items = self.fallback()
            logger.info(
                "collection_missing_using_sample_data",
                collection=self.label,
                key=self.key,
                count=len(items),
            )
            return items

        try:
            items = self.decode(raw)
        except (ValueError, TypeError, KeyError, ArithmeticError, RecursionError) as exc:
            # DecodeError is a ValueError; schema drift surfaces the same way.
            items = self.fallback()
            logger.warning(
                "collection_decode_failed",
                collection=self.label,
                key=self.key,
                error=str(exc),
                error_type=type(exc.__cause__ or exc).__name__,
                fallback_count=len(items),
            )
            return items

        logger.info("collection_loaded", collection=self.label, key=self.key, count=len(items))
        return items

    def clear(self) -> None:
        self.store.delete(self.key)


def team_repository(store: KeyValueStore, *, key: str = TEAMS_KEY) -> CollectionRepository[Team]:
    return CollectionRepository[Team](
        store=store,
        key=key,
        encode=encode_teams,
        decode=decode_teams,
        fallback=generate_teams,
        label="teams",
    )


def match_repository(
    store: KeyValueStore,
    *,
    key: str = MATCHES_KEY,
    now: Callable[[], datetime] | None = None,
) -> CollectionRepository[Match]:
    """Match repository; `now` pins the sample-data clock for reproducible fallbacks."""

    def fallback() -> tuple[Match, ...]:
        return generate_matches(now() if now is not None else None)

    return CollectionRepository[Match](
        store=store,
        key=key,
        encode=encode_matches,
        decode=decode_matches,
        fallback=fallback,
        label="matches",
    )


__all__ = [
    "CollectionRepository",
    "MATCHES_KEY",
    "TEAMS_KEY",
    "match_repository",
    "team_repository",
]
