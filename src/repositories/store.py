"""Durable key-value stores holding whole serialized collections."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

from sqlalchemy import delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from models import Base, KeyValueEntry


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal contract: one string value per key, replaced as a whole."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryKeyValueStore:
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._values)


class SqlKeyValueStore:
    """Store backed by the kv_entries table; each write is one transaction."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, db_url: str) -> SqlKeyValueStore:
        engine = create_db_engine(db_url)
        ensure_kv_schema(engine)
        return cls(create_session_factory(engine))

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            return session.scalar(select(KeyValueEntry.value).where(KeyValueEntry.key == key))

    def set(self, key: str, value: str) -> None:
        """Replace the stored value; concurrent writers resolve last-writer-wins."""
        with self._session_factory() as session, session.begin():
            entry = session.get(KeyValueEntry, key)
            now = datetime.now(UTC).replace(tzinfo=None)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=value, updated_at=now))
            else:
                entry.value = value
                entry.updated_at = now

    def delete(self, key: str) -> None:
        with self._session_factory() as session, session.begin():
            session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))


def ensure_kv_schema(engine: Engine) -> None:
    """Create the kv_entries table if it does not exist."""
    Base.metadata.create_all(bind=engine, tables=[KeyValueEntry.__table__])


__all__ = ["InMemoryKeyValueStore", "KeyValueStore", "SqlKeyValueStore", "ensure_kv_schema"]
