"""ORM models."""

from models.base import Base
from models.kv_entry import KeyValueEntry

__all__ = ["Base", "KeyValueEntry"]
