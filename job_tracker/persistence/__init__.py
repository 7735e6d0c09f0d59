"""Persistence layer for user state."""
from .models import Base, KeyValueEntry
from .store import InMemoryKeyValueStore, KeyValueStore, SqlKeyValueStore

__all__ = [
    "Base",
    "KeyValueEntry",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SqlKeyValueStore",
]
