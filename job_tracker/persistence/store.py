"""Key-value stores for small pieces of user state."""
from typing import Optional, Protocol, runtime_checkable

from sqlalchemy.orm import Session

from job_tracker.persistence.models import KeyValueEntry


@runtime_checkable
class KeyValueStore(Protocol):
    """String-to-string store, the shape of browser local storage."""

    def get(self, key: str) -> Optional[str]:
        """Return the value for key, or None if unset."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...


class InMemoryKeyValueStore:
    """Dict-backed store, for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __repr__(self) -> str:
        return f"<InMemoryKeyValueStore keys={sorted(self._data)}>"


class SqlKeyValueStore:
    """Store backed by the kv_store table."""

    def __init__(self, session: Session):
        """
        Initialize the store.

        Args:
            session: Database session (caller owns the transaction)
        """
        self.session = session

    def get(self, key: str) -> Optional[str]:
        entry = self.session.get(KeyValueEntry, key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: str) -> None:
        entry = self.session.get(KeyValueEntry, key)
        if entry is None:
            self.session.add(KeyValueEntry(key=key, value=value))
        else:
            entry.value = value
        self.session.flush()

    def delete(self, key: str) -> None:
        entry = self.session.get(KeyValueEntry, key)
        if entry is not None:
            self.session.delete(entry)
            self.session.flush()
