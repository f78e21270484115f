"""In-memory key-value store adapter.

This adapter implements KeyValueStorePort for tests and throwaway sessions.
For the device, use SQLiteKeyValueStore.
"""

from credstore.ports.store import Scalar


class InMemoryKeyValueStore:
    """In-memory preferences storage - suitable for single-process use."""

    def __init__(self, initial: dict[str, Scalar] | None = None) -> None:
        self._values: dict[str, Scalar] = dict(initial or {})

    def read(self, key: str) -> Scalar | None:
        """Get value by key."""
        return self._values.get(key)

    def write(self, key: str, value: Scalar) -> None:
        """Save value under key."""
        self._values[key] = value

    def delete(self, key: str) -> None:
        """Delete value by key."""
        self._values.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self._values
