"""
Key-value storage port (device preferences).

Protocol-based interface for the persistent string-keyed store that backs
credentials, profiles and session scalars.
Implementations: in-memory (tests), SQLite (device).

Invariants:
- Values are scalars: ``str`` or ``bool``. Structured data is encoded to a
  string by the encoded store before it reaches a backend.
- A write is visible to the next read on any thread.
"""

from __future__ import annotations

from typing import Protocol

Scalar = str | bool


class StoreError(Exception):
    """Base exception for key-value storage errors."""

    pass


class StoreBackendError(StoreError):
    """Backend could not read or write (I/O, locked database, ...)."""

    pass


class MalformedStorageError(StoreError):
    """Stored value could not be decoded into the expected structure."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Malformed value under '{key}': {reason}")


class KeyValueStorePort(Protocol):
    """
    Persistent key-value store port.

    One namespace per store instance; keys are plain strings.
    """

    def read(self, key: str) -> Scalar | None:
        """
        Read the raw value stored under key.

        Returns:
            The stored scalar, or None if the key is absent.
        """
        ...

    def write(self, key: str, value: Scalar) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove key. Removing an absent key is a no-op."""
        ...

    def contains(self, key: str) -> bool:
        """Check whether key is present."""
        ...
