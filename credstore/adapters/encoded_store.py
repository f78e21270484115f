"""
Encoded Store Adapter.

Wraps a KeyValueStorePort with typed reads that fall back to caller-supplied
defaults, a JSON codec for mapping blobs, and one lock per logical key.

Key behaviors:
- Missing keys return the default, never raise.
- A scalar of the wrong type (e.g. a string where a bool is expected) reads
  as absent.
- get_mapping raises MalformedStorageError; the component layer recovers.
- locked(key) serialises read-modify-write cycles on that key.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from credstore.ports.store import KeyValueStorePort, MalformedStorageError, Scalar


class EncodedStore:
    """Typed, lock-aware facade over a raw key-value backend."""

    def __init__(self, backend: KeyValueStorePort) -> None:
        self.backend = backend
        self._locks: dict[str, threading.RLock] = {}
        self._registry_lock = threading.Lock()

    # --- Locking ---

    def _lock_for(self, key: str) -> threading.RLock:
        with self._registry_lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def locked(self, key: str) -> Iterator[None]:
        """Hold the exclusive lock for key. Re-entrant on the same thread."""
        lock = self._lock_for(key)
        with lock:
            yield

    # --- Scalars ---

    def get(self, key: str, default: str | None = None) -> str | None:
        value = self.backend.read(key)
        if not isinstance(value, str):
            return default
        return value

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.backend.read(key)
        if not isinstance(value, bool):
            return default
        return value

    def set(self, key: str, value: Scalar) -> None:
        self.backend.write(key, value)

    def remove(self, key: str) -> None:
        self.backend.delete(key)

    def contains(self, key: str) -> bool:
        return self.backend.contains(key)

    # --- Mappings ---

    def get_mapping(self, key: str) -> dict[str, Any]:
        """
        Decode the JSON object stored under key.

        Returns:
            The decoded mapping, or an empty dict if the key is absent.

        Raises:
            MalformedStorageError: If the value is not a JSON object.
        """
        raw = self.backend.read(key)
        if raw is None:
            return {}
        if not isinstance(raw, str):
            raise MalformedStorageError(key, f"expected encoded text, got {type(raw).__name__}")
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedStorageError(key, f"invalid JSON ({e.msg})") from e
        if not isinstance(decoded, dict):
            raise MalformedStorageError(key, f"expected object, got {type(decoded).__name__}")
        return decoded

    def set_mapping(self, key: str, mapping: dict[str, Any]) -> None:
        self.backend.write(key, json.dumps(mapping, separators=(",", ":")))
