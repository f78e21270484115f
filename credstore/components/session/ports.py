from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from credstore.ports.store import Scalar


class ScalarStorePort(Protocol):
    """Scalar access to the encoded store."""

    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_bool(self, key: str, default: bool) -> bool: ...
    def set(self, key: str, value: Scalar) -> None: ...
    def remove(self, key: str) -> None: ...
    def locked(self, key: str) -> AbstractContextManager[None]: ...
