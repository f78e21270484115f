"""Profile component port definitions."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Protocol


class EncodedStorePort(Protocol):
    """Mapping-level access to the encoded store."""

    def get_mapping(self, key: str) -> dict[str, Any]:
        """Decode the mapping under key."""
        ...

    def set_mapping(self, key: str, mapping: dict[str, Any]) -> None:
        """Persist mapping under key."""
        ...

    def contains(self, key: str) -> bool:
        """Check whether key is present."""
        ...

    def locked(self, key: str) -> AbstractContextManager[None]:
        """Exclusive, re-entrant lock for key."""
        ...
