"""
Migration component port definitions.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Protocol


class LegacyStorePort(Protocol):
    """Store access needed to read the single-user schema and write the table."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Read a text scalar, or default when absent."""
        ...

    def contains(self, key: str) -> bool:
        """Check whether key is present."""
        ...

    def get_mapping(self, key: str) -> dict[str, Any]:
        """Decode the mapping under key."""
        ...

    def set_mapping(self, key: str, mapping: dict[str, Any]) -> None:
        """Persist mapping under key."""
        ...

    def locked(self, key: str) -> AbstractContextManager[None]:
        """Exclusive, re-entrant lock for key."""
        ...
