"""Bootstrap component data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BootstrapOutput:
    """Result of an ensure-admin pass."""

    username: str
    created: bool
    skipped_reason: str | None

    @classmethod
    def skipped(cls, username: str, reason: str) -> BootstrapOutput:
        return cls(username=username, created=False, skipped_reason=reason)

    @classmethod
    def created_admin(cls, username: str) -> BootstrapOutput:
        return cls(username=username, created=True, skipped_reason=None)
