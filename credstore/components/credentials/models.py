"""Credential table data models.

Frozen dataclasses for inputs and outputs.
"""

from __future__ import annotations

from dataclasses import dataclass

from credstore.domain.outcomes import ErrorCode


@dataclass(frozen=True)
class CreateCredentialInput:
    username: str
    password: str


@dataclass(frozen=True)
class UpdateCredentialInput:
    username: str
    password: str


@dataclass(frozen=True)
class DeleteCredentialInput:
    username: str


@dataclass(frozen=True)
class ValidateCredentialInput:
    username: str
    password: str


@dataclass(frozen=True)
class CredentialOutput:
    """Result of a mutating credential operation."""

    username: str
    success: bool
    error_code: ErrorCode | None = None
    error: str | None = None

    @classmethod
    def ok(cls, username: str) -> CredentialOutput:
        return cls(username=username, success=True)

    @classmethod
    def failed(cls, username: str, code: ErrorCode, message: str) -> CredentialOutput:
        return cls(username=username, success=False, error_code=code, error=message)
