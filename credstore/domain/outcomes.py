"""
Outcome codes returned by store operations.

Failures are reported in output objects, never raised across the store
boundary. Decode failures of stored blobs are not listed here: they are
recovered inside the components and never reach a caller.
"""

from typing import Literal

ErrorCode = Literal[
    "not_found",
    "conflict",
    "invalid_credentials",
    "protected_account",
    "validation_failed",
    "not_logged_in",
]

NOT_FOUND: ErrorCode = "not_found"
CONFLICT: ErrorCode = "conflict"
INVALID_CREDENTIALS: ErrorCode = "invalid_credentials"
PROTECTED_ACCOUNT: ErrorCode = "protected_account"
VALIDATION_FAILED: ErrorCode = "validation_failed"
NOT_LOGGED_IN: ErrorCode = "not_logged_in"
