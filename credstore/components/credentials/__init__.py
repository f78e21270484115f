"""
Credentials component - the username to password table.

Authentication source of truth: create, update, delete, validate, exists.
"""

from .component import (
    load_table,
    run,
    run_create,
    run_delete,
    run_exists,
    run_load_all,
    run_update,
    run_validate,
    save_table,
)
from .models import (
    CreateCredentialInput,
    CredentialOutput,
    DeleteCredentialInput,
    UpdateCredentialInput,
    ValidateCredentialInput,
)
from .ports import EncodedStorePort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_delete",
    "run_exists",
    "run_load_all",
    "run_update",
    "run_validate",
    "load_table",
    "save_table",
    # Models
    "CreateCredentialInput",
    "CredentialOutput",
    "DeleteCredentialInput",
    "UpdateCredentialInput",
    "ValidateCredentialInput",
    # Ports
    "EncodedStorePort",
]
