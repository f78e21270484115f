"""Credential table implementation.

The table is one encoded mapping {username: password} under a single store
key. Every mutation is a whole-table read-modify-write held under that key's
lock. Passwords are compared as plain text.

No username receives special treatment here: protecting the admin account is
the caller's job (see the bootstrap component).
"""

from __future__ import annotations

import logging

from credstore.domain.outcomes import CONFLICT, NOT_FOUND
from credstore.ports.store import MalformedStorageError
from credstore.rules.models import StoreKeys

from .models import (
    CreateCredentialInput,
    CredentialOutput,
    DeleteCredentialInput,
    UpdateCredentialInput,
    ValidateCredentialInput,
)
from .ports import EncodedStorePort

logger = logging.getLogger(__name__)


def load_table(store: EncodedStorePort, key: str) -> dict[str, str]:
    """Decode the credential mapping, substituting {} for malformed data."""
    try:
        raw = store.get_mapping(key)
    except MalformedStorageError as e:
        logger.warning("Credential table unreadable, treating as empty: %s", e.reason)
        return {}

    table: dict[str, str] = {}
    for username, password in raw.items():
        if not isinstance(password, str):
            logger.warning("Dropping credential entry with non-text password: %r", username)
            continue
        table[username] = password
    return table


def save_table(store: EncodedStorePort, key: str, table: dict[str, str]) -> None:
    store.set_mapping(key, table)


def run_load_all(store: EncodedStorePort, keys: StoreKeys) -> dict[str, str]:
    return load_table(store, keys.credentials)


def run_exists(username: str, store: EncodedStorePort, keys: StoreKeys) -> bool:
    return username in load_table(store, keys.credentials)


def run_validate(inp: ValidateCredentialInput, store: EncodedStorePort, keys: StoreKeys) -> bool:
    table = load_table(store, keys.credentials)
    stored = table.get(inp.username)
    return stored is not None and stored == inp.password


def run_create(
    inp: CreateCredentialInput, store: EncodedStorePort, keys: StoreKeys
) -> CredentialOutput:
    with store.locked(keys.credentials):
        table = load_table(store, keys.credentials)
        if inp.username in table:
            return CredentialOutput.failed(inp.username, CONFLICT, "Username already exists")

        table[inp.username] = inp.password
        save_table(store, keys.credentials, table)
    return CredentialOutput.ok(inp.username)


def run_update(
    inp: UpdateCredentialInput, store: EncodedStorePort, keys: StoreKeys
) -> CredentialOutput:
    with store.locked(keys.credentials):
        table = load_table(store, keys.credentials)
        if inp.username not in table:
            return CredentialOutput.failed(inp.username, NOT_FOUND, "User not found")

        table[inp.username] = inp.password
        save_table(store, keys.credentials, table)
    return CredentialOutput.ok(inp.username)


def run_delete(
    inp: DeleteCredentialInput, store: EncodedStorePort, keys: StoreKeys
) -> CredentialOutput:
    with store.locked(keys.credentials):
        table = load_table(store, keys.credentials)
        if inp.username not in table:
            return CredentialOutput.failed(inp.username, NOT_FOUND, "User not found")

        del table[inp.username]
        save_table(store, keys.credentials, table)
    return CredentialOutput.ok(inp.username)


def run(
    inp: (
        CreateCredentialInput
        | UpdateCredentialInput
        | DeleteCredentialInput
        | ValidateCredentialInput
    ),
    *,
    store: EncodedStorePort,
    keys: StoreKeys,
) -> CredentialOutput | bool:
    if isinstance(inp, CreateCredentialInput):
        return run_create(inp, store, keys)

    elif isinstance(inp, UpdateCredentialInput):
        return run_update(inp, store, keys)

    elif isinstance(inp, DeleteCredentialInput):
        return run_delete(inp, store, keys)

    elif isinstance(inp, ValidateCredentialInput):
        return run_validate(inp, store, keys)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
