"""
Legacy migration component.

Upgrades the single-user schema (one `username` and one `password` key) into
the multi-user credential table. Safe to run on every cold start.

Algorithm:
1. If the credential table key already exists, skip to step 3.
2. Otherwise seed the table with the legacy user when both legacy fields
   are present and non-empty.
3. Ensure the admin account exists; persist only if something changed.

Legacy keys are only read, never rewritten or removed.
"""

from __future__ import annotations

import logging

from credstore.components.bootstrap import ensure_admin_in
from credstore.components.credentials import load_table, save_table
from credstore.rules.models import AdminBootstrapRules, StoreKeys

from .models import MigrationOutput
from .ports import LegacyStorePort

logger = logging.getLogger(__name__)


def _read_legacy_user(store: LegacyStorePort, keys: StoreKeys) -> tuple[str, str] | None:
    username = store.get(keys.legacy_username)
    password = store.get(keys.legacy_password)
    if not username or not password:
        return None
    return username, password


def run_migration(
    store: LegacyStorePort,
    keys: StoreKeys,
    admin: AdminBootstrapRules,
) -> MigrationOutput:
    with store.locked(keys.credentials):
        legacy_username: str | None = None

        if store.contains(keys.credentials):
            table = load_table(store, keys.credentials)
        else:
            table = {}
            legacy = _read_legacy_user(store, keys)
            if legacy is not None:
                legacy_username, legacy_password = legacy
                table[legacy_username] = legacy_password

        admin_created = ensure_admin_in(table, admin)
        legacy_imported = legacy_username is not None
        written = legacy_imported or admin_created

        if written:
            save_table(store, keys.credentials, table)

    if legacy_imported:
        logger.info("Migration: imported legacy account '%s'", legacy_username)
    if admin_created:
        logger.info("Migration: created default account '%s'", admin.username)

    return MigrationOutput(
        legacy_imported=legacy_imported,
        admin_created=admin_created,
        written=written,
        legacy_username=legacy_username,
    )
