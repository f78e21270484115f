"""Bootstrap component implementation.

Guarantees the administrator account exists in the credential table and
defines which accounts UI-facing delete flows must refuse.

The admin check runs after every migration and whenever an account service
loads the table for the first time, so there is no window where a freshly
loaded table lacks the admin entry.
"""

from __future__ import annotations

import logging

from credstore.components.credentials import load_table, save_table
from credstore.rules.models import AdminBootstrapRules, StoreKeys

from .models import BootstrapOutput
from .ports import EncodedStorePort

logger = logging.getLogger(__name__)


def ensure_admin_in(table: dict[str, str], admin: AdminBootstrapRules) -> bool:
    """Insert the admin credential into table if missing.

    Returns:
        True if the table was changed.
    """
    if admin.username in table:
        return False
    table[admin.username] = admin.password
    return True


def is_protected(username: str, admin: AdminBootstrapRules) -> bool:
    """Whether username may never be deleted."""
    return username == admin.username


def run_ensure_admin(
    store: EncodedStorePort,
    keys: StoreKeys,
    admin: AdminBootstrapRules,
) -> BootstrapOutput:
    """Make sure the admin account exists, writing only when it was absent.

    Args:
        store: Encoded store holding the credential table.
        keys: Store key layout.
        admin: Bootstrap admin credentials from rules.

    Returns:
        BootstrapOutput describing whether the account was created.
    """
    with store.locked(keys.credentials):
        table = load_table(store, keys.credentials)
        if not ensure_admin_in(table, admin):
            return BootstrapOutput.skipped(admin.username, "Admin account already exists")

        save_table(store, keys.credentials, table)

    logger.info("Bootstrap: created default account '%s'", admin.username)
    return BootstrapOutput.created_admin(admin.username)
