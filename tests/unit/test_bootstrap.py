from unittest.mock import MagicMock

from credstore.components.bootstrap import ensure_admin_in, is_protected, run_ensure_admin
from credstore.components.credentials import run_load_all
from credstore.rules.models import AdminBootstrapRules


def test_ensure_admin_creates_when_missing(store, keys, admin):
    store.set_mapping(keys.credentials, {"alice": "pw"})

    result = run_ensure_admin(store, keys, admin)

    assert result.created is True
    assert result.skipped_reason is None
    assert run_load_all(store, keys) == {"alice": "pw", "admin": "admin"}


def test_ensure_admin_skips_when_present(keys, admin):
    """Should not write if admin already exists."""
    mock_store = MagicMock()
    mock_store.get_mapping.return_value = {"admin": "something-else"}

    result = run_ensure_admin(mock_store, keys, admin)

    assert result.created is False
    assert "already exists" in result.skipped_reason
    mock_store.set_mapping.assert_not_called()


def test_ensure_admin_holds_the_table_lock(keys, admin):
    mock_store = MagicMock()
    mock_store.get_mapping.return_value = {}

    run_ensure_admin(mock_store, keys, admin)

    mock_store.locked.assert_called_once_with(keys.credentials)
    mock_store.set_mapping.assert_called_once_with(keys.credentials, {"admin": "admin"})


def test_configured_admin_credentials(store, keys):
    custom = AdminBootstrapRules(username="root", password="toor")

    run_ensure_admin(store, keys, custom)

    assert run_load_all(store, keys) == {"root": "toor"}


def test_ensure_admin_in_reports_change():
    table = {"alice": "pw"}
    admin = AdminBootstrapRules()

    assert ensure_admin_in(table, admin) is True
    assert ensure_admin_in(table, admin) is False
    assert table == {"alice": "pw", "admin": "admin"}


def test_is_protected():
    admin = AdminBootstrapRules()

    assert is_protected("admin", admin) is True
    assert is_protected("Admin", admin) is False
    assert is_protected("alice", admin) is False
