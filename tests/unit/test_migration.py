import pytest

from credstore.components.credentials import run_load_all
from credstore.components.migration import run_migration


def test_fresh_store_gets_admin_only(store, keys, admin):
    result = run_migration(store, keys, admin)

    assert result.admin_created is True
    assert result.legacy_imported is False
    assert result.written is True
    assert run_load_all(store, keys) == {"admin": "admin"}


def test_legacy_user_is_imported(store, keys, admin):
    store.set(keys.legacy_username, "bob")
    store.set(keys.legacy_password, "secret")

    result = run_migration(store, keys, admin)

    assert result.legacy_imported is True
    assert result.legacy_username == "bob"
    assert run_load_all(store, keys) == {"bob": "secret", "admin": "admin"}


def test_legacy_keys_are_left_in_place(store, keys, admin):
    store.set(keys.legacy_username, "bob")
    store.set(keys.legacy_password, "secret")

    run_migration(store, keys, admin)

    assert store.get(keys.legacy_username) == "bob"
    assert store.get(keys.legacy_password) == "secret"


@pytest.mark.parametrize(
    "legacy",
    [
        {"username": "bob"},
        {"password": "secret"},
        {"username": "", "password": "secret"},
        {"username": "bob", "password": ""},
    ],
)
def test_incomplete_legacy_data_is_ignored(store, keys, admin, legacy):
    if "username" in legacy:
        store.set(keys.legacy_username, legacy["username"])
    if "password" in legacy:
        store.set(keys.legacy_password, legacy["password"])

    result = run_migration(store, keys, admin)

    assert result.legacy_imported is False
    assert run_load_all(store, keys) == {"admin": "admin"}


def test_existing_table_skips_legacy_import(store, keys, admin):
    store.set_mapping(keys.credentials, {"alice": "pw"})
    store.set(keys.legacy_username, "bob")
    store.set(keys.legacy_password, "secret")

    result = run_migration(store, keys, admin)

    assert result.legacy_imported is False
    assert result.admin_created is True
    assert run_load_all(store, keys) == {"alice": "pw", "admin": "admin"}


def test_no_write_when_table_already_complete(store, keys, admin, backend):
    store.set_mapping(keys.credentials, {"admin": "changed", "alice": "pw"})
    before = backend.read(keys.credentials)

    result = run_migration(store, keys, admin)

    assert result.written is False
    assert backend.read(keys.credentials) == before
    # An existing admin password is never reset
    assert run_load_all(store, keys)["admin"] == "changed"


def test_legacy_admin_keeps_its_password(store, keys, admin):
    store.set(keys.legacy_username, "admin")
    store.set(keys.legacy_password, "hunter2")

    result = run_migration(store, keys, admin)

    assert result.legacy_imported is True
    assert result.admin_created is False
    assert run_load_all(store, keys) == {"admin": "hunter2"}


@pytest.mark.parametrize("times", [1, 2, 5])
def test_migration_is_idempotent(store, keys, admin, times):
    store.set(keys.legacy_username, "bob")
    store.set(keys.legacy_password, "secret")

    run_migration(store, keys, admin)
    once = run_load_all(store, keys)

    for _ in range(times):
        result = run_migration(store, keys, admin)
        assert result.written is False

    assert run_load_all(store, keys) == once


def test_malformed_table_is_replaced_with_admin(store, keys, admin):
    store.set(keys.credentials, "not-json")

    result = run_migration(store, keys, admin)

    assert result.admin_created is True
    assert run_load_all(store, keys) == {"admin": "admin"}
