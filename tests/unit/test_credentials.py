import pytest

from credstore.components.credentials import (
    CreateCredentialInput,
    DeleteCredentialInput,
    UpdateCredentialInput,
    ValidateCredentialInput,
    run,
    run_create,
    run_delete,
    run_exists,
    run_load_all,
    run_update,
    run_validate,
)


def test_load_all_empty_store(store, keys):
    assert run_load_all(store, keys) == {}


def test_load_all_malformed_blob_is_empty(store, keys, caplog):
    store.set(keys.credentials, "{{{ definitely not json")

    assert run_load_all(store, keys) == {}
    assert "unreadable" in caplog.text


def test_load_all_drops_non_text_passwords(store, keys):
    store.set_mapping(keys.credentials, {"alice": "pw", "bob": 5, "carol": None})

    assert run_load_all(store, keys) == {"alice": "pw"}


def test_create_then_validate(store, keys):
    out = run_create(CreateCredentialInput("alice", "pw12"), store, keys)

    assert out.success is True
    assert out.error_code is None
    assert run_validate(ValidateCredentialInput("alice", "pw12"), store, keys) is True
    assert run_validate(ValidateCredentialInput("alice", "pw12x"), store, keys) is False


def test_create_conflict_does_not_write(store, keys, backend):
    run_create(CreateCredentialInput("alice", "first"), store, keys)
    before = backend.read(keys.credentials)

    out = run_create(CreateCredentialInput("alice", "second"), store, keys)

    assert out.success is False
    assert out.error_code == "conflict"
    assert backend.read(keys.credentials) == before
    assert run_validate(ValidateCredentialInput("alice", "first"), store, keys) is True


def test_usernames_are_case_sensitive(store, keys):
    run_create(CreateCredentialInput("Alice", "pw"), store, keys)

    assert run_create(CreateCredentialInput("alice", "pw"), store, keys).success is True
    assert run_exists("Alice", store, keys) is True
    assert run_exists("ALICE", store, keys) is False


def test_validate_is_exact_match(store, keys):
    run_create(CreateCredentialInput("alice", "Secret"), store, keys)

    assert run_validate(ValidateCredentialInput("alice", "secret"), store, keys) is False
    assert run_validate(ValidateCredentialInput("alice", "Secret "), store, keys) is False
    assert run_validate(ValidateCredentialInput("nobody", "Secret"), store, keys) is False


def test_update_overwrites(store, keys):
    run_create(CreateCredentialInput("alice", "p1"), store, keys)

    out = run_update(UpdateCredentialInput("alice", "p2"), store, keys)

    assert out.success is True
    assert run_validate(ValidateCredentialInput("alice", "p1"), store, keys) is False
    assert run_validate(ValidateCredentialInput("alice", "p2"), store, keys) is True


def test_update_missing_user(store, keys):
    out = run_update(UpdateCredentialInput("ghost", "pw"), store, keys)

    assert out.success is False
    assert out.error_code == "not_found"
    assert run_exists("ghost", store, keys) is False


def test_delete_removes_and_second_delete_is_not_found(store, keys):
    run_create(CreateCredentialInput("alice", "pw"), store, keys)

    first = run_delete(DeleteCredentialInput("alice"), store, keys)
    second = run_delete(DeleteCredentialInput("alice"), store, keys)

    assert first.success is True
    assert run_exists("alice", store, keys) is False
    assert second.success is False
    assert second.error_code == "not_found"


def test_table_layer_does_not_protect_admin(store, keys):
    """Admin protection lives in the delete flows above the table."""
    run_create(CreateCredentialInput("admin", "admin"), store, keys)

    out = run_delete(DeleteCredentialInput("admin"), store, keys)

    assert out.success is True
    assert run_exists("admin", store, keys) is False


def test_create_over_malformed_blob_recovers(store, keys):
    store.set(keys.credentials, "garbage")

    out = run_create(CreateCredentialInput("alice", "pw"), store, keys)

    assert out.success is True
    assert run_load_all(store, keys) == {"alice": "pw"}


def test_run_dispatch(store, keys):
    assert run(CreateCredentialInput("alice", "pw"), store=store, keys=keys).success is True
    assert run(ValidateCredentialInput("alice", "pw"), store=store, keys=keys) is True
    assert run(UpdateCredentialInput("alice", "pw2"), store=store, keys=keys).success is True
    assert run(DeleteCredentialInput("alice"), store=store, keys=keys).success is True

    with pytest.raises(ValueError):
        run("alice", store=store, keys=keys)  # type: ignore[arg-type]
