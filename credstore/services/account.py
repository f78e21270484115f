"""
AccountService - the collaborator-facing facade.

Screens call this and render what it returns. It wires the components
together:

- Lifecycle: run_migration, get_start_route, complete_onboarding
- Auth: register, login, logout
- Profile: get_current_user_view, update_bio, regenerate_avatar
- Admin: list_users, create_user, update_user_password, delete_user

Failures come back as AccountOutput with an error code; nothing here raises
for an expected outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from credstore.adapters.avatar_seeds import RandomAvatarSeeds
from credstore.adapters.encoded_store import EncodedStore
from credstore.components import bootstrap, credentials, migration, profile
from credstore.components.credentials import (
    CreateCredentialInput,
    DeleteCredentialInput,
    UpdateCredentialInput,
    ValidateCredentialInput,
)
from credstore.components.migration import MigrationOutput
from credstore.components.profile import UpdateAvatarSeedInput, UpdateBioInput
from credstore.components.session import SessionState, resolve_start_route
from credstore.domain.entities import StartRoute, UserView
from credstore.domain.outcomes import (
    INVALID_CREDENTIALS,
    NOT_LOGGED_IN,
    PROTECTED_ACCOUNT,
    VALIDATION_FAILED,
    ErrorCode,
)
from credstore.ports.avatar import AvatarSeedPort
from credstore.rules.models import Rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountOutput:
    username: str | None = None
    user: UserView | None = None
    success: bool = False
    error_code: ErrorCode | None = None
    error: str | None = None

    @classmethod
    def ok(cls, username: str | None, user: UserView | None = None) -> AccountOutput:
        return cls(username=username, user=user, success=True)

    @classmethod
    def failed(cls, username: str | None, code: ErrorCode, message: str) -> AccountOutput:
        return cls(username=username, success=False, error_code=code, error=message)

    @classmethod
    def from_credential(cls, out: credentials.CredentialOutput) -> AccountOutput:
        if out.success:
            return cls.ok(out.username)
        assert out.error_code is not None
        return cls.failed(out.username, out.error_code, out.error or "")


class AccountService:
    def __init__(
        self,
        store: EncodedStore,
        rules: Rules | None = None,
        avatar_seeds: AvatarSeedPort | None = None,
    ) -> None:
        self.store = store
        self.rules = rules or Rules()
        self.keys = self.rules.keys
        self.avatar_seeds = avatar_seeds or RandomAvatarSeeds(self.rules.avatar.seed_length)
        self.session = SessionState(store, self.keys)

        # Legacy import must run before anything else creates the table
        self.startup_migration = self.run_migration()

    @contextmanager
    def _admin_guarded(self) -> Iterator[None]:
        """Hold the credential table lock with the admin account restored."""
        with self.store.locked(self.keys.credentials):
            bootstrap.run_ensure_admin(self.store, self.keys, self.rules.bootstrap_admin)
            yield

    # --- Lifecycle ---

    def run_migration(self) -> MigrationOutput:
        return migration.run_migration(self.store, self.keys, self.rules.bootstrap_admin)

    def get_start_route(self) -> StartRoute:
        return resolve_start_route(self.session)

    def complete_onboarding(self) -> None:
        self.session.complete_onboarding()

    # --- Auth ---

    def _validate_registration(
        self, username: str, password: str, confirm_password: str | None
    ) -> str | None:
        if not username.strip():
            return "Username is required"
        if not password.strip():
            return "Password is required"
        min_length = self.rules.registration.password_min_length
        if len(password) < min_length:
            return f"Password must be at least {min_length} characters"
        if confirm_password is not None and password != confirm_password:
            return "Passwords do not match"
        return None

    def register(
        self,
        username: str,
        password: str,
        confirm_password: str | None = None,
        bio: str = "",
    ) -> AccountOutput:
        problem = self._validate_registration(username, password, confirm_password)
        if problem:
            return AccountOutput.failed(username, VALIDATION_FAILED, problem)

        with self._admin_guarded():
            out = credentials.run_create(
                CreateCredentialInput(username=username, password=password), self.store, self.keys
            )
        if not out.success:
            logger.info("Registration refused for '%s': %s", username, out.error_code)
            return AccountOutput.from_credential(out)

        profile.run_update_bio(UpdateBioInput(username=username, bio=bio), self.store, self.keys)

        logger.info("Registered account '%s'", username)
        return AccountOutput.ok(username)

    def login(self, username: str, password: str, remember_me: bool = False) -> AccountOutput:
        if not username.strip() or not password.strip():
            return AccountOutput.failed(
                username, VALIDATION_FAILED, "Username and password are required"
            )

        with self._admin_guarded():
            valid = credentials.run_validate(
                ValidateCredentialInput(username=username, password=password), self.store, self.keys
            )
        if not valid:
            # Unknown user and wrong password look the same to the caller
            return AccountOutput.failed(
                username, INVALID_CREDENTIALS, "Invalid username or password"
            )

        self.session.set_current_user(username)
        self.session.set_remember_me(remember_me)
        logger.info("Login for '%s' (remember=%s)", username, remember_me)
        return AccountOutput.ok(username, self.get_user(username))

    def logout(self) -> None:
        self.session.logout()

    # --- Profile ---

    def get_user(self, username: str) -> UserView | None:
        return profile.run_get_user(
            username,
            self.store,
            self.keys,
            self.rules.bootstrap_admin,
            self.rules.avatar.url_template,
        )

    def get_current_user_view(self) -> UserView | None:
        username = self.session.get_current_user()
        if username is None:
            return None
        return self.get_user(username)

    def update_bio(self, bio: str) -> AccountOutput:
        username = self.session.get_current_user()
        if username is None:
            return AccountOutput.failed(None, NOT_LOGGED_IN, "No user logged in")

        profile.run_update_bio(
            UpdateBioInput(username=username, bio=bio.strip()), self.store, self.keys
        )
        return AccountOutput.ok(username, self.get_user(username))

    def regenerate_avatar(self) -> AccountOutput:
        username = self.session.get_current_user()
        if username is None:
            return AccountOutput.failed(None, NOT_LOGGED_IN, "No user logged in")

        seed = self.avatar_seeds.generate()
        profile.run_update_avatar_seed(
            UpdateAvatarSeedInput(username=username, avatar_seed=seed), self.store, self.keys
        )
        return AccountOutput.ok(username, self.get_user(username))

    # --- Admin ---

    def list_users(self) -> list[str]:
        with self._admin_guarded():
            return sorted(credentials.run_load_all(self.store, self.keys))

    def create_user(self, username: str, password: str) -> AccountOutput:
        username = username.strip()
        if not username or not password:
            return AccountOutput.failed(
                username, VALIDATION_FAILED, "Please provide username and password"
            )

        with self._admin_guarded():
            out = credentials.run_create(
                CreateCredentialInput(username=username, password=password), self.store, self.keys
            )
        return AccountOutput.from_credential(out)

    def update_user_password(self, username: str, password: str) -> AccountOutput:
        if not password:
            return AccountOutput.failed(username, VALIDATION_FAILED, "Password cannot be empty")

        with self._admin_guarded():
            out = credentials.run_update(
                UpdateCredentialInput(username=username, password=password), self.store, self.keys
            )
        return AccountOutput.from_credential(out)

    def delete_user(self, username: str) -> AccountOutput:
        if bootstrap.is_protected(username, self.rules.bootstrap_admin):
            return AccountOutput.failed(
                username, PROTECTED_ACCOUNT, f"Cannot delete {username} user"
            )

        with self._admin_guarded():
            out = credentials.run_delete(
                DeleteCredentialInput(username=username), self.store, self.keys
            )
        if out.success and self.session.get_current_user() == username:
            self.session.logout()
            logger.info("Deleted account '%s' was logged in; session cleared", username)

        return AccountOutput.from_credential(out)
