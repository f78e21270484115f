"""
Session state (current user, remember-me, first launch).

Each value is its own store key with its own default:
- current user: absent means nobody is logged in
- remember-me: False
- first launch: True, flipped to False once by complete_onboarding()

A remembered flag without a current user is valid and simply does not
auto-login.
"""

from __future__ import annotations

from credstore.domain.entities import StartRoute
from credstore.rules.models import StoreKeys

from .ports import ScalarStorePort


class SessionState:
    """Reads and writes the persisted session scalars."""

    def __init__(self, store: ScalarStorePort, keys: StoreKeys) -> None:
        self._store = store
        self._keys = keys

    # --- Current user ---

    def set_current_user(self, username: str | None) -> None:
        with self._store.locked(self._keys.current_user):
            if username is None:
                self._store.remove(self._keys.current_user)
            else:
                self._store.set(self._keys.current_user, username)

    def get_current_user(self) -> str | None:
        return self._store.get(self._keys.current_user)

    def clear_current_user(self) -> None:
        self.set_current_user(None)

    # --- Remember me ---

    def set_remember_me(self, remember: bool) -> None:
        with self._store.locked(self._keys.remember_me):
            self._store.set(self._keys.remember_me, remember)

    def get_remember_me(self) -> bool:
        return self._store.get_bool(self._keys.remember_me, False)

    # --- Onboarding ---

    def is_first_launch(self) -> bool:
        return self._store.get_bool(self._keys.first_launch, True)

    def complete_onboarding(self) -> None:
        """Mark onboarding done. There is no way back to first-launch."""
        with self._store.locked(self._keys.first_launch):
            self._store.set(self._keys.first_launch, False)

    # --- Derived ---

    def should_auto_login(self) -> bool:
        return self.get_remember_me() and self.get_current_user() is not None

    def logout(self) -> None:
        """Clear the current user and forget the remember-me choice."""
        self.clear_current_user()
        self.set_remember_me(False)


def resolve_start_route(session: SessionState) -> StartRoute:
    """
    Pick the first screen for a cold start.

    First launch wins over a remembered session.
    """
    if session.is_first_launch():
        return "onboarding"
    if session.should_auto_login():
        return "home"
    return "login"
