"""
Profile extension - per-user bio and avatar seed.

Stored as one mapping {username: {"bio": str, "avatarSeed": str}}. Rows are
created on first write and are not removed when the credential goes away.
Updates rewrite the whole mapping under the profiles key lock.
"""

from __future__ import annotations

import logging
from typing import Any

from credstore.components.credentials import load_table
from credstore.domain.entities import Profile, UserView
from credstore.ports.store import MalformedStorageError
from credstore.rules.models import DEFAULT_AVATAR_URL_TEMPLATE, AdminBootstrapRules, StoreKeys

from .models import ProfileOutput, UpdateAvatarSeedInput, UpdateBioInput
from .ports import EncodedStorePort

logger = logging.getLogger(__name__)

BIO_FIELD = "bio"
AVATAR_SEED_FIELD = "avatarSeed"


def _load_profiles(store: EncodedStorePort, key: str) -> dict[str, dict[str, str]]:
    try:
        raw = store.get_mapping(key)
    except MalformedStorageError as e:
        logger.warning("Profile table unreadable, treating as empty: %s", e.reason)
        return {}

    profiles: dict[str, dict[str, str]] = {}
    for username, row in raw.items():
        if not isinstance(row, dict):
            logger.warning("Dropping malformed profile row for %r", username)
            continue
        profiles[username] = {k: v for k, v in row.items() if isinstance(v, str)}
    return profiles


def _to_profile(username: str, row: dict[str, Any] | None) -> Profile:
    if not row:
        return Profile.default_for(username)
    return Profile(
        bio=row.get(BIO_FIELD, ""),
        avatar_seed=row.get(AVATAR_SEED_FIELD, username),
    )


def _update_field(
    store: EncodedStorePort, keys: StoreKeys, username: str, field: str, value: str
) -> ProfileOutput:
    with store.locked(keys.profiles):
        profiles = _load_profiles(store, keys.profiles)
        row = dict(profiles.get(username, {}))
        row[field] = value
        profiles[username] = row
        store.set_mapping(keys.profiles, profiles)
    return ProfileOutput(username=username, profile=_to_profile(username, row))


def run_get_profile(username: str, store: EncodedStorePort, keys: StoreKeys) -> Profile:
    profiles = _load_profiles(store, keys.profiles)
    return _to_profile(username, profiles.get(username))


def run_update_bio(
    inp: UpdateBioInput, store: EncodedStorePort, keys: StoreKeys
) -> ProfileOutput:
    return _update_field(store, keys, inp.username, BIO_FIELD, inp.bio)


def run_update_avatar_seed(
    inp: UpdateAvatarSeedInput, store: EncodedStorePort, keys: StoreKeys
) -> ProfileOutput:
    return _update_field(store, keys, inp.username, AVATAR_SEED_FIELD, inp.avatar_seed)


def run_get_user(
    username: str,
    store: EncodedStorePort,
    keys: StoreKeys,
    admin: AdminBootstrapRules,
    avatar_url_template: str = DEFAULT_AVATAR_URL_TEMPLATE,
) -> UserView | None:
    """Compose credential, profile and admin flag into a UserView.

    Returns None when the username has no credential.
    """
    password = load_table(store, keys.credentials).get(username)
    if password is None:
        return None

    profile = run_get_profile(username, store, keys)
    return UserView(
        username=username,
        password=password,
        bio=profile.bio,
        avatar_seed=profile.avatar_seed,
        is_admin=username == admin.username,
        avatar_url=UserView.build_avatar_url(profile.avatar_seed, avatar_url_template),
    )
