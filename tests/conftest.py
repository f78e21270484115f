from pathlib import Path

import pytest

from credstore.adapters.avatar_seeds import FixedAvatarSeeds
from credstore.adapters.encoded_store import EncodedStore
from credstore.adapters.memory_store import InMemoryKeyValueStore
from credstore.rules.loader import load_rules
from credstore.services.account import AccountService

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules():
    """Load the REAL rules file shipped at the project root."""
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def keys(rules):
    return rules.keys


@pytest.fixture
def admin(rules):
    return rules.bootstrap_admin


@pytest.fixture
def backend():
    return InMemoryKeyValueStore()


@pytest.fixture
def store(backend):
    return EncodedStore(backend)


@pytest.fixture
def service(store, rules):
    """AccountService over an empty in-memory store, with predictable avatar seeds."""
    return AccountService(store, rules, avatar_seeds=FixedAvatarSeeds())
