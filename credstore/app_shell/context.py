from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from credstore.adapters.encoded_store import EncodedStore
from credstore.adapters.memory_store import InMemoryKeyValueStore
from credstore.adapters.sqlite_store import create_sqlite_store
from credstore.ports.avatar import AvatarSeedPort
from credstore.ports.store import KeyValueStorePort
from credstore.rules.models import Rules
from credstore.services.account import AccountService


@dataclass
class ServiceContext:
    account_service: AccountService
    store: EncodedStore
    backend: KeyValueStorePort
    rules: Rules

    @classmethod
    def create(
        cls,
        rules: Rules,
        db_path: str | Path | None = None,
        avatar_seeds: AvatarSeedPort | None = None,
    ) -> ServiceContext:
        backend: KeyValueStorePort
        if rules.storage.backend == "memory":
            backend = InMemoryKeyValueStore()
        else:
            path = db_path or os.environ.get("CREDSTORE_DB_PATH") or rules.storage.db_path
            backend = create_sqlite_store(path, rules.storage.namespace)

        store = EncodedStore(backend)
        account_service = AccountService(store, rules, avatar_seeds=avatar_seeds)

        return cls(
            account_service=account_service,
            store=store,
            backend=backend,
            rules=rules,
        )
