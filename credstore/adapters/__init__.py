from .avatar_seeds import FixedAvatarSeeds, RandomAvatarSeeds
from .encoded_store import EncodedStore
from .memory_store import InMemoryKeyValueStore
from .sqlite_store import SQLiteKeyValueStore, create_sqlite_store

__all__ = [
    "EncodedStore",
    "FixedAvatarSeeds",
    "InMemoryKeyValueStore",
    "RandomAvatarSeeds",
    "SQLiteKeyValueStore",
    "create_sqlite_store",
]
