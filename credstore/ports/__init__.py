"""
Port interfaces for the credential store.

Ports define what the components need from the outside world, without
binding them to a particular backend.
"""

from .avatar import AvatarSeedPort
from .store import (
    KeyValueStorePort,
    MalformedStorageError,
    Scalar,
    StoreBackendError,
    StoreError,
)

__all__ = [
    "AvatarSeedPort",
    "KeyValueStorePort",
    "MalformedStorageError",
    "Scalar",
    "StoreBackendError",
    "StoreError",
]
