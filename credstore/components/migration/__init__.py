"""
Migration component - legacy single-user schema upgrade.
"""

from .component import run_migration
from .models import MigrationOutput
from .ports import LegacyStorePort

__all__ = [
    "run_migration",
    "MigrationOutput",
    "LegacyStorePort",
]
