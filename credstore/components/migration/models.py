from dataclasses import dataclass


@dataclass(frozen=True)
class MigrationOutput:
    """What a migration pass changed. All False means it was a no-op."""

    legacy_imported: bool
    admin_created: bool
    written: bool
    legacy_username: str | None = None
