"""
SQLite Key-Value Store Adapter.

Implements KeyValueStorePort on a single ``preferences`` table. Each store
instance is bound to one namespace, so several logical preference files can
share a database.

Invariants:
- Every write is committed before the call returns.
- A connection is opened per operation; the adapter is safe to share
  between threads.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any

from credstore.ports.store import Scalar, StoreBackendError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS preferences (
    namespace TEXT NOT NULL,
    key TEXT NOT NULL,
    value TEXT NOT NULL,
    value_type TEXT NOT NULL CHECK (value_type IN ('str', 'bool')),
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (namespace, key)
);
"""


def dict_factory(cursor: sqlite3.Cursor, row: tuple[Any, ...]) -> dict[str, Any]:
    """Convert SQLite row to dictionary."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


def _encode(value: Scalar) -> tuple[str, str]:
    if isinstance(value, bool):
        return ("true" if value else "false"), "bool"
    if isinstance(value, str):
        return value, "str"
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def _decode(row: dict[str, Any]) -> Scalar:
    if row["value_type"] == "bool":
        return row["value"] == "true"
    return str(row["value"])


class SQLiteKeyValueStore:
    """SQLite implementation of KeyValueStorePort."""

    def __init__(self, db_path: str | Path, namespace: str = "default") -> None:
        self.db_path = str(db_path)
        self.namespace = namespace
        self._ensure_schema()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def _ensure_schema(self) -> None:
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise StoreBackendError(f"Cannot open store at {self.db_path}: {e}") from e
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            raise StoreBackendError(f"Cannot initialise store schema: {e}") from e
        finally:
            conn.close()

    def read(self, key: str) -> Scalar | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT value, value_type FROM preferences WHERE namespace = ? AND key = ?",
                (self.namespace, key),
            ).fetchone()
            return _decode(row) if row else None
        except sqlite3.Error as e:
            raise StoreBackendError(f"Read of '{key}' failed: {e}") from e
        finally:
            conn.close()

    def write(self, key: str, value: Scalar) -> None:
        encoded, value_type = _encode(value)
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO preferences (namespace, key, value, value_type)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(namespace, key) DO UPDATE SET
                    value=excluded.value,
                    value_type=excluded.value_type,
                    updated_at=CURRENT_TIMESTAMP
                """,
                (self.namespace, key, encoded, value_type),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreBackendError(f"Write of '{key}' failed: {e}") from e
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "DELETE FROM preferences WHERE namespace = ? AND key = ?",
                (self.namespace, key),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreBackendError(f"Delete of '{key}' failed: {e}") from e
        finally:
            conn.close()

    def contains(self, key: str) -> bool:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT 1 AS present FROM preferences WHERE namespace = ? AND key = ?",
                (self.namespace, key),
            ).fetchone()
            return row is not None
        except sqlite3.Error as e:
            raise StoreBackendError(f"Lookup of '{key}' failed: {e}") from e
        finally:
            conn.close()

    def keys(self) -> list[str]:
        """List keys in this namespace."""
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT key FROM preferences WHERE namespace = ? ORDER BY key",
                (self.namespace,),
            ).fetchall()
            return [r["key"] for r in rows]
        except sqlite3.Error as e:
            raise StoreBackendError(f"Key listing failed: {e}") from e
        finally:
            conn.close()


def create_sqlite_store(
    db_path: str | Path,
    namespace: str,
    *,
    create_dirs: bool = True,
) -> SQLiteKeyValueStore:
    """
    Factory function to create a SQLiteKeyValueStore from config.

    Args:
        db_path: Database file path
        namespace: Preference namespace inside the database
        create_dirs: Whether to create the parent directory if missing

    Returns:
        Configured SQLiteKeyValueStore instance
    """
    path = Path(db_path)
    if create_dirs and path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Opening preference store %s (namespace=%s)", path, namespace)
    return SQLiteKeyValueStore(path, namespace)
