# src/local_todo/storage/local_storage.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from ..errors import StorageError, StorageQuotaExceeded, StorageWriteError

logger = logging.getLogger(__name__)


def _record_size(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))


class SqliteLocalStorage:
    """
    Durable key/value records backed by SQLite.

    Each record is a full-overwrite text blob, the same contract as browser
    localStorage: set_item replaces the whole value, there are no partial writes.

    Quota:
    - quota_bytes > 0 caps the total size (keys + values, UTF-8) of all records
    - a write that would exceed it raises StorageQuotaExceeded and stores nothing

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "storage.sqlite3", *, quota_bytes: int = 0) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._quota = max(0, int(quota_bytes))
        self._ensure_schema()
        logger.info("LocalStorage ready db=%s quota=%s", self._db_path, self._quota or "off")

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except sqlite3.Error as e:
            raise StorageError(f"cannot open {self._db_path}: {e}") from e
        with contextlib.suppress(Exception):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS records (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM records WHERE key = ?", (key,)).fetchone()
            return None if row is None else str(row[0])
        except sqlite3.Error as e:
            raise StorageError(f"cannot read {key!r}: {e}") from e
        finally:
            conn.close()

    def _get_write_conn(self, key: str) -> sqlite3.Connection:
        try:
            return self._get_conn()
        except StorageError as e:
            raise StorageWriteError(f"cannot write {key!r}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        conn = self._get_write_conn(key)
        try:
            if self._quota:
                row = conn.execute(
                    "SELECT COALESCE(SUM(LENGTH(CAST(key AS BLOB)) + LENGTH(CAST(value AS BLOB))), 0) "
                    "FROM records WHERE key != ?",
                    (key,),
                ).fetchone()
                needed = int(row[0]) + _record_size(key, value)
                if needed > self._quota:
                    raise StorageQuotaExceeded(key, needed, self._quota)

            conn.execute(
                "INSERT INTO records(key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            conn.commit()
            logger.debug("Record written key=%s bytes=%d", key, len(value))
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageWriteError(f"cannot write {key!r}: {e}") from e
        finally:
            conn.close()

    def remove_item(self, key: str) -> None:
        conn = self._get_write_conn(key)
        try:
            conn.execute("DELETE FROM records WHERE key = ?", (key,))
            conn.commit()
        except sqlite3.Error as e:
            raise StorageWriteError(f"cannot remove {key!r}: {e}") from e
        finally:
            conn.close()

    def keys(self) -> list[str]:
        conn = self._get_conn()
        try:
            return [str(r[0]) for r in conn.execute("SELECT key FROM records ORDER BY key")]
        finally:
            conn.close()


class MemoryLocalStorage:
    """
    In-process key/value records with the same contract as SqliteLocalStorage.

    Used for demos and tests; nothing survives the process.
    """

    def __init__(self, *, quota_bytes: int = 0) -> None:
        self._items: dict[str, str] = {}
        self._quota = max(0, int(quota_bytes))

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self._quota:
            others = sum(_record_size(k, v) for k, v in self._items.items() if k != key)
            needed = others + _record_size(key, value)
            if needed > self._quota:
                raise StorageQuotaExceeded(key, needed, self._quota)
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._items)
