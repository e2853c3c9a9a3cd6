# tests/test_local_storage.py

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from local_todo.errors import StorageQuotaExceeded, StorageWriteError
from local_todo.storage.local_storage import MemoryLocalStorage, SqliteLocalStorage


def test_sqlite_records_survive_reopen(tmp_path: Path) -> None:
    db = tmp_path / "storage.sqlite3"
    s1 = SqliteLocalStorage(db)
    s1.set_item("todos", "[1]")
    s1.set_item("todos", "[1, 2]")
    s1.set_item("users", "[]")

    s2 = SqliteLocalStorage(db)
    assert s2.get_item("todos") == "[1, 2]"
    assert s2.keys() == ["todos", "users"]

    s2.remove_item("users")
    assert s2.get_item("users") is None


def test_sqlite_quota_rejects_write_and_keeps_old_value(tmp_path: Path) -> None:
    s = SqliteLocalStorage(tmp_path / "storage.sqlite3", quota_bytes=20)
    s.set_item("todos", "[]")

    with pytest.raises(StorageQuotaExceeded) as exc:
        s.set_item("todos", "x" * 100)
    assert isinstance(exc.value, StorageWriteError)
    assert s.get_item("todos") == "[]"


def test_memory_quota_counts_other_records() -> None:
    s = MemoryLocalStorage(quota_bytes=30)
    s.set_item("users", "u" * 15)
    # Overwriting a key only counts its new size.
    s.set_item("todos", "a")
    s.set_item("todos", "b")
    with pytest.raises(StorageQuotaExceeded):
        s.set_item("todos", "t" * 20)
    assert s.get_item("todos") == "b"


def test_sqlite_write_to_removed_directory_raises_write_error(tmp_path: Path) -> None:
    data_dir = tmp_path / "data"
    s = SqliteLocalStorage(data_dir / "storage.sqlite3")
    s.set_item("todos", "[]")

    shutil.rmtree(data_dir)

    with pytest.raises(StorageWriteError):
        s.set_item("todos", "[1]")
    with pytest.raises(StorageWriteError):
        s.remove_item("todos")
