"""
Local storage subsystem.

Components:
- local_storage.py: named full-overwrite records (SQLite-backed and in-memory)
"""

from .local_storage import MemoryLocalStorage, SqliteLocalStorage

__all__ = ["MemoryLocalStorage", "SqliteLocalStorage"]
