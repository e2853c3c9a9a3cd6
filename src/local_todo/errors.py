# src/local_todo/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for errors raised by local_todo."""


class StorageError(TodoError):
    """Local key/value storage failed."""


class StorageWriteError(StorageError):
    """A record could not be written; the previous value is still stored."""


class StorageQuotaExceeded(StorageWriteError):
    """Writing the record would exceed the configured storage quota."""

    def __init__(self, key: str, needed: int, quota: int) -> None:
        super().__init__(f"storage quota exceeded writing {key!r}: {needed} > {quota} bytes")
        self.key = key
        self.needed = needed
        self.quota = quota
