# src/local_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage backends and UI adapters swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Any, Literal, Protocol

NotifyLevel = Literal["info", "success", "warning", "error"]


class KeyValueStorage(Protocol):
    """Named durable records, each a full-overwrite string blob (localStorage-like)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskListView(Protocol):
    """
    Adapter-side port: how the presenter shows things.

    The adapter decides how rows and notifications look (terminal, GUI, etc.).
    """

    def render(self, rows: Sequence[Any], is_empty: bool) -> None: ...
    def notify(self, message: str, level: NotifyLevel = "info") -> None: ...
