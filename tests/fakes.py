# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from local_todo.core.ports import NotifyLevel, TaskListView
from local_todo.core.rendering import TaskRow
from local_todo.errors import StorageWriteError
from local_todo.storage.local_storage import MemoryLocalStorage


@dataclass(slots=True)
class Notice:
    message: str
    level: str


@dataclass(slots=True)
class FakeView(TaskListView):
    """
    Recording TaskListView.

    - Keeps every render (rows + empty flag) and notification for assertions
    """

    renders: list[tuple[list[TaskRow], bool]] = field(default_factory=list)
    notices: list[Notice] = field(default_factory=list)

    def render(self, rows: Sequence[TaskRow], is_empty: bool) -> None:
        self.renders.append((list(rows), is_empty))

    def notify(self, message: str, level: NotifyLevel = "info") -> None:
        self.notices.append(Notice(message=message, level=level))

    @property
    def last_rows(self) -> list[TaskRow]:
        return self.renders[-1][0] if self.renders else []

    @property
    def last_texts(self) -> list[str]:
        return [r.task.text for r in self.last_rows]

    @property
    def last_notice(self) -> Notice | None:
        return self.notices[-1] if self.notices else None


class FlakyStorage(MemoryLocalStorage):
    """MemoryLocalStorage whose writes can be switched to fail."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False
        self.writes = 0

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageWriteError(f"simulated write failure for {key!r}")
        self.writes += 1
        super().set_item(key, value)
