# src/local_todo/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Stored values are the hyphenated strings ("in-progress"), not the member names.
    There is no terminal state: COMPLETED may go back to PENDING.
    """

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def from_raw(cls, raw: Any) -> TaskStatus:
        """Lenient parse for stored data: anything unknown becomes PENDING."""
        if not raw:
            return cls.PENDING
        try:
            return cls(str(raw))
        except ValueError:
            return cls.PENDING

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        """Strict parse for user input. Raises ValueError on unknown values."""
        if isinstance(raw, cls):
            return raw
        value = str(raw or "").strip().lower().replace("_", "-").replace(" ", "-")
        return cls(value)

    def next(self) -> TaskStatus:
        """Cyclic advance: pending -> in-progress -> completed -> pending."""
        order = list(TaskStatus)
        return order[(order.index(self) + 1) % len(order)]


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class Task:
    """
    A single task.

    Fields:
        text: task description (non-empty).
        date: scheduled day, "YYYY-MM-DD".
        status: see TaskStatus.
        completed: set False on creation and never changed afterwards;
            kept so stored records round-trip unchanged.
        id: stable opaque identifier used for delete/update.
    """

    text: str
    date: str
    status: TaskStatus = TaskStatus.PENDING
    completed: bool = False
    id: str = field(default_factory=new_task_id)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "date": self.date,
            "status": self.status.value,
            "completed": self.completed,
        }

    @classmethod
    def from_record(cls, raw: dict[str, Any]) -> Task:
        """Build a Task from a stored record. Records without an id get a fresh one."""
        tid = raw.get("id")
        return cls(
            text=str(raw.get("text") or ""),
            date=str(raw.get("date") or ""),
            status=TaskStatus.from_raw(raw.get("status")),
            completed=bool(raw.get("completed", False)),
            id=str(tid) if isinstance(tid, str) and tid else new_task_id(),
        )
