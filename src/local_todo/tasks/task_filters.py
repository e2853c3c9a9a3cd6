# src/local_todo/tasks/task_filters.py

from __future__ import annotations

"""
Filters for the displayed task list.

Two modes share one interface (matches(task) + value):
- StatusFilter: exact status, or "all"
- TextFilter: case-insensitive substring of the task text, "" matches everything

visible() is recomputed from the full collection on every render;
there is no separately maintained filtered list.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .task_models import Task, TaskStatus

FILTER_ALL = "all"


class TaskFilter(Protocol):
    @property
    def value(self) -> str: ...
    def matches(self, task: Task) -> bool: ...


@dataclass(frozen=True, slots=True)
class StatusFilter:
    value: str = FILTER_ALL

    def __post_init__(self) -> None:
        if self.value != FILTER_ALL:
            # Raises ValueError for anything outside the enum.
            object.__setattr__(self, "value", TaskStatus.parse(self.value).value)

    def matches(self, task: Task) -> bool:
        return self.value == FILTER_ALL or task.status.value == self.value


@dataclass(frozen=True, slots=True)
class TextFilter:
    value: str = ""

    def matches(self, task: Task) -> bool:
        needle = self.value.casefold()
        return not needle or needle in task.text.casefold()


def make_filter(mode: str, value: str | None = None) -> TaskFilter:
    """Build the filter for the configured mode ("status" or "text")."""
    raw = (value or "").strip()
    if mode == "text":
        return TextFilter(raw)
    if mode == "status":
        return StatusFilter(raw.lower() or FILTER_ALL)
    raise ValueError(f"unknown filter mode: {mode!r}")


def visible(tasks: Sequence[Task], flt: TaskFilter) -> list[Task]:
    return [t for t in tasks if flt.matches(t)]
