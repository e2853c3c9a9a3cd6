# src/local_todo/core/rendering.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date as date_cls

from ..tasks.task_models import Task

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date(raw: str) -> str:
    """
    "2025-01-01" -> "Wed, Jan 1".

    Month/weekday names are fixed English so output does not depend on the locale.
    Anything that is not an ISO date is returned as-is.
    """
    try:
        d = date_cls.fromisoformat(raw.strip())
    except (AttributeError, ValueError):
        return raw
    return f"{_WEEKDAYS[d.weekday()]}, {_MONTHS[d.month - 1]} {d.day}"


@dataclass(frozen=True, slots=True)
class TaskRow:
    """One displayed line. `row` is the 0-based position in the displayed list."""

    row: int
    task: Task
    date_label: str


def build_rows(tasks: Sequence[Task]) -> list[TaskRow]:
    return [TaskRow(row=i, task=t, date_label=format_date(t.date)) for i, t in enumerate(tasks)]
