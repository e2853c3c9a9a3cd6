# tests/test_task_filters.py

from __future__ import annotations

import pytest

from local_todo.tasks.task_filters import StatusFilter, TextFilter, make_filter, visible
from local_todo.tasks.task_models import Task, TaskStatus


def _tasks(*items: tuple[str, TaskStatus]) -> list[Task]:
    return [Task(text=text, date="2025-01-01", status=status) for text, status in items]


def test_status_filter_exact_match_keeps_order() -> None:
    tasks = _tasks(
        ("one", TaskStatus.PENDING),
        ("two", TaskStatus.COMPLETED),
        ("three", TaskStatus.PENDING),
    )
    assert [t.text for t in visible(tasks, StatusFilter("completed"))] == ["two"]
    assert [t.text for t in visible(tasks, StatusFilter("pending"))] == ["one", "three"]
    assert visible(tasks, StatusFilter("all")) == tasks


def test_status_filter_rejects_unknown_value() -> None:
    with pytest.raises(ValueError):
        StatusFilter("done")


def test_text_filter_case_insensitive_substring() -> None:
    tasks = _tasks(
        ("Buy milk", TaskStatus.PENDING),
        ("Walk dog", TaskStatus.PENDING),
        ("Buy bread", TaskStatus.COMPLETED),
    )
    assert [t.text for t in visible(tasks, TextFilter("buy"))] == ["Buy milk", "Buy bread"]
    assert visible(tasks, TextFilter("")) == tasks
    assert visible(tasks, TextFilter("cat")) == []


def test_make_filter_modes() -> None:
    assert make_filter("status") == StatusFilter("all")
    assert make_filter("status", " In-Progress ") == StatusFilter("in-progress")
    assert make_filter("text", "  Milk ") == TextFilter("Milk")
    with pytest.raises(ValueError):
        make_filter("regex", "x")


def test_status_cycle_returns_to_pending() -> None:
    s = TaskStatus.PENDING
    seen = []
    for _ in range(3):
        s = s.next()
        seen.append(s)
    assert seen == [TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, TaskStatus.PENDING]
