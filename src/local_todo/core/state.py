# src/local_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..auth.user_store import UserStore
from ..tasks.task_filters import StatusFilter, TaskFilter
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

if TYPE_CHECKING:
    from .presenter import TaskListPresenter


@dataclass
class TaskListState:
    """
    What the presenter currently shows.

    tasks is replaced wholesale after each successful save, never edited in place.
    """

    tasks: list[Task] = field(default_factory=list)
    filter: TaskFilter = field(default_factory=StatusFilter)


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    storage: Any
    task_store: TaskStore
    user_store: UserStore

    # Attached by the connector once it has a view to render into.
    presenter: TaskListPresenter | None = None
