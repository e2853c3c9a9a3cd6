# src/local_todo/core/presenter.py

"""
Task list presenter.

This module is UI-agnostic:
- adapters call the command handlers (on_add_task, on_delete_task, ...),
- the presenter validates input, mutates through TaskStore, and re-renders,
- adapters decide how rows and notifications look (TaskListView port).

Key invariants:
- state.tasks only changes after TaskStore has saved the new collection,
  so memory and storage never diverge, even when a write fails,
- every handler ends with a render of visible(tasks, filter) computed from the
  full collection,
- rows handed to the view are positions in the displayed list; delete/status
  handlers map them back to stable task ids before touching the collection.
"""

from __future__ import annotations

import logging

from ..errors import StorageWriteError
from ..tasks.task_filters import TaskFilter, make_filter, visible
from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_store import TaskStore
from .ports import TaskListView
from .rendering import TaskRow, build_rows
from .state import TaskListState

logger = logging.getLogger(__name__)

STATUS_STYLE_SELECT = "select"
STATUS_STYLE_CYCLE = "cycle"


class TaskListPresenter:
    def __init__(
        self,
        store: TaskStore,
        view: TaskListView,
        *,
        filter_mode: str = "status",
        status_style: str = STATUS_STYLE_SELECT,
        state: TaskListState | None = None,
    ) -> None:
        if status_style not in (STATUS_STYLE_SELECT, STATUS_STYLE_CYCLE):
            raise ValueError(f"unknown status style: {status_style!r}")

        self._store = store
        self._view = view
        self._filter_mode = filter_mode
        self._status_style = status_style
        self.state = state or TaskListState(filter=make_filter(filter_mode))

    @classmethod
    def from_settings(cls, store: TaskStore, view: TaskListView, settings) -> TaskListPresenter:
        return cls(
            store,
            view,
            filter_mode=str(getattr(settings, "filter_mode", "status")),
            status_style=str(getattr(settings, "status_style", STATUS_STYLE_SELECT)),
        )

    # ---- queries ----

    @property
    def status_style(self) -> str:
        return self._status_style

    @property
    def tasks(self) -> list[Task]:
        return list(self.state.tasks)

    @property
    def current_filter(self) -> TaskFilter:
        return self.state.filter

    def visible_tasks(self) -> list[Task]:
        return visible(self.state.tasks, self.state.filter)

    def rows(self) -> list[TaskRow]:
        return build_rows(self.visible_tasks())

    # ---- lifecycle ----

    def start(self) -> None:
        """Load the stored collection once and draw it."""
        self.state.tasks = self._store.load()
        logger.info("Presenter started tasks=%d filter=%s:%r", len(self.state.tasks), self._filter_mode, self.state.filter.value)
        self.render()

    def render(self) -> None:
        self._view.render(self.rows(), not self.state.tasks)

    # ---- command handlers ----

    def on_add_task(self, text: str, date: str, status: TaskStatus | str | None = None) -> Task | None:
        text = (text or "").strip()
        date = (date or "").strip()

        if not text:
            self._view.notify("Please enter a task", "error")
            return None
        if not date:
            self._view.notify("Please select a date", "error")
            return None

        try:
            new_status = TaskStatus.PENDING if status is None else TaskStatus.parse(status)
        except ValueError:
            self._view.notify(f"Unknown status: {status}", "error")
            return None

        try:
            updated = self._store.append(self.state.tasks, text, date, new_status)
        except StorageWriteError as e:
            logger.error("Add task failed: %s", e)
            self._view.notify("Could not save the task. Storage is full or unavailable.", "error")
            self.render()
            return None

        self.state.tasks = updated
        self._view.notify("Task added successfully!", "success")
        self.render()
        return updated[-1]

    def on_delete_task(self, row: int) -> bool:
        task = self._task_at_row(row)
        if task is None:
            self.render()
            return False

        try:
            updated = self._store.remove_by_id(self.state.tasks, task.id)
        except StorageWriteError as e:
            logger.error("Delete task failed id=%s: %s", task.id, e)
            self._view.notify("Could not delete the task. Storage is unavailable.", "error")
            self.render()
            return False

        self.state.tasks = updated
        self._view.notify("Task deleted", "warning")
        self.render()
        return True

    def on_change_status(self, row: int, explicit_status: TaskStatus | str | None = None) -> TaskStatus | None:
        """
        Change the status of the task shown at `row`.

        explicit_status given -> set it (select style).
        explicit_status None  -> cyclic advance (cycle style).
        """
        task = self._task_at_row(row)
        if task is None:
            self.render()
            return None

        if explicit_status is not None:
            try:
                new_status = TaskStatus.parse(explicit_status)
            except ValueError:
                self._view.notify(f"Unknown status: {explicit_status}", "error")
                self.render()
                return None
        else:
            new_status = task.status.next()

        try:
            updated = self._store.set_status_by_id(self.state.tasks, task.id, new_status)
        except StorageWriteError as e:
            logger.error("Status change failed id=%s: %s", task.id, e)
            self._view.notify("Could not update the task. Storage is unavailable.", "error")
            self.render()
            return None

        self.state.tasks = updated
        self._view.notify(f"Task marked as {new_status.value}", "success")
        self.render()
        return new_status

    def on_set_filter(self, value: str | None) -> bool:
        try:
            self.state.filter = make_filter(self._filter_mode, value)
        except ValueError:
            self._view.notify(f"Unknown filter: {value}", "error")
            return False
        logger.debug("Filter set %s:%r", self._filter_mode, self.state.filter.value)
        self.render()
        return True

    # ---- helpers ----

    def _task_at_row(self, row: int) -> Task | None:
        shown = self.visible_tasks()
        if not 0 <= row < len(shown):
            logger.warning("Row %s is not displayed (rows=%d); ignored.", row, len(shown))
            self._view.notify("That task is no longer in the list", "warning")
            return None
        return shown[row]
