# src/local_todo/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from ..core.ports import KeyValueStorage
from ..errors import StorageError, StorageWriteError
from .task_models import Task, TaskStatus, new_task_id

logger = logging.getLogger(__name__)

DEFAULT_TASKS_KEY = "todos"


class TaskStore:
    """
    Owner of the task collection's durable representation.

    The whole collection lives in one record as a JSON array and is rewritten on
    every mutation (full overwrite, never incremental).

    Mutating helpers never touch the sequence they are given:
    - they build a new list, save it, and return it
    - if the save fails, StorageWriteError propagates and the caller still
      holds the previous list, which matches what is stored
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = DEFAULT_TASKS_KEY) -> None:
        self._storage = storage
        self._key = key

    # ---- persistence ----

    def load(self) -> list[Task]:
        """Read the stored collection. Absent or corrupt data loads as []."""
        try:
            raw = self._storage.get_item(self._key)
        except StorageError:
            logger.exception("Failed to read tasks record %r; starting empty.", self._key)
            return []

        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Tasks record %r is not valid JSON; starting empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning("Tasks record %r is not a list (%s); starting empty.", self._key, type(data).__name__)
            return []

        tasks: list[Task] = []
        seen: set[str] = set()
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning("Skipping tasks[%d]: not an object.", i)
                continue
            task = Task.from_record(item)
            if not task.text.strip():
                logger.warning("Skipping tasks[%d]: empty text.", i)
                continue
            # Ids must be unique; row -> id lookups depend on it.
            if task.id in seen:
                old_id = task.id
                task.id = new_task_id()
                logger.warning("tasks[%d] repeats id=%s; reassigned id=%s", i, old_id, task.id)
            seen.add(task.id)
            tasks.append(task)

        logger.debug("Loaded %d tasks from %r", len(tasks), self._key)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """Serialize the full sequence and overwrite the stored record."""
        records: list[dict[str, Any]] = [t.to_record() for t in tasks]
        try:
            payload = json.dumps(records, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(f"cannot serialize tasks: {e}") from e

        self._storage.set_item(self._key, payload)
        logger.debug("Saved %d tasks to %r", len(records), self._key)

    # ---- position-addressed mutations ----

    def append(
        self,
        tasks: Sequence[Task],
        text: str,
        date: str,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> list[Task]:
        if not text or not text.strip():
            raise ValueError("text is required")
        if not date or not date.strip():
            raise ValueError("date is required")

        task = Task(text=text, date=date, status=TaskStatus.parse(status), completed=False)
        updated = [*tasks, task]
        self.save(updated)
        logger.info("Task added id=%s date=%s status=%s", task.id, task.date, task.status.value)
        return updated

    def remove_at(self, tasks: Sequence[Task], position: int) -> list[Task]:
        if not 0 <= position < len(tasks):
            logger.warning("remove_at: position %s out of range (size=%d); ignored.", position, len(tasks))
            return list(tasks)

        updated = list(tasks)
        removed = updated.pop(position)
        self.save(updated)
        logger.info("Task removed id=%s position=%d", removed.id, position)
        return updated

    def set_status_at(self, tasks: Sequence[Task], position: int, status: TaskStatus | str) -> list[Task]:
        if not 0 <= position < len(tasks):
            logger.warning("set_status_at: position %s out of range (size=%d); ignored.", position, len(tasks))
            return list(tasks)

        try:
            new_status = TaskStatus.parse(status)
        except ValueError:
            logger.warning("set_status_at: invalid status %r; ignored.", status)
            return list(tasks)

        updated = list(tasks)
        old = updated[position]
        # Replace rather than mutate: the caller's Task objects stay as they were.
        updated[position] = Task(
            text=old.text,
            date=old.date,
            status=new_status,
            completed=old.completed,
            id=old.id,
        )
        self.save(updated)
        logger.info("Task status id=%s %s -> %s", old.id, old.status.value, new_status.value)
        return updated

    # ---- id-addressed mutations ----

    @staticmethod
    def index_of(tasks: Sequence[Task], task_id: str) -> int | None:
        for i, t in enumerate(tasks):
            if t.id == task_id:
                return i
        return None

    def remove_by_id(self, tasks: Sequence[Task], task_id: str) -> list[Task]:
        idx = self.index_of(tasks, task_id)
        if idx is None:
            logger.warning("remove_by_id: task id=%s not found; ignored.", task_id)
            return list(tasks)
        return self.remove_at(tasks, idx)

    def set_status_by_id(self, tasks: Sequence[Task], task_id: str, status: TaskStatus | str) -> list[Task]:
        idx = self.index_of(tasks, task_id)
        if idx is None:
            logger.warning("set_status_by_id: task id=%s not found; ignored.", task_id)
            return list(tasks)
        return self.set_status_at(tasks, idx, status)
