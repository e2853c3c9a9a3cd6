# src/local_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage backend into the task and user stores,
- builds the presenter once a connector supplies a view.
"""

from __future__ import annotations

import logging

from ..auth.user_store import UserStore
from ..config import get_settings
from ..core.ports import KeyValueStorage, TaskListView
from ..core.presenter import TaskListPresenter
from ..core.state import AppState
from ..storage.local_storage import MemoryLocalStorage, SqliteLocalStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage(settings) -> KeyValueStorage:
    quota = int(getattr(settings, "storage_quota_bytes", 0) or 0)
    try:
        return SqliteLocalStorage(settings.storage_path, quota_bytes=quota)
    except Exception:
        # Fallback for read-only checkouts / demos: nothing is persisted.
        logger.exception("Cannot open %s; falling back to in-memory storage.", settings.storage_path)
        return MemoryLocalStorage(quota_bytes=quota)


def create_initial_state(*, settings=None, storage: KeyValueStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and storage injectable makes the app easier to test and avoids
    hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        _ensure_local_dirs(settings)
        storage = create_storage(settings)

    return AppState(
        settings=settings,
        storage=storage,
        task_store=TaskStore(storage, key=settings.tasks_key),
        user_store=UserStore(storage, key=settings.users_key),
    )


def attach_presenter(state: AppState, view: TaskListView) -> TaskListPresenter:
    """Build the presenter for `view`, load tasks, draw the first render."""
    presenter = TaskListPresenter.from_settings(state.task_store, view, state.settings)
    state.presenter = presenter
    presenter.start()
    return presenter
