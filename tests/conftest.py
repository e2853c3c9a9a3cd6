# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from local_todo.cli.bootstrap import create_initial_state
from local_todo.core.presenter import TaskListPresenter
from local_todo.core.state import AppState
from local_todo.tasks.task_store import TaskStore

from .fakes import FakeView, FlakyStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="local-todo-test",
        log_level="DEBUG",
        # Paths (tmp per test run)
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.sqlite3",
        # Records
        tasks_key="todos",
        users_key="users",
        storage_quota_bytes=0,
        # Presenter behaviour
        filter_mode="status",
        status_style="select",
    )


@pytest.fixture()
def storage() -> FlakyStorage:
    return FlakyStorage()


@pytest.fixture()
def store(storage: FlakyStorage) -> TaskStore:
    return TaskStore(storage, key="todos")


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def presenter(store: TaskStore, view: FakeView) -> TaskListPresenter:
    p = TaskListPresenter(store, view, filter_mode="status", status_style="select")
    p.start()
    return p


@pytest.fixture()
def text_presenter(store: TaskStore, view: FakeView) -> TaskListPresenter:
    p = TaskListPresenter(store, view, filter_mode="text", status_style="cycle")
    p.start()
    return p


@pytest.fixture()
def state(settings: SimpleNamespace, storage: FlakyStorage, view: FakeView) -> AppState:
    """
    AppState wired with in-memory storage and a recording view.

    The presenter is attached the same way the console connector does it.
    """
    st = create_initial_state(settings=settings, storage=storage)
    st.presenter = TaskListPresenter.from_settings(st.task_store, view, settings)
    st.presenter.start()
    return st
