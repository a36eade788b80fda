# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpal import ui
from taskpal.config import DEFAULT_DATETIME_FORMAT
from taskpal.core.state import AppState
from taskpal.tasks.task_list import TaskList
from taskpal.tasks.task_models import Deadline, Event, Todo
from taskpal.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskpal",
        log_level="INFO",
        prompt="> ",
        datetime_format=DEFAULT_DATETIME_FORMAT,
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
    )


@pytest.fixture()
def sample_tasks() -> list:
    return [
        Todo("read book"),
        Deadline("submit report", datetime(2024, 12, 1, 18, 0)),
        Event("Team trip", datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 5, 18, 0), is_done=True),
    ]


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def state(settings: SimpleNamespace, repo: FakeTaskRepo) -> AppState:
    """AppState over an empty list and the in-memory repo."""
    return AppState(settings=settings, task_list=TaskList(), task_store=repo, ui=ui)


@pytest.fixture()
def sqlite_state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired to a real SQLite TaskStore under tmp_path.

    The store's correctness is part of what we want to test end to end.
    """
    store = TaskStore(settings.tasks_db_path)
    return AppState(settings=settings, task_list=TaskList(store.load()), task_store=store, ui=ui)
