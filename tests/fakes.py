# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from taskpal.core.errors import TaskStoreError
from taskpal.tasks.task_models import Task


class FakeTaskRepo:
    """
    In-memory TaskRepo used for interpreter unit tests.

    - Keeps a snapshot copy of every save (so later in-memory mutations don't leak in)
    - Can be told to fail the next saves
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.stored: list[Task] = [replace(t) for t in (tasks or [])]
        self.saves: list[list[Task]] = []
        self.fail_saves = False

    def load(self) -> list[Task]:
        return [replace(t) for t in self.stored]

    def save(self, tasks: Iterable[Task]) -> None:
        if self.fail_saves:
            raise TaskStoreError("disk full")
        snapshot = [replace(t) for t in tasks]
        self.saves.append(snapshot)
        self.stored = snapshot
