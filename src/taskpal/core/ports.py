# src/taskpal/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command interpreter.

The interpreter depends on Protocols instead of concrete implementations.
This keeps storage and presentation swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Persistence gateway: whole-list load and overwrite."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...


class Presenter(Protocol):
    """Presentation gateway: pure functions from domain values to display strings."""

    def goodbye(self) -> str: ...
    def list_header(self) -> str: ...
    def find_header(self) -> str: ...
    def help_text(self, usages: dict[str, str]) -> str: ...
    def task_added(self, task: Task, task_list: TaskList) -> str: ...
    def task_marked(self, task: Task) -> str: ...
    def task_unmarked(self, task: Task) -> str: ...
    def task_deleted(self, task: Task, task_list: TaskList) -> str: ...
    def render_error(self, error: Exception) -> str: ...
    def incorrect_date_details(self) -> str: ...
    def store_error(self, error: Exception) -> str: ...
