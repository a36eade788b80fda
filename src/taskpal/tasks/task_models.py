# src/taskpal/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any, ClassVar

from .datetime_parse import format_datetime


class TaskKind(StrEnum):
    """Task variant, also the value stored in the `kind` column."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


@dataclass(slots=True)
class Task:
    """
    Base task: a description plus a completion flag.

    Notes:
    - `is_done` is the only mutable field; it changes through TaskList.mark/unmark.
    - description and date-time fields are write-once.
    """

    description: str
    is_done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]
    type_icon: ClassVar[str]
    _write_once: ClassVar[frozenset[str]] = frozenset({"description"})

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._write_once and hasattr(self, name):
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        object.__setattr__(self, name, value)

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def details(self) -> str:
        """Type-specific fields rendered for display ("" when there are none)."""
        return ""


@dataclass(slots=True)
class Todo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO
    type_icon: ClassVar[str] = "T"


@dataclass(slots=True)
class Deadline(Task):
    due_at: datetime

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE
    type_icon: ClassVar[str] = "D"
    _write_once: ClassVar[frozenset[str]] = frozenset({"description", "due_at"})

    def details(self) -> str:
        return f"(by: {format_datetime(self.due_at)})"


@dataclass(slots=True)
class Event(Task):
    # No ordering is enforced between start_at and end_at.
    start_at: datetime
    end_at: datetime

    kind: ClassVar[TaskKind] = TaskKind.EVENT
    type_icon: ClassVar[str] = "E"
    _write_once: ClassVar[frozenset[str]] = frozenset({"description", "start_at", "end_at"})

    def details(self) -> str:
        return f"(from: {format_datetime(self.start_at)} to: {format_datetime(self.end_at)})"
