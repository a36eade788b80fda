# src/taskpal/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import InvalidIndexError
from .task_models import Task


def render_task(task: Task) -> str:
    """One-line task rendering, e.g. "[D][X] submit report (by: Dec 01 2024 18:00)"."""
    line = f"[{task.type_icon}][{task.status_icon}] {task.description}"
    details = task.details()
    return f"{line} {details}" if details else line


class TaskList:
    """
    Ordered, mutable collection of tasks.

    Positions are 1-based at this API (what the user types);
    the underlying list is 0-based.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self.tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def is_empty(self) -> bool:
        return not self.tasks

    def _check_index(self, one_based_index: int) -> None:
        if not 1 <= one_based_index <= len(self.tasks):
            raise InvalidIndexError(
                f"There's no task number {one_based_index}. "
                f"I only know about {len(self.tasks)} task(s)."
            )

    def get(self, one_based_index: int) -> Task:
        self._check_index(one_based_index)
        return self.tasks[one_based_index - 1]

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)

    def mark(self, task: Task) -> None:
        task.is_done = True

    def unmark(self, task: Task) -> None:
        task.is_done = False

    def delete(self, one_based_index: int) -> Task:
        self._check_index(one_based_index)
        return self.tasks.pop(one_based_index - 1)

    def find(self, keyword: str) -> TaskList:
        """Tasks whose description contains `keyword` (case-insensitive), in list order."""
        needle = keyword.lower()
        return TaskList(t for t in self.tasks if needle in t.description.lower())

    def print_list(self) -> str:
        return "\n".join(f"{i}. {render_task(t)}" for i, t in enumerate(self.tasks, start=1))
