# src/taskpal/ui.py

"""
User-facing text.

Every function here is pure: it takes domain values and returns a string.
The module itself satisfies core.ports.Presenter, so it can be injected as-is.
"""

from __future__ import annotations

from .core.errors import CommandError
from .tasks.task_list import TaskList, render_task
from .tasks.task_models import Task

__all__ = [
    "goodbye",
    "greeting",
    "list_header",
    "find_header",
    "help_text",
    "task_added",
    "task_marked",
    "task_unmarked",
    "task_deleted",
    "render_task",
    "render_error",
    "incorrect_date_details",
    "store_error",
]


def _count_line(task_list: TaskList) -> str:
    n = len(task_list)
    noun = "task" if n == 1 else "tasks"
    return f"Now you have {n} {noun} in the list."


def greeting(app_name: str) -> str:
    return f"Hello! I'm {app_name}.\nWhat can I do for you? (type 'help' for commands)"


def goodbye() -> str:
    return "Bye. Hope to see you again soon!"


def list_header() -> str:
    return "Here are the tasks in your list:"


def find_header() -> str:
    return "Here are the matching tasks in your list:"


def help_text(usages: dict[str, str]) -> str:
    lines = ["Available commands:"]
    for usage in usages.values():
        lines.append(f"  {usage}")
    return "\n".join(lines)


def task_added(task: Task, task_list: TaskList) -> str:
    return f"Got it. I've added this task:\n  {render_task(task)}\n{_count_line(task_list)}"


def task_marked(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n  {render_task(task)}"


def task_unmarked(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n  {render_task(task)}"


def task_deleted(task: Task, task_list: TaskList) -> str:
    return f"Noted. I've removed this task:\n  {render_task(task)}\n{_count_line(task_list)}"


def render_error(error: Exception) -> str:
    if isinstance(error, CommandError):
        return error.message
    return str(error)


def incorrect_date_details() -> str:
    return "Hmm, those date details don't look right. Please check your date details (e.g. 2024-12-01 1800)."


def store_error(error: Exception) -> str:
    return f"I couldn't save or load your tasks: {error}"
