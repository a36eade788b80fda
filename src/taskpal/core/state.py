# src/taskpal/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Any

from .. import ui
from ..tasks.task_list import TaskList
from .ports import Presenter, TaskRepo


@dataclass
class AppState:
    """
    Everything one console session works against.

    The task list is owned here and passed to every command; nothing else
    holds a reference that mutates it.
    """

    # Settings object (config.Settings or a test stand-in with the same attributes).
    settings: Any

    task_list: TaskList
    task_store: TaskRepo
    ui: Presenter | ModuleType = ui

    @property
    def datetime_format(self) -> str:
        return str(self.settings.datetime_format)
