# tests/test_task_list.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskpal.core.errors import InvalidIndexError
from taskpal.tasks.task_list import TaskList, render_task
from taskpal.tasks.task_models import Deadline, Event, TaskKind, Todo


def test_add_appends_in_order(sample_tasks) -> None:
    tl = TaskList()
    for t in sample_tasks:
        tl.add_task(t)
    assert len(tl) == 3
    assert [t.description for t in tl] == ["read book", "submit report", "Team trip"]


def test_mark_and_unmark_are_idempotent() -> None:
    task = Todo("read book")
    tl = TaskList([task])

    tl.mark(task)
    tl.mark(task)
    assert task.is_done is True

    tl.unmark(task)
    tl.unmark(task)
    assert task.is_done is False


def test_delete_shifts_following_tasks(sample_tasks) -> None:
    tl = TaskList(sample_tasks)
    removed = tl.delete(2)
    assert removed.description == "submit report"
    assert len(tl) == 2
    assert tl.get(2).description == "Team trip"


@pytest.mark.parametrize("index", [0, 4, -1])
def test_delete_out_of_range(sample_tasks, index: int) -> None:
    tl = TaskList(sample_tasks)
    with pytest.raises(InvalidIndexError):
        tl.delete(index)
    assert len(tl) == 3


def test_find_is_case_insensitive_and_keeps_order(sample_tasks) -> None:
    tl = TaskList(sample_tasks + [Todo("Trim the hedge")])
    found = tl.find("t")
    assert [t.description for t in found] == ["submit report", "Team trip", "Trim the hedge"]

    found = tl.find("TRIP")
    assert [t.description for t in found] == ["Team trip"]
    assert len(tl) == 4


def test_find_returns_new_list(sample_tasks) -> None:
    tl = TaskList(sample_tasks)
    found = tl.find("zzz")
    assert found.is_empty()
    assert found is not tl
    assert len(tl) == 3


def test_print_list_numbers_from_one(sample_tasks) -> None:
    tl = TaskList(sample_tasks)
    assert tl.print_list().splitlines() == [
        "1. [T][ ] read book",
        "2. [D][ ] submit report (by: Dec 01 2024 18:00)",
        "3. [E][X] Team trip (from: Jan 01 2024 09:00 to: Jan 05 2024 18:00)",
    ]


def test_task_variants_expose_kind_and_icons() -> None:
    d = Deadline("pay rent", datetime(2025, 3, 1, 9, 0))
    assert d.kind == TaskKind.DEADLINE
    assert d.type_icon == "D"
    assert d.status_icon == " "
    assert render_task(Todo("x", is_done=True)) == "[T][X] x"


def test_dates_are_write_once() -> None:
    e = Event("trip", datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 5, 18, 0))
    with pytest.raises(AttributeError):
        e.start_at = datetime(2030, 1, 1)
    with pytest.raises(AttributeError):
        e.description = "other"
    e.is_done = True
    assert e.is_done is True
