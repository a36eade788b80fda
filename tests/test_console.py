# tests/test_console.py

from __future__ import annotations

from collections.abc import Iterator

from taskpal.cli.bootstrap import create_initial_state
from taskpal.connectors.console_connector import handle_line, run_console_loop
from taskpal.tasks.task_models import Todo


def _scripted(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_handle_line_renders_command_errors(state) -> None:
    assert handle_line(state, "blah") == "Hmm... I'm not sure what you're getting at. Care to enlighten me?"
    assert "blank" in handle_line(state, "todo")
    assert "no task aligns" in handle_line(state, "find x")


def test_handle_line_renders_date_fault(state, repo) -> None:
    out = handle_line(state, "deadline pay /by someday")
    assert "check your date details" in out
    assert state.task_list.is_empty()
    assert repo.saves == []


def test_handle_line_store_failure_keeps_memory_state(state, repo) -> None:
    repo.fail_saves = True
    out = handle_line(state, "todo read book")
    assert "couldn't save" in out
    assert "disk full" in out
    # no rollback: the list still has the task and the next good save catches up
    assert state.task_list.tasks == [Todo("read book")]

    repo.fail_saves = False
    handle_line(state, "todo buy milk")
    assert [t.description for t in repo.stored] == ["read book", "buy milk"]


def test_console_loop_stops_on_bye(state) -> None:
    written: list[str] = []
    run_console_loop(
        state,
        read=_scripted(["todo read book", "", "mark 1", "bye", "todo never"]),
        write=written.append,
    )
    assert len(state.task_list) == 1
    assert state.task_list.get(1).is_done is True
    assert written[-1] == "Bye. Hope to see you again soon!"
    assert not any("never" in w for w in written)


def test_console_loop_stops_on_eof(state) -> None:
    written: list[str] = []
    run_console_loop(state, read=_scripted(["list"]), write=written.append)
    assert written == ["Here are the tasks in your list:"]


def test_bootstrap_loads_saved_tasks(settings) -> None:
    first = create_initial_state(settings=settings)
    handle_line(first, "todo read book")
    handle_line(first, "event trip /from 2024-01-01 0900 /to 2024-01-05 1800")

    second = create_initial_state(settings=settings)
    assert second.task_list.tasks == first.task_list.tasks
    assert settings.data_dir.is_dir()
