# src/taskpal/cli/commands.py

"""
Command interpreter.

A line goes through two steps:
- parse_line(): verb lookup + argument grammar -> a typed command
- execute(): applies the command to the session's TaskList, saves, renders

parse_command() runs both. Invalid input raises CommandError subclasses;
DateParseError / TaskStoreError come from collaborators and are not caught here.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from ..core.errors import (
    EmptyArgumentsError,
    MalformedCommandError,
    NoMatchError,
    NonNumericIndexError,
    UnknownCommandError,
)
from ..core.state import AppState
from ..tasks.datetime_parse import parse_datetime
from ..tasks.task_models import Deadline, Event, Task, Todo

logger = logging.getLogger(__name__)

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"

_TOKEN_RE = re.compile(r"\S+")


# ---- typed commands ----


@dataclass(frozen=True, slots=True)
class NoOpCommand:
    """Blank input, or delete on an empty list: nothing to do, nothing to say."""


@dataclass(frozen=True, slots=True)
class ByeCommand:
    pass


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class HelpCommand:
    pass


@dataclass(frozen=True, slots=True)
class MarkCommand:
    index: int


@dataclass(frozen=True, slots=True)
class UnmarkCommand:
    index: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True, slots=True)
class AddTodoCommand:
    description: str


@dataclass(frozen=True, slots=True)
class AddDeadlineCommand:
    description: str
    due_at: datetime


@dataclass(frozen=True, slots=True)
class AddEventCommand:
    description: str
    start_at: datetime
    end_at: datetime


Command = (
    NoOpCommand
    | ByeCommand
    | ListCommand
    | HelpCommand
    | MarkCommand
    | UnmarkCommand
    | DeleteCommand
    | FindCommand
    | AddTodoCommand
    | AddDeadlineCommand
    | AddEventCommand
)

CommandParser = Callable[[str, AppState], Command]


# ---- grammar helpers ----


def split_input(line: str) -> tuple[str, str]:
    """Split on the first whitespace run: ("verb", "rest"). The verb is lower-cased."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    verb = parts[0].lower()
    rest = parts[1] if len(parts) > 1 else ""
    return verb, rest


def split_on_markers(text: str, markers: tuple[str, ...]) -> list[str] | None:
    """
    Slice `text` around keyword markers that must appear, in order, as standalone tokens.

    "trip /from A /to B" with ("/from", "/to") -> ["trip", "A", "B"].
    Returns None if any marker is missing. Pieces are stripped but may be empty.
    """
    pieces: list[str] = []
    start = 0
    pending = list(markers)
    for m in _TOKEN_RE.finditer(text):
        if not pending:
            break
        if m.group() == pending[0]:
            pieces.append(text[start : m.start()].strip())
            start = m.end()
            pending.pop(0)
    if pending:
        return None
    pieces.append(text[start:].strip())
    return pieces


def _require_args(args: str) -> str:
    if not args.strip():
        raise EmptyArgumentsError()
    return args.strip()


def _parse_index(args: str) -> int:
    raw = _require_args(args)
    try:
        return int(raw)
    except ValueError:
        raise NonNumericIndexError(f"'{raw}' isn't a task number. Try something like 'mark 2'.") from None


# ---- per-verb parsers ----


def _parse_bye(args: str, state: AppState) -> Command:
    return ByeCommand()


def _parse_list(args: str, state: AppState) -> Command:
    return ListCommand()


def _parse_help(args: str, state: AppState) -> Command:
    return HelpCommand()


def _parse_mark(args: str, state: AppState) -> Command:
    return MarkCommand(_parse_index(args))


def _parse_unmark(args: str, state: AppState) -> Command:
    return UnmarkCommand(_parse_index(args))


def _parse_delete(args: str, state: AppState) -> Command:
    if state.task_list.is_empty():
        return NoOpCommand()
    return DeleteCommand(_parse_index(args))


def _parse_find(args: str, state: AppState) -> Command:
    return FindCommand(_require_args(args).lower())


def _parse_todo(args: str, state: AppState) -> Command:
    return AddTodoCommand(_require_args(args))


def _parse_deadline(args: str, state: AppState) -> Command:
    text = _require_args(args)
    parts = split_on_markers(text, (BY_MARKER,))
    if parts is None or not all(parts):
        raise MalformedCommandError(
            "It appears the details for this deadline task are off. "
            "Let's give it another go, shall we? (deadline <description> /by <date-time>)"
        )
    description, by = parts
    return AddDeadlineCommand(description, parse_datetime(by, state.datetime_format))


def _parse_event(args: str, state: AppState) -> Command:
    text = _require_args(args)
    parts = split_on_markers(text, (FROM_MARKER, TO_MARKER))
    if parts is None or not all(parts):
        raise MalformedCommandError(
            "It appears the details for this event task are off. "
            "Let's give it another go, shall we? (event <description> /from <date-time> /to <date-time>)"
        )
    description, start, end = parts
    return AddEventCommand(
        description,
        parse_datetime(start, state.datetime_format),
        parse_datetime(end, state.datetime_format),
    )


# ---- registry ----


class CommandRegistry:
    """Verb -> parser table, plus usage lines for 'help'."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}
        self._usage: dict[str, str] = {}

    def register(
        self,
        name: str,
        parser: CommandParser,
        usage: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._parsers[key] = parser
        self._usage[key] = usage
        for alias in aliases:
            self._parsers[alias.lower()] = parser

    def verbs(self) -> list[str]:
        return list(self._parsers)

    def usages(self) -> dict[str, str]:
        return dict(self._usage)

    def parse(self, line: str, state: AppState) -> Command:
        verb, args = split_input(line)
        if not verb:
            return NoOpCommand()

        parser = self._parsers.get(verb)
        if parser is None:
            raise UnknownCommandError()
        return parser(args, state)


registry = CommandRegistry()

registry.register("bye", _parse_bye, usage="bye - say goodbye and exit")
registry.register("list", _parse_list, usage="list - show all tasks")
registry.register("mark", _parse_mark, usage="mark <number> - mark a task as done")
registry.register("unmark", _parse_unmark, usage="unmark <number> - mark a task as not done")
registry.register("delete", _parse_delete, usage="delete <number> - remove a task")
registry.register("find", _parse_find, usage="find <keyword> - search task descriptions")
registry.register("todo", _parse_todo, usage="todo <description> - add a to-do")
registry.register(
    "deadline", _parse_deadline, usage="deadline <description> /by <yyyy-mm-dd HHMM> - add a deadline"
)
registry.register(
    "event",
    _parse_event,
    usage="event <description> /from <yyyy-mm-dd HHMM> /to <yyyy-mm-dd HHMM> - add an event",
)
registry.register("help", _parse_help, usage="help - show this list", aliases=["h", "?"])


# ---- execution ----


def _persist(state: AppState) -> None:
    state.task_store.save(state.task_list.tasks)


def _add(state: AppState, task: Task) -> str:
    state.task_list.add_task(task)
    _persist(state)
    return state.ui.task_added(task, state.task_list)


def execute(command: Command, state: AppState) -> str:
    """Apply a parsed command to the session and return the rendered reply."""
    task_list = state.task_list
    ui = state.ui
    logger.debug("Executing %r (tasks=%d)", command, len(task_list))

    match command:
        case NoOpCommand():
            return ""
        case ByeCommand():
            return ui.goodbye()
        case HelpCommand():
            return ui.help_text(registry.usages())
        case ListCommand():
            if task_list.is_empty():
                return ui.list_header()
            return f"{ui.list_header()}\n{task_list.print_list()}"
        case MarkCommand(index=index):
            task = task_list.get(index)
            task_list.mark(task)
            _persist(state)
            return ui.task_marked(task)
        case UnmarkCommand(index=index):
            task = task_list.get(index)
            task_list.unmark(task)
            _persist(state)
            return ui.task_unmarked(task)
        case DeleteCommand(index=index):
            task = task_list.delete(index)
            _persist(state)
            return ui.task_deleted(task, task_list)
        case FindCommand(keyword=keyword):
            found = task_list.find(keyword)
            if found.is_empty():
                raise NoMatchError()
            return f"{ui.find_header()}\n{found.print_list()}"
        case AddTodoCommand(description=description):
            return _add(state, Todo(description))
        case AddDeadlineCommand(description=description, due_at=due_at):
            return _add(state, Deadline(description, due_at))
        case AddEventCommand(description=description, start_at=start_at, end_at=end_at):
            return _add(state, Event(description, start_at, end_at))

    raise TypeError(f"unsupported command: {command!r}")


def parse_line(line: str, state: AppState) -> Command:
    return registry.parse(line, state)


def parse_command(line: str, state: AppState) -> str:
    """Parse and run one line against `state`. Returns the reply ("" for no-ops)."""
    return execute(parse_line(line, state), state)
