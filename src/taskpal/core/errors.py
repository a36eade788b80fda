# src/taskpal/core/errors.py

"""
Error types.

Two families that are intentionally not related:
- CommandError: invalid user input, raised by the command interpreter.
  The message is user-facing.
- TaskpalFault: failures of collaborators below the interpreter
  (date parsing, storage I/O). The boundary renders these through the UI.
"""

from __future__ import annotations


class CommandError(Exception):
    """Invalid user input. `message` is shown to the user as-is."""

    default_message = "Something about that command doesn't look right."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnknownCommandError(CommandError):
    default_message = "Hmm... I'm not sure what you're getting at. Care to enlighten me?"


class EmptyArgumentsError(CommandError):
    default_message = (
        "It seems you've left the details blank. "
        "Even the simplest tasks need some direction, don't you think?"
    )


class MalformedCommandError(CommandError):
    default_message = "It appears the details for this task are off. Let's give it another go, shall we?"


class NonNumericIndexError(CommandError):
    default_message = "That doesn't look like a task number. Try something like 'mark 2'."


class InvalidIndexError(CommandError):
    default_message = "There's no task with that number. Take a look at 'list' first."


class NoMatchError(CommandError):
    default_message = "Hmm, it seems that no task aligns with that word... mind trying again?"


class TaskpalFault(Exception):
    """Base for collaborator failures (not user mistakes)."""


class DateParseError(TaskpalFault, ValueError):
    """A date-time argument did not match the configured format."""

    def __init__(self, raw: str, fmt: str) -> None:
        self.raw = raw
        self.fmt = fmt
        super().__init__(f"cannot parse {raw!r} with format {fmt!r}")


class TaskStoreError(TaskpalFault):
    """The task store failed to read or write."""
