# src/taskpal/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import parse_command, split_input
from ..core.errors import CommandError, DateParseError, TaskStoreError
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_VERB = "bye"


def handle_line(state: AppState, line: str) -> str:
    """
    Run one command and always come back with text.

    User mistakes and collaborator faults are rendered through state.ui;
    the in-memory list keeps whatever the command already did to it.
    """
    try:
        return parse_command(line, state)
    except CommandError as e:
        logger.debug("Command rejected (%s): %s", type(e).__name__, e.message)
        return state.ui.render_error(e)
    except DateParseError as e:
        logger.info("Bad date-time %r (expected format %s)", e.raw, e.fmt)
        return state.ui.incorrect_date_details()
    except TaskStoreError as e:
        logger.warning("Task store failure: %s", e)
        return state.ui.store_error(e)


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_list))
    prompt = str(getattr(state.settings, "prompt", "> "))

    while True:
        try:
            line = read(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        try:
            reply = handle_line(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            write(reply)

        verb, _ = split_input(line)
        if verb == EXIT_VERB:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
