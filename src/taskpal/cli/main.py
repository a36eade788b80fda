# src/taskpal/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading saved tasks), then runs the
console REPL in the main thread until 'bye' or EOF.
"""

from __future__ import annotations

import logging
import sys

from .. import ui
from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import TaskStoreError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # INFO and below go to the log file only; the console shows warnings+.
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = max(getattr(logging, level_name, logging.INFO), logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except TaskStoreError as e:
        logger.error("Cannot load tasks: %s", e)
        print(ui.store_error(e), file=sys.stderr)
        return 1

    print(ui.greeting(settings.app_name))
    run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
