# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state, pause_after_action=settings.pause_after_action)
    finally:
        # Tasks live only in memory; nothing to flush.
        logger.info("Bye (%d tasks discarded).", state.task_store.count())


if __name__ == "__main__":
    main()
