# src/dayplan/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu in the
main thread. Nothing is persisted: the schedule is gone when the process
exits.
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

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye (%d task(s) discarded).", state.store.count_tasks())


if __name__ == "__main__":
    main()
