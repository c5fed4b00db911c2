# src/dayplan/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    read: Reader = input,
    write: Writer = print,
    menu: MenuRegistry | None = None,
) -> None:
    """
    Show the numbered menu, run the chosen action, print its reply; repeat
    until the exit entry is chosen or input ends (EOF / Ctrl+C).
    """
    menu = menu or menu_registry
    logger.info("Console loop started.")

    while True:
        write("\n" + menu.build_menu())
        try:
            choice = read("Enter your choice: ").strip()
            reply = menu.handle(state, choice, read)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        write(reply)
        if menu.is_exit(choice):
            logger.info("Console exit command received.")
            break

    logger.info("Console loop finished.")
