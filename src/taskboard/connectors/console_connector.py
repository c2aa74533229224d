# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import MenuAction, MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PAUSE_PROMPT = "\nНажмите Enter для продолжения..."


def run_console_loop(
    state: AppState,
    *,
    registry: MenuRegistry | None = None,
    pause_after_action: bool = True,
) -> None:
    """
    Main menu loop.

    Ends on the exit choice, or when input is closed (EOF / Ctrl+C).
    A crashing handler is logged and reported; the loop keeps going.
    """
    registry = registry or menu_registry
    console = state.console
    logger.info("Console connector started (tasks=%s).", state.task_store.count())

    while True:
        console.write(registry.build_menu())
        try:
            choice = console.read_line(registry.choice_prompt()).strip()

            try:
                action = registry.handle(state, choice)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception:
                logger.exception("Menu handler crashed (choice=%r).", choice)
                console.write("Внутренняя ошибка при выполнении действия.")
                action = MenuAction.CONTINUE

            if action is None:
                console.write(registry.invalid_choice_message())
                action = MenuAction.CONTINUE

            if action is MenuAction.EXIT:
                logger.info("Console exit command received.")
                break

            if pause_after_action:
                console.read_line(PAUSE_PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.write()
            break

    logger.info("Console connector finished.")
