# src/task_manager/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import Ask, CommandEmitter, CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    ask: Ask = input,
    emit: CommandEmitter = print,
    registry: CommandRegistry | None = None,
) -> None:
    """
    Menu loop: show menu, read a choice, dispatch, repeat.

    Stops after save-and-exit. EOF / Ctrl+C stop the loop without saving.
    """
    registry = registry or command_registry
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "Task Manager"))
    logger.info("Console connector started (file=%s).", state.task_store.path)

    while state.running:
        emit(registry.build_menu(app_name))
        try:
            choice = ask(registry.choice_prompt()).strip()
            if not choice:
                continue

            try:
                response = registry.handle(state, choice, ask, emit=emit)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception:
                logger.exception("Command handler crashed (choice=%r).", choice)
                response = "Internal error while handling the command."
        except EOFError:
            logger.info("Console EOF received, exiting without saving.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting without saving.")
            emit("")
            break

        if response:
            emit(response)

    logger.info("Console connector finished.")
