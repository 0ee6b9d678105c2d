# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import cmd_list, quick_add
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "tasks> "


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "tasklist"))

    print(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(cmd_list(state, []))

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input)
            if response is None:
                response = quick_add(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        print(response)
        print()

    logger.info("Console connector finished.")
