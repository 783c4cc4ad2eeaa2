# src/tasknest/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_list
from ..core.state import AppState
from ..tasks.task_api import drain_notifications

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def ask_yes_no(question: str) -> bool:
    """Blocking y/n prompt on stdin. EOF or Ctrl+C count as "no"."""
    try:
        answer = input(f"{question} [y/N] ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return answer in ("y", "yes", "ya")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", state.task_store.count())
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")
    print(render_list(state))

    while True:
        try:
            user_input = input(">>> ").strip()
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

        if not user_input.startswith("/"):
            # Plain text is shorthand for adding a task due today.
            user_input = f"/add {user_input}"

        try:
            response = command_registry.handle(state, user_input, confirm=ask_yes_no)
        except OSError:
            logger.exception("Saving tasks failed.")
            response = "Could not save tasks to local storage."
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        for note in drain_notifications(state):
            _print_ts(f"** {note.message} **")

        if response is not None:
            print(response)

    logger.info("Console connector finished.")
