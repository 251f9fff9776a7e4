# src/bob_tasks/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.bootstrap import startup_notice
from ..cli.dispatch import Reply, execute_line
from ..cli.parser import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def _print_reply(reply: Reply) -> None:
    prefix = "" if reply.ok else "Hey Bob!! "
    print(DIVIDER)
    for line in (prefix + reply.text).splitlines():
        print(f" {line}")
    print(DIVIDER)


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(state.settings, "app_name", "bob"))
    logger.info("Console connector started (tasks=%d).", len(state.tasks))

    print(DIVIDER)
    print(f" Hello! I'm {app_name.capitalize()}")
    print(f" {startup_notice(state)}")
    print(" What can I do for you?")
    print(DIVIDER)
    print(command_registry.build_help())

    while state.running:
        try:
            user_input = input("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input.strip():
            continue

        try:
            reply = execute_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = Reply("Internal error while handling that command.", ok=False)

        _print_reply(reply)

    logger.info("Console connector finished.")
