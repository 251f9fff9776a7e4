# src/bob_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the stored tasks, then runs the
console REPL until `bye`, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import BobError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    log_dir = settings.log_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (tasks file: %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        # Every mutating command already saved; this catches a session that
        # ended with the file behind memory after a failed save.
        try:
            state.store.save(state.tasks.all())
        except BobError as e:
            logger.error("Final save failed: %s", e.message)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
