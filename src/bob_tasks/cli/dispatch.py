# src/bob_tasks/cli/dispatch.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.errors import BobError
from ..core.state import AppState
from .commands import Command
from .parser import parse_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    ok: bool = True
    is_exit: bool = False


def execute(state: AppState, command: Command) -> Reply:
    """
    Apply one command to the session and persist if it changed anything.

    A failed save does not undo the change: memory stays the source of truth
    and the reply says the file may be behind.
    """
    try:
        text = command.apply(state.tasks)
    except BobError as e:
        logger.debug("Command %s failed kind=%s", type(command).__name__, e.kind.value)
        return Reply(e.message, ok=False)

    if command.mutates:
        try:
            state.store.save(state.tasks.all())
        except BobError as e:
            text += f"\nWarning: {e.message}. The saved copy of your tasks may be out of date."

    if command.is_exit:
        state.running = False
    return Reply(text, is_exit=command.is_exit)


def execute_line(state: AppState, line: str) -> Reply:
    try:
        command = parse_command(line)
    except BobError as e:
        logger.debug("Parse failed kind=%s line=%r", e.kind.value, line)
        return Reply(e.message, ok=False)
    return execute(state, command)
