# src/bob_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it loads settings once, opens the
text file store and seeds the session's TaskList from it.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). Loading never fails:
    a missing or damaged file just means fewer (or no) tasks.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    tasks = TaskList(store.load())
    return AppState(settings=settings, tasks=tasks, store=store)


def startup_notice(state: AppState) -> str:
    count = len(state.tasks)
    if count == 0:
        return "No existing tasks found. Starting with a fresh task list."
    return f"Loaded {count} task(s) from storage."
