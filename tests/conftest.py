# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from bob_tasks.core.state import AppState
from bob_tasks.tasks.task_list import TaskList
from bob_tasks.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="bob",
        data_dir=tmp_path,
        tasks_path=tmp_path / "data" / "bob.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState with an empty TaskList and a real file store under tmp_path."""
    return AppState(settings=settings, tasks=TaskList(), store=store)
