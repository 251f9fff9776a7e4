# src/bob_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Dispatch only needs "load everything" and "save everything", so any backend
with these two methods can stand in for the text file store (tests use fakes).
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> None: ...
