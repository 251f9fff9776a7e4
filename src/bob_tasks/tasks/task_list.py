# src/bob_tasks/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from ..core.errors import BobError, ErrorKind
from .task_models import Deadline, Event, Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    In-memory, ordered task collection for one session.

    Indexes are 0-based here; the parser converts the 1-based numbers users
    type. Every index is checked against the current size and a bad one raises
    INDEX_OUT_OF_RANGE.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    def __len__(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    # ---- index-addressed operations ----

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise BobError(
                ErrorKind.INDEX_OUT_OF_RANGE,
                "That task number doesn't exist in your list. "
                f"You have {len(self._tasks)} task(s).",
            )

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        self._check_index(index)
        removed = self._tasks.pop(index)
        logger.debug("Task removed index=%s kind=%s", index, removed.kind.value)
        return removed

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.complete()
        return task

    def mark_not_done(self, index: int) -> Task:
        task = self.get(index)
        task.reopen()
        return task

    # ---- queries ----

    def all(self) -> list[Task]:
        """Shallow copy in display order; reordering it does not touch the collection."""
        return list(self._tasks)

    def find_by_date(self, day: date) -> list[Task]:
        """
        Deadlines due on `day` and events whose range includes it (both ends
        inclusive). Todos never match.
        """
        out: list[Task] = []
        for t in self._tasks:
            if isinstance(t, Deadline) and t.by == day:
                out.append(t)
            elif isinstance(t, Event) and t.covers(day):
                out.append(t)
        return out

    def find_by_keyword(self, keyword: str) -> list[Task]:
        needle = keyword.casefold()
        return [t for t in self._tasks if needle in t.description.casefold()]

    def sort_by_description(self) -> None:
        # list.sort is stable: equal descriptions keep their relative order.
        self._tasks.sort(key=lambda t: t.description.casefold())
