# src/bob_tasks/cli/commands.py

"""
Command variants.

Each command is a frozen value built by the parser with its arguments already
validated. `apply()` runs it against the session's TaskList and returns the
reply text; `mutates` tells the dispatcher to persist afterwards and
`is_exit` ends the session.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date
from typing import ClassVar

from ..core.errors import BobError, ErrorKind
from ..tasks.dates import format_storage
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo

logger = logging.getLogger(__name__)


def _numbered(tasks: Sequence[Task]) -> str:
    return "\n".join(f"{i}.{t.render_display()}" for i, t in enumerate(tasks, start=1))


def _added(task: Task, tasks: TaskList) -> str:
    return (
        "Got it. I've added this task:\n"
        f"  {task.render_display()}\n"
        f"Now you have {len(tasks)} tasks in the list."
    )


@dataclass(frozen=True, slots=True)
class BaseCommand:
    mutates: ClassVar[bool] = False
    is_exit: ClassVar[bool] = False

    def apply(self, tasks: TaskList) -> str:
        raise NotImplementedError


# ---- add ----
# The parser builds the task once (which validates dates and ranges);
# apply() adds a fresh copy so the collection never shares it with the command.


@dataclass(frozen=True, slots=True)
class AddTodo(BaseCommand):
    task: Todo

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> str:
        task = replace(self.task)
        tasks.add(task)
        return _added(task, tasks)


@dataclass(frozen=True, slots=True)
class AddDeadline(BaseCommand):
    task: Deadline

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> str:
        task = replace(self.task)
        tasks.add(task)
        return _added(task, tasks)


@dataclass(frozen=True, slots=True)
class AddEvent(BaseCommand):
    task: Event

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> str:
        task = replace(self.task)
        tasks.add(task)
        return _added(task, tasks)


# ---- list / find / sort ----


@dataclass(frozen=True, slots=True)
class ListTasks(BaseCommand):
    def apply(self, tasks: TaskList) -> str:
        if tasks.is_empty():
            return "Your task list is empty."
        return "Here are the tasks in your list:\n" + _numbered(tasks.all())


@dataclass(frozen=True, slots=True)
class FindByDate(BaseCommand):
    day: date

    def apply(self, tasks: TaskList) -> str:
        shown = format_storage(self.day)
        matches = tasks.find_by_date(self.day)
        if not matches:
            return f"No tasks found for {shown}"
        return f"Here are the tasks on {shown}:\n" + _numbered(matches)


@dataclass(frozen=True, slots=True)
class FindByKeyword(BaseCommand):
    keyword: str

    def apply(self, tasks: TaskList) -> str:
        matches = tasks.find_by_keyword(self.keyword)
        if not matches:
            return f'No matching tasks found for "{self.keyword}"'
        return "Here are the matching tasks in your list:\n" + _numbered(matches)


@dataclass(frozen=True, slots=True)
class Sort(BaseCommand):
    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> str:
        if tasks.is_empty():
            return "You have no tasks to sort yet!"
        tasks.sort_by_description()
        return "Done! Your tasks are now sorted:\n" + _numbered(tasks.all())


# ---- index-addressed ----


@dataclass(frozen=True, slots=True)
class Mark(BaseCommand):
    index: int

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> str:
        task = tasks.get(self.index)
        if task.done:
            return f"This task is already marked as done:\n  {task.render_display()}"
        tasks.mark_done(self.index)
        return f"Nice! I've marked this task as done:\n  {task.render_display()}"


@dataclass(frozen=True, slots=True)
class Unmark(BaseCommand):
    index: int

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> str:
        task = tasks.get(self.index)
        if not task.done:
            return f"This task is not marked as done yet:\n  {task.render_display()}"
        tasks.mark_not_done(self.index)
        return f"OK, I've marked this task as not done yet:\n  {task.render_display()}"


@dataclass(frozen=True, slots=True)
class Delete(BaseCommand):
    index: int

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> str:
        removed = tasks.delete(self.index)
        return (
            "Noted. I've removed this task:\n"
            f"  {removed.render_display()}\n"
            f"Now you have {len(tasks)} tasks in the list."
        )


# ---- session ----


@dataclass(frozen=True, slots=True)
class Exit(BaseCommand):
    is_exit: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> str:
        return "Bye. Hope to see you again soon!"


@dataclass(frozen=True, slots=True)
class Unknown(BaseCommand):
    """Any unrecognised input. Always fails when applied."""

    text: str
    known: tuple[str, ...] = ()

    def apply(self, tasks: TaskList) -> str:
        logger.debug("Unknown command text=%r", self.text)
        hint = f"\nTry: {', '.join(self.known)}" if self.known else ""
        raise BobError(ErrorKind.UNKNOWN_COMMAND, "I'm sorry, but I don't know what that means!" + hint)


Command = (
    AddTodo
    | AddDeadline
    | AddEvent
    | ListTasks
    | Mark
    | Unmark
    | Delete
    | FindByDate
    | FindByKeyword
    | Sort
    | Exit
    | Unknown
)
