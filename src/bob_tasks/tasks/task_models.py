# src/bob_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import ClassVar

from ..core.errors import BobError, ErrorKind
from .dates import format_display, format_storage, parse_date

FIELD_SEP = " | "


class TaskKind(StrEnum):
    """
    Task variant, valued by its one-letter tag.

    The tag appears both in the display form ("[T]") and as the first field
    of a stored line.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_tag(cls, raw: str | None) -> TaskKind | None:
        if not raw:
            return None
        try:
            return cls(raw.strip())
        except ValueError:
            return None


@dataclass(slots=True)
class TaskBase:
    description: str
    done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]

    def complete(self) -> None:
        self.done = True

    def reopen(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def render_display(self) -> str:
        return f"[{self.kind.value}][{self.status_icon}] {self.description}{self._display_suffix()}"

    def render_persisted(self) -> str:
        fields = [self.kind.value, "1" if self.done else "0", self.description, *self._stored_dates()]
        return FIELD_SEP.join(fields)

    def _display_suffix(self) -> str:
        return ""

    def _stored_dates(self) -> list[str]:
        return []

    def __str__(self) -> str:
        return self.render_display()


@dataclass(slots=True)
class Todo(TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(TaskBase):
    by: date

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    @classmethod
    def from_text(cls, description: str, by: str) -> Deadline:
        return cls(description, parse_date(by))

    def _display_suffix(self) -> str:
        return f" (by: {format_display(self.by)})"

    def _stored_dates(self) -> list[str]:
        return [format_storage(self.by)]


@dataclass(slots=True)
class Event(TaskBase):
    start: date
    end: date

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise BobError(
                ErrorKind.INVALID_EVENT_RANGE,
                "An event cannot end before it starts! "
                f"({format_storage(self.start)} is after {format_storage(self.end)})",
            )

    @classmethod
    def from_text(cls, description: str, start: str, end: str) -> Event:
        return cls(description, parse_date(start), parse_date(end))

    def covers(self, day: date) -> bool:
        return self.start <= day <= self.end

    def _display_suffix(self) -> str:
        return f" (from: {format_display(self.start)} to: {format_display(self.end)})"

    def _stored_dates(self) -> list[str]:
        return [format_storage(self.start), format_storage(self.end)]


Task = Todo | Deadline | Event
