# src/bob_tasks/cli/parser.py

"""
Turns one raw input line into a Command.

The first whitespace-delimited word picks the command (case-insensitive);
the rest of the line is handed to that command's builder, which validates it
and raises BobError with a message for the user when it is not usable.
Unrecognised words become an `Unknown` command rather than a parse error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import BobError, ErrorKind
from ..tasks.dates import looks_like_date, parse_date
from ..tasks.task_models import Deadline, Event, Todo
from .commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    Delete,
    Exit,
    FindByDate,
    FindByKeyword,
    ListTasks,
    Mark,
    Sort,
    Unknown,
    Unmark,
)

CommandBuilder = Callable[[str], Command]

logger = logging.getLogger(__name__)

BY_MARKER = " /by "
FROM_MARKER = " /from "
TO_MARKER = " /to "

# ASCII digits with an optional leading minus; nothing else reaches int().
TASK_NUMBER_PATTERN = re.compile(r"-?[0-9]+")


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    builder: CommandBuilder
    usage: str


class CommandRegistry:
    """Command words known to the parser, with a usage line for each."""

    def __init__(self) -> None:
        self._specs: dict[str, CommandSpec] = {}

    def register(self, name: str, builder: CommandBuilder, usage: str) -> None:
        key = name.lower()
        self._specs[key] = CommandSpec(name=key, builder=builder, usage=usage)

    def get(self, word: str) -> CommandSpec | None:
        return self._specs.get(word.lower())

    def names(self) -> tuple[str, ...]:
        return tuple(self._specs)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for spec in self._specs.values():
            lines.append(f"  {spec.usage}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_command(line: str) -> Command:
    text = line.strip()
    if not text:
        raise BobError(
            ErrorKind.EMPTY_COMMAND,
            "Oops! You didn't type anything. Please enter a command!",
        )

    parts = text.split(maxsplit=1)
    word = parts[0]
    rest = parts[1] if len(parts) > 1 else ""

    spec = registry.get(word)
    if spec is None:
        return Unknown(text=text, known=registry.names())

    command = spec.builder(rest)
    logger.debug("Parsed %r -> %s", word, type(command).__name__)
    return command


# ---- argument helpers ----


def _split_marker(rest: str, marker: str) -> tuple[str, str] | None:
    # Pad so a marker at either end of the arguments is still found.
    padded = f" {rest} "
    if marker not in padded:
        return None
    before, _, after = padded.partition(marker)
    return before.strip(), after.strip()


def parse_task_number(rest: str) -> int:
    """Read the 1-based task number users type and return the 0-based index."""
    tokens = rest.split()
    if not tokens:
        raise BobError(
            ErrorKind.MISSING_TASK_NUMBER,
            "Please specify a task number! (e.g., mark 1)",
        )
    if not TASK_NUMBER_PATTERN.fullmatch(tokens[0]):
        raise BobError(
            ErrorKind.INVALID_TASK_NUMBER,
            "That doesn't look like a valid number! Please use digits (e.g., 1, 2, 3).",
        )
    number = int(tokens[0])
    if number <= 0:
        raise BobError(
            ErrorKind.INVALID_TASK_NUMBER,
            "Task numbers must be positive! Try a number like 1, 2, 3...",
        )
    return number - 1


# ---- builders ----


def build_todo(rest: str) -> AddTodo:
    description = rest.strip()
    if not description:
        raise BobError(
            ErrorKind.EMPTY_DESCRIPTION,
            "Oops! The description of a todo cannot be empty. What needs to be done?",
        )
    return AddTodo(Todo(description))


def build_deadline(rest: str) -> AddDeadline:
    split = _split_marker(rest, BY_MARKER)
    if split is None:
        raise BobError(
            ErrorKind.MISSING_DATE_MARKER,
            "A deadline must have a /by part! Try: deadline <description> /by <yyyy-MM-dd>",
        )
    description, by = split
    if not description:
        raise BobError(ErrorKind.EMPTY_DESCRIPTION, "The description of a deadline cannot be empty!")
    if not by:
        raise BobError(
            ErrorKind.MISSING_DATE_MARKER,
            "The /by date of a deadline cannot be empty! Try: deadline <description> /by <yyyy-MM-dd>",
        )
    return AddDeadline(Deadline.from_text(description, by))


def build_event(rest: str) -> AddEvent:
    usage = "Try: event <description> /from <yyyy-MM-dd> /to <yyyy-MM-dd>"
    head = _split_marker(rest, FROM_MARKER)
    tail = _split_marker(head[1], TO_MARKER) if head is not None else None
    if head is None or tail is None:
        raise BobError(
            ErrorKind.MISSING_DATE_MARKER,
            f"An event must have both /from and /to parts, in that order! {usage}",
        )
    description = head[0]
    start, end = tail
    if not description:
        raise BobError(ErrorKind.EMPTY_DESCRIPTION, "The description of an event cannot be empty!")
    if not start or not end:
        raise BobError(
            ErrorKind.MISSING_DATE_MARKER,
            f"The /from and /to dates of an event cannot be empty! {usage}",
        )
    return AddEvent(Event.from_text(description, start, end))


def build_find(rest: str) -> FindByDate | FindByKeyword:
    """`find 2024-03-15` searches by date; any other argument is a keyword."""
    arg = rest.strip()
    if looks_like_date(arg):
        return FindByDate(parse_date(arg))
    return FindByKeyword(arg)


registry.register("todo", build_todo, "todo <description>")
registry.register("deadline", build_deadline, "deadline <description> /by <yyyy-MM-dd>")
registry.register(
    "event", build_event, "event <description> /from <yyyy-MM-dd> /to <yyyy-MM-dd>"
)
registry.register("list", lambda rest: ListTasks(), "list")
registry.register("mark", lambda rest: Mark(parse_task_number(rest)), "mark <task number>")
registry.register("unmark", lambda rest: Unmark(parse_task_number(rest)), "unmark <task number>")
registry.register("delete", lambda rest: Delete(parse_task_number(rest)), "delete <task number>")
registry.register("find", build_find, "find <keyword or yyyy-MM-dd>")
registry.register("sort", lambda rest: Sort(), "sort")
registry.register("bye", lambda rest: Exit(), "bye")
