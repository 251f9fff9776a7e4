# src/bob_tasks/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import BobError, ErrorKind
from .dates import parse_date
from .task_models import FIELD_SEP, Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)


class CorruptLine(ValueError):
    """A stored line that cannot be turned back into a task."""


def parse_line(line: str) -> Task:
    """
    Decode one stored line:

        T | <0|1> | <description>
        D | <0|1> | <description> | <YYYY-MM-DD>
        E | <0|1> | <description> | <YYYY-MM-DD> | <YYYY-MM-DD>

    Tag and flag are taken from the left and dates from the right, so a
    description may itself contain " | ".
    Raises CorruptLine (or BobError for bad dates / ranges) on anything else.
    """
    head = line.split(FIELD_SEP, 2)
    if len(head) < 3:
        raise CorruptLine("insufficient fields")
    tag, flag, body = head

    task: Task
    match TaskKind.from_tag(tag):
        case TaskKind.TODO:
            task = Todo(_description(body))
        case TaskKind.DEADLINE:
            fields = body.rsplit(FIELD_SEP, 1)
            if len(fields) < 2:
                raise CorruptLine("deadline without a date")
            description, by = fields
            task = Deadline(_description(description), parse_date(by))
        case TaskKind.EVENT:
            fields = body.rsplit(FIELD_SEP, 2)
            if len(fields) < 3:
                raise CorruptLine("event without from/to dates")
            description, start, end = fields
            task = Event(_description(description), parse_date(start), parse_date(end))
        case _:
            raise CorruptLine(f"unknown task type {tag.strip()!r}")

    # Anything other than "1" (including garbage) means "not done".
    if flag.strip() == "1":
        task.complete()
    return task


def _description(raw: str) -> str:
    description = raw.strip()
    if not description:
        raise CorruptLine("empty description")
    return description


class TaskStore:
    """
    Line-oriented text file store.

    - save() rewrites the whole file (temp file + os.replace)
    - load() never raises: a missing/unreadable file gives [], and every
      line is decoded on its own so one bad line only loses itself
    """

    def __init__(self, path: str | Path = "data/bob.txt") -> None:
        self._path = Path(path)
        logger.info("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, tasks: Iterable[Task]) -> None:
        content = "".join(t.render_persisted() + "\n" for t in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(content, encoding="utf-8", newline="")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.error("Failed to save tasks to %s: %s", self._path, e)
            raise BobError(ErrorKind.IO_FAILURE, f"Error saving tasks: {e}") from e
        logger.debug("Saved %d line(s) to %s", content.count("\n"), self._path)

    def load(self) -> list[Task]:
        try:
            # newline="": only "\n" ends a record; other line breaks belong to descriptions.
            with self._path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except FileNotFoundError:
            logger.info("No task file at %s; starting empty.", self._path)
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s, starting with an empty list: %s", self._path, e)
            return []

        loaded: list[Task] = []
        for lineno, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                loaded.append(parse_line(line))
            except (CorruptLine, BobError) as e:
                logger.warning("Skipping line %d of %s (%s): %r", lineno, self._path, e, line)
            except Exception:
                logger.exception("Unexpected error on line %d of %s; skipping: %r", lineno, self._path, line)

        logger.info("Loaded %d task(s) from %s", len(loaded), self._path)
        return loaded
