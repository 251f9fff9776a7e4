# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from bob_tasks.core.errors import BobError, ErrorKind
from bob_tasks.tasks.task_models import Deadline, Event, TaskKind, Todo


def test_todo_renders_and_persists() -> None:
    t = Todo("read book")
    assert t.render_display() == "[T][ ] read book"
    assert t.render_persisted() == "T | 0 | read book"

    t.complete()
    assert t.done
    assert str(t) == "[T][X] read book"
    assert t.render_persisted() == "T | 1 | read book"

    t.reopen()
    assert not t.done


def test_deadline_from_text() -> None:
    d = Deadline.from_text("return book", " 2019-12-02 ")
    assert d.by == date(2019, 12, 2)
    assert d.kind is TaskKind.DEADLINE
    assert d.render_display() == "[D][ ] return book (by: Dec 02 2019)"
    assert d.render_persisted() == "D | 0 | return book | 2019-12-02"


def test_deadline_bad_date_is_a_validation_error() -> None:
    with pytest.raises(BobError) as exc:
        Deadline.from_text("return book", "next monday")
    assert exc.value.kind is ErrorKind.INVALID_DATE_FORMAT


def test_event_renders_both_dates() -> None:
    e = Event.from_text("project meeting", "2024-03-10", "2024-03-12")
    e.complete()
    assert e.render_display() == "[E][X] project meeting (from: Mar 10 2024 to: Mar 12 2024)"
    assert e.render_persisted() == "E | 1 | project meeting | 2024-03-10 | 2024-03-12"


def test_event_allows_single_day() -> None:
    e = Event("fair", date(2024, 5, 1), date(2024, 5, 1))
    assert e.covers(date(2024, 5, 1))


def test_event_rejects_reversed_range() -> None:
    with pytest.raises(BobError) as exc:
        Event.from_text("trip", "2024-03-15", "2024-03-10")
    assert exc.value.kind is ErrorKind.INVALID_EVENT_RANGE


def test_done_is_keyword_only_and_defaults_to_open() -> None:
    assert Todo("x").done is False
    assert Deadline("x", date(2024, 1, 1), done=True).done is True


def test_kind_from_tag() -> None:
    assert TaskKind.from_tag(" E ") is TaskKind.EVENT
    assert TaskKind.from_tag("X") is None
    assert TaskKind.from_tag("") is None
