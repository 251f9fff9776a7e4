# tests/test_task_list.py

from __future__ import annotations

from datetime import date

import pytest

from bob_tasks.core.errors import BobError, ErrorKind
from bob_tasks.tasks.task_list import TaskList
from bob_tasks.tasks.task_models import Deadline, Event, Todo


def _descriptions(tasks) -> list[str]:
    return [t.description for t in tasks]


def test_constructor_copies_the_callers_list() -> None:
    source = [Todo("a")]
    tl = TaskList(source)
    source.append(Todo("b"))
    assert len(tl) == 1


def test_all_is_a_defensive_copy() -> None:
    tl = TaskList([Todo("a"), Todo("b")])
    snapshot = tl.all()
    snapshot.reverse()
    snapshot.append(Todo("c"))
    assert _descriptions(tl.all()) == ["a", "b"]


def test_delete_returns_task_and_shifts_the_rest() -> None:
    a, b, c = Todo("A"), Todo("B"), Todo("C")
    tl = TaskList([a, b, c])
    assert tl.delete(1) is b
    assert tl.all() == [a, c]
    assert len(tl) == 2


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_index_is_a_typed_error(index: int) -> None:
    tl = TaskList([Todo("a"), Todo("b"), Todo("c")])
    for op in (tl.get, tl.delete, tl.mark_done, tl.mark_not_done):
        with pytest.raises(BobError) as exc:
            op(index)
        assert exc.value.kind is ErrorKind.INDEX_OUT_OF_RANGE
    assert len(tl) == 3


def test_empty_list_queries() -> None:
    tl = TaskList()
    assert tl.is_empty()
    assert len(tl) == 0
    with pytest.raises(BobError):
        tl.get(0)


def test_mark_and_unmark() -> None:
    tl = TaskList([Todo("a")])
    assert tl.mark_done(0).done
    assert not tl.mark_not_done(0).done


def test_find_by_date_matches_deadlines_and_inclusive_event_ranges() -> None:
    todo = Todo("no date")
    due = Deadline("report", date(2024, 3, 10))
    event = Event("conference", date(2024, 3, 10), date(2024, 3, 15))
    tl = TaskList([todo, event, due])

    assert tl.find_by_date(date(2024, 3, 9)) == []
    assert tl.find_by_date(date(2024, 3, 10)) == [event, due]
    assert tl.find_by_date(date(2024, 3, 15)) == [event]
    assert tl.find_by_date(date(2024, 3, 16)) == []


def test_find_by_keyword_is_case_insensitive_substring() -> None:
    tl = TaskList([Todo("Buy Milk"), Todo("read"), Deadline("buy gift", date(2024, 1, 1))])
    assert _descriptions(tl.find_by_keyword("BUY")) == ["Buy Milk", "buy gift"]
    assert tl.find_by_keyword("xyz") == []
    assert len(tl.find_by_keyword("")) == 3


def test_sort_by_description_moves_status_with_the_task() -> None:
    zebra, apple, monkey = Todo("zebra"), Todo("Apple"), Todo("monkey")
    apple.complete()
    tl = TaskList([zebra, apple, monkey])

    tl.sort_by_description()

    assert _descriptions(tl.all()) == ["Apple", "monkey", "zebra"]
    assert [t.done for t in tl.all()] == [True, False, False]


def test_sort_is_stable_for_equal_descriptions() -> None:
    first = Todo("same")
    second = Deadline("SAME", date(2024, 1, 1))
    tl = TaskList([first, second, Todo("a")])
    tl.sort_by_description()
    assert tl.all()[1:] == [first, second]
