# tests/test_task_list.py

from __future__ import annotations

import json
from datetime import timedelta

import pytest

from taskpad.tasks.errors import TaskFileError, TaskIndexError
from taskpad.tasks.task_list import TaskList

from .fakes import make_task


def _titles(task_list: TaskList) -> list[str]:
    return [t.title for t in task_list]


def _store(*titles: str) -> TaskList:
    return TaskList([make_task(title, created_offset=n) for n, title in enumerate(titles)])


def test_get_is_one_based_and_bounds_checked() -> None:
    store = _store("a", "b", "c")
    assert store.get(1).title == "a"
    assert store.get(3).title == "c"

    with pytest.raises(TaskIndexError, match="Id must be positive!"):
        store.get(0)
    with pytest.raises(TaskIndexError, match="Last id is 3!") as exc:
        store.get(4)
    assert exc.value.upper == 3


def test_get_on_empty_store() -> None:
    with pytest.raises(TaskIndexError, match="No tasks yet!"):
        TaskList().get(1)


def test_add_sub_task_and_get_sub() -> None:
    store = _store("a", "b")
    store.add_sub_task(2, make_task("b1"))
    store.add_sub_task(2, make_task("b2"))

    assert store.get_sub(2, 1).title == "b1"
    assert store.get_sub(2, 2).title == "b2"
    with pytest.raises(TaskIndexError, match="Last sub task id of 'b' is 2!"):
        store.get_sub(2, 3)
    with pytest.raises(TaskIndexError, match="'a' has no sub tasks!"):
        store.get_sub(1, 1)
    with pytest.raises(TaskIndexError, match="Last id is 2!"):
        store.add_sub_task(3, make_task("x"))


@pytest.mark.parametrize("index", [1, 2, 3, 4])
def test_remove_keeps_relative_order(index: int) -> None:
    titles = ["a", "b", "c", "d"]
    store = _store(*titles)

    removed = store.remove(index)

    assert removed.title == titles[index - 1]
    assert _titles(store) == [t for n, t in enumerate(titles, start=1) if n != index]


def test_remove_out_of_range_leaves_store_untouched() -> None:
    store = _store("a", "b", "c")
    with pytest.raises(TaskIndexError, match="Last id is 3!"):
        store.remove(5)
    assert _titles(store) == ["a", "b", "c"]


def test_remove_sub() -> None:
    store = _store("a")
    store.add_sub_task(1, make_task("a1"))
    store.add_sub_task(1, make_task("a2"))

    assert store.remove_sub(1, 1).title == "a1"
    assert [t.title for t in store.get(1).sub_tasks] == ["a2"]


def test_focus_follows_removals() -> None:
    store = _store("a", "b", "c")

    store.set_focus(3)
    store.remove(1)
    assert store.focus == 2
    assert store.last_shown is not None and store.last_shown.title == "c"

    store.remove(2)
    assert store.focus is None
    assert store.last_shown is None

    store.set_focus(1)
    store.remove(1)
    assert store.focus is None
    assert _titles(store) == []


def test_focus_survives_removal_of_later_task() -> None:
    store = _store("a", "b", "c")
    store.set_focus(1)
    store.remove(3)
    assert store.focus == 1


def test_set_focus_validates_and_clear_focus() -> None:
    store = _store("a")
    with pytest.raises(TaskIndexError):
        store.set_focus(2)
    assert store.focus is None

    store.set_focus(1)
    store.clear_focus()
    assert store.focus is None


def test_sort_by_importance_is_descending_and_stable() -> None:
    store = TaskList(
        [
            make_task("low-1", importance=1, created_offset=0),
            make_task("high", importance=3, created_offset=1),
            make_task("low-2", importance=1, created_offset=2),
            make_task("none", importance=0, created_offset=3),
            make_task("mid", importance=2, created_offset=4),
        ]
    )

    store.sort_by_importance()
    assert _titles(store) == ["high", "mid", "low-1", "low-2", "none"]

    store.sort_by_importance()
    assert _titles(store) == ["high", "mid", "low-1", "low-2", "none"]

    store.sort_by_date_created()
    assert _titles(store) == ["low-1", "high", "low-2", "none", "mid"]

    store.sort_by_date_created()
    assert _titles(store) == ["low-1", "high", "low-2", "none", "mid"]


def test_sort_by_due_puts_undated_last_and_keeps_their_order() -> None:
    store = TaskList(
        [
            make_task("undated-1", created_offset=0),
            make_task("later", due_in=timedelta(days=5), created_offset=1),
            make_task("undated-2", created_offset=2),
            make_task("soon", due_in=timedelta(hours=1), created_offset=3),
            make_task("overdue", due_in=timedelta(hours=-1), created_offset=4),
        ]
    )

    store.sort_by_due()

    assert _titles(store) == ["overdue", "soon", "later", "undated-1", "undated-2"]
    dues = [t.due_date for t in store if t.due_date is not None]
    assert dues == sorted(dues)

    store.sort_by_due()
    assert _titles(store) == ["overdue", "soon", "later", "undated-1", "undated-2"]


def test_sorting_clears_focus() -> None:
    store = _store("a", "b")
    store.set_focus(2)
    store.sort_by_due()
    assert store.focus is None


def test_sorted_views_do_not_mutate() -> None:
    store = TaskList([make_task("a", importance=0), make_task("b", importance=3, created_offset=1)])
    assert [t.title for t in store.sorted_by_importance()] == ["b", "a"]
    assert _titles(store) == ["a", "b"]


def test_random_task() -> None:
    assert TaskList().random_task() is None

    store = _store("a", "b", "c")
    picks = {store.random_task().title for _ in range(200)}  # type: ignore[union-attr]
    assert picks <= {"a", "b", "c"}
    assert len(picks) > 1


def test_filter_by_importance_preserves_order() -> None:
    store = TaskList(
        [
            make_task("a", importance=2),
            make_task("b", importance=1),
            make_task("c", importance=2),
        ]
    )
    assert [t.title for t in store.filter_by_importance(2)] == ["a", "c"]
    assert store.filter_by_importance(3) == []


def _full_store() -> TaskList:
    groceries = make_task("Groceries", importance=2, description="weekly", created_offset=0)
    groceries.add_sub_task(make_task("Milk", due_in=timedelta(hours=4), created_offset=1))
    groceries.add_sub_task(make_task("Bread", importance=1, created_offset=2))
    return TaskList(
        [
            groceries,
            make_task("Pay rent", importance=3, due_in=timedelta(days=3), created_offset=3),
            make_task("Read book", created_offset=4),
        ]
    )


@pytest.mark.parametrize(
    "store",
    [TaskList(), TaskList([make_task("Only one")]), _full_store()],
    ids=["empty", "one", "many"],
)
def test_serialize_round_trip(store: TaskList) -> None:
    restored = TaskList.deserialize(store.serialize())
    assert restored.tasks == store.tasks


def test_empty_store_serializes_as_empty_array() -> None:
    assert json.loads(TaskList().serialize()) == []


@pytest.mark.parametrize("text", ["", "  \n", "[]"])
def test_deserialize_empty_contents(text: str) -> None:
    assert len(TaskList.deserialize(text)) == 0


@pytest.mark.parametrize("text", ["{", '{"title": "x"}', "[1, 2]", '"tasks"'])
def test_deserialize_malformed(text: str) -> None:
    with pytest.raises(TaskFileError):
        TaskList.deserialize(text)
