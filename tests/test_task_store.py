# tests/test_task_store.py

from __future__ import annotations

import pytest

from task_manager.tasks.task_models import CompleteOutcome, TaskFilter
from task_manager.tasks.task_store import TaskStore
from task_manager.tasks.validation import TaskValidationError


def _add(store: TaskStore, title: str = "Task", priority: int = 3, completed: bool = False) -> int:
    task_id = store.add_task(title, "desc", priority, "01/01/2030")
    if completed:
        store.complete_task(task_id)
    return task_id


def test_add_assigns_increasing_ids_and_lists_them(store: TaskStore) -> None:
    first = store.add_task("  Write report ", " quarterly ", 5, "12/31/2030")
    second = _add(store, "Call Bob")

    assert (first, second) == (1, 2)

    listing = store.list_tasks(TaskFilter.ALL)
    assert listing.ids == [1, 2]
    assert listing.tasks[0].title == "Write report"
    assert listing.tasks[0].description == "quarterly"
    assert "ID: 2" in listing.rendered()[1]
    assert "Title: Call Bob" in listing.rendered()[1]


@pytest.mark.parametrize(
    ("title", "priority", "due", "field"),
    [
        ("  ", 3, "01/01/2030", "title"),
        ("ok", 0, "01/01/2030", "priority"),
        ("ok", 6, "01/01/2030", "priority"),
        ("ok", 3, "13/01/2030", "due_date"),
    ],
)
def test_add_rejects_invalid_input_without_mutation(
    store: TaskStore, title: str, priority: int, due: str, field: str
) -> None:
    _add(store)

    with pytest.raises(TaskValidationError) as exc:
        store.add_task(title, "", priority, due)

    assert exc.value.field == field
    assert store.count_tasks() == 1
    assert store.next_id() == 2


def test_deleted_highest_id_is_not_reused(store: TaskStore) -> None:
    for title in ("a", "b", "c"):
        _add(store, title)

    assert store.delete_task(3) is True
    assert _add(store, "d") == 4
    assert store.list_tasks().ids == [1, 2, 4]


def test_complete_is_idempotent(store: TaskStore) -> None:
    task_id = _add(store)

    assert store.complete_task(task_id) is CompleteOutcome.COMPLETED
    assert store.complete_task(task_id) is CompleteOutcome.ALREADY_COMPLETE
    task = store.get_task(task_id)
    assert task is not None and task.completed is True


def test_complete_and_delete_after_delete_report_not_found(store: TaskStore) -> None:
    task_id = _add(store)
    assert store.delete_task(task_id) is True

    assert store.complete_task(task_id) is CompleteOutcome.NOT_FOUND
    assert store.delete_task(task_id) is False
    assert store.count_tasks() == 0


def test_delete_keeps_relative_order(store: TaskStore) -> None:
    for title in ("a", "b", "c", "d"):
        _add(store, title)

    store.delete_task(2)

    assert [t.title for t in store.list_tasks().tasks] == ["a", "c", "d"]


def test_filters_partition_all_tasks(store: TaskStore) -> None:
    _add(store, "a")
    _add(store, "b", completed=True)
    _add(store, "c")
    _add(store, "d", completed=True)

    all_ids = set(store.list_tasks(TaskFilter.ALL).ids)
    done = set(store.list_tasks("completed").ids)
    todo = set(store.list_tasks("incomplete").ids)

    assert done == {2, 4}
    assert todo == {1, 3}
    assert done | todo == all_ids
    assert not done & todo


def test_list_distinguishes_empty_store_and_empty_filter(store: TaskStore) -> None:
    empty = store.list_tasks(TaskFilter.COMPLETED)
    assert empty.store_empty is True
    assert empty.empty_message() == "No tasks found."

    _add(store)
    none_done = store.list_tasks(TaskFilter.COMPLETED)
    assert none_done.store_empty is False
    assert none_done.tasks == []
    assert none_done.empty_message() == "No completed tasks found."


def test_list_rejects_unknown_filter(store: TaskStore) -> None:
    with pytest.raises(ValueError):
        store.list_tasks("overdue")
