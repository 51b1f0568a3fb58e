"""
Unit tests for TaskStore: add / toggle / delete / list_all.

Run with: python -m pytest tests/test_task_store.py -v
"""
from __future__ import annotations

import pytest

from tasklist.domain.tasks.models import Draft, TaskTime
from tasklist.domain.tasks.store import TaskStore


def test_add_task_appends_incomplete_task(store: TaskStore):
    """Non-empty text grows the store by exactly one, completed=False."""
    task = store.add_task(Draft(text="Write report"))

    assert task is not None
    assert len(store) == 1
    assert task.completed is False
    assert store.list_all() == (task,)


def test_add_task_trims_text(store: TaskStore):
    task = store.add_task(Draft(text="   Call mom  "))
    assert task is not None
    assert task.text == "Call mom"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_add_task_empty_text_is_noop(store: TaskStore, text: str):
    """Empty or whitespace-only text leaves the store unchanged and returns None."""
    revision_before = store.revision

    assert store.add_task(Draft(text=text, category="work", due_date="2024-01-01")) is None
    assert len(store) == 0
    assert store.revision == revision_before, "no-op must not bump revision"


def test_add_task_copies_fields_and_maps_empty_to_none(store: TaskStore):
    picked = TaskTime(hours="07", minutes="30", period="PM")
    full = store.add_task(Draft(text="A", due_date="2024-02-29", category="health", time=picked))
    bare = store.add_task(Draft(text="B"))

    assert full.due_date == "2024-02-29"
    assert full.category == "health"
    assert full.time == picked

    assert bare.due_date is None
    assert bare.category is None
    assert bare.time == TaskTime(hours="12", minutes="00", period="AM")


def test_add_task_keeps_insertion_order_and_duplicates(store: TaskStore):
    a = store.add_task(Draft(text="same"))
    b = store.add_task(Draft(text="same"))
    c = store.add_task(Draft(text="other"))

    assert [t.id for t in store.list_all()] == [a.id, b.id, c.id]
    assert len({a.id, b.id, c.id}) == 3, "ids must be unique"


def test_toggle_twice_restores_flag(store: TaskStore):
    task = store.add_task(Draft(text="Toggle me"))

    store.toggle_completed(task.id)
    assert store.get(task.id).completed is True

    store.toggle_completed(task.id)
    assert store.get(task.id).completed is False


def test_toggle_keeps_position_and_other_fields(store: TaskStore):
    a = store.add_task(Draft(text="A", category="work"))
    b = store.add_task(Draft(text="B"))

    store.toggle_completed(a.id)

    tasks = store.list_all()
    assert [t.id for t in tasks] == [a.id, b.id]
    assert tasks[0].text == "A"
    assert tasks[0].category == "work"
    assert a.completed is False, "previously returned records are not mutated"


def test_toggle_unknown_id_is_noop(store: TaskStore):
    store.add_task(Draft(text="A"))
    before = store.list_all()
    revision_before = store.revision

    store.toggle_completed("missing")

    assert store.list_all() == before
    assert store.revision == revision_before


def test_delete_removes_only_matching_id(store: TaskStore):
    a = store.add_task(Draft(text="A"))
    b = store.add_task(Draft(text="B"))
    c = store.add_task(Draft(text="C"))

    store.delete_task(b.id)

    assert [t.id for t in store.list_all()] == [a.id, c.id]
    assert store.get(b.id) is None


def test_delete_unknown_id_is_noop(store: TaskStore):
    store.add_task(Draft(text="A"))
    before = store.list_all()

    store.delete_task("missing")
    store.delete_task("missing")

    assert store.list_all() == before


def test_toggle_after_delete_is_ignored(store: TaskStore):
    """A stale toggle for a deleted row is a benign race, not an error."""
    task = store.add_task(Draft(text="Gone soon"))
    store.delete_task(task.id)

    store.toggle_completed(task.id)

    assert len(store) == 0


def test_list_all_is_a_copy(store: TaskStore):
    store.add_task(Draft(text="A"))
    snapshot = store.list_all()

    store.add_task(Draft(text="B"))

    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


def test_revision_bumps_on_each_effective_change(store: TaskStore):
    r0 = store.revision
    task = store.add_task(Draft(text="A"))
    r1 = store.revision
    store.toggle_completed(task.id)
    r2 = store.revision
    store.delete_task(task.id)
    r3 = store.revision

    assert r0 < r1 < r2 < r3
