from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from tasklist.domain.tasks.models import Draft, Task
from tasklist.domain.tasks.ports import IdGenerator
from tasklist.domain.tasks.state import TaskListState

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered, in-memory task store. No persistence. Never raises.

    Missing ids on toggle/delete are treated as a benign race (the row was
    already deleted) and ignored.
    """

    def __init__(self, state: TaskListState, ids: IdGenerator) -> None:
        self._state = state
        self._ids = ids

    @property
    def revision(self) -> int:
        return self._state.revision

    def __len__(self) -> int:
        return len(self._state.tasks)

    def _touch(self) -> None:
        self._state.revision += 1

    def _index_of(self, task_id: str) -> Optional[int]:
        for i, task in enumerate(self._state.tasks):
            if task.id == task_id:
                return i
        return None

    # ---- public API ----

    def add_task(self, draft: Draft) -> Optional[Task]:
        text = draft.text.strip()
        if not text:
            logger.debug("add_task ignored: empty text")
            return None

        task = Task(
            id=self._ids.new_id(),
            text=text,
            due_date=draft.due_date or None,
            time=draft.time,
            category=draft.category or None,
            completed=False,
        )
        self._state.tasks.append(task)
        self._touch()
        logger.debug(
            "Task added id=%s category=%s due_date=%s",
            task.id,
            task.category,
            task.due_date,
        )
        return task

    def toggle_completed(self, task_id: str) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle_completed ignored: id=%s not found", task_id)
            return
        current = self._state.tasks[idx]
        self._state.tasks[idx] = replace(current, completed=not current.completed)
        self._touch()
        logger.debug("Task toggled id=%s completed=%s", task_id, not current.completed)

    def delete_task(self, task_id: str) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete_task ignored: id=%s not found", task_id)
            return
        del self._state.tasks[idx]
        self._touch()
        logger.debug("Task deleted id=%s", task_id)

    def get(self, task_id: str) -> Optional[Task]:
        idx = self._index_of(task_id)
        return self._state.tasks[idx] if idx is not None else None

    def list_all(self) -> tuple[Task, ...]:
        # Tasks are frozen, so a shallow copy of the sequence is enough
        return tuple(self._state.tasks)
