from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from tasklist.domain.tasks.categories import is_assignable
from tasklist.domain.tasks.models import Draft, Period, Task, TaskTime
from tasklist.domain.tasks.state import TaskListState
from tasklist.domain.tasks.store import TaskStore

logger = logging.getLogger(__name__)


class DraftBuilder:
    """
    Holds the in-progress "new task" form.

    Setters accept anything; the only rules are applied in commit():
    empty text blocks the add, and a category that cannot be stored on a
    task ("all", unknown ids) is dropped.

    The draft is reset only after a successful add, so a submit with empty
    text keeps the user's date/time/category selection.
    """

    def __init__(self, state: TaskListState, store: TaskStore) -> None:
        self._state = state
        self._store = store

    def snapshot(self) -> Draft:
        return self._state.draft

    def _update(self, **changes) -> None:
        self._state.draft = replace(self._state.draft, **changes)

    def set_text(self, value: str) -> None:
        self._update(text=value)

    def set_due_date(self, value: str) -> None:
        self._update(due_date=value)

    def set_category(self, value: str) -> None:
        self._update(category=value)

    def set_time(self, value: TaskTime) -> None:
        self._update(time=value)

    def set_hours(self, value: str) -> None:
        self._update(time=replace(self._state.draft.time, hours=value))

    def set_minutes(self, value: str) -> None:
        self._update(time=replace(self._state.draft.time, minutes=value))

    def set_period(self, value: Period) -> None:
        self._update(time=replace(self._state.draft.time, period=value))

    def reset(self) -> None:
        self._state.draft = Draft()

    def commit(self) -> Optional[Task]:
        draft = self._state.draft
        if draft.category and not is_assignable(draft.category):
            logger.debug("Dropping unassignable category=%s on commit", draft.category)
            draft = replace(draft, category="")

        task = self._store.add_task(draft)
        if task is None:
            return None

        self.reset()
        return task
