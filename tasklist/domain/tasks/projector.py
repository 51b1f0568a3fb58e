"""
View projection: which tasks to show, in which order.

project() is a pure function. ViewProjector wraps it with a one-entry cache
keyed by (store revision, filter) so a render reads one projection instead
of recomputing it per access.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from tasklist.domain.tasks.categories import ALL
from tasklist.domain.tasks.models import Task
from tasklist.domain.tasks.store import TaskStore


def project(tasks: Iterable[Task], category_filter: str) -> tuple[Task, ...]:
    """
    Filter by category, then stable-partition completed tasks ahead of
    incomplete ones. Relative insertion order inside each group is kept.
    Uncategorized tasks only show under "all".
    """
    if category_filter == ALL:
        working = list(tasks)
    else:
        working = [t for t in tasks if t.category == category_filter]

    completed = [t for t in working if t.completed]
    pending = [t for t in working if not t.completed]
    return tuple(completed + pending)


@dataclass(frozen=True)
class TaskView:
    rows: tuple[Task, ...]
    category_filter: str
    revision: int

    @property
    def count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows


class ViewProjector:
    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._cached: Optional[TaskView] = None

    def view(self, category_filter: str) -> TaskView:
        revision = self._store.revision
        cached = self._cached
        if cached is not None and cached.revision == revision and cached.category_filter == category_filter:
            return cached

        rows = project(self._store.list_all(), category_filter)
        self._cached = TaskView(rows=rows, category_filter=category_filter, revision=revision)
        return self._cached
