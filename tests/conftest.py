from __future__ import annotations

import pytest

from tasklist.domain.tasks.ports import IdGenerator
from tasklist.domain.tasks.session import TaskListSession
from tasklist.domain.tasks.state import TaskListState
from tasklist.domain.tasks.store import TaskStore


class SequentialIds(IdGenerator):
    """Deterministic ids: t1, t2, ..."""

    def __init__(self) -> None:
        self._n = 0

    def new_id(self) -> str:
        self._n += 1
        return f"t{self._n}"


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def state() -> TaskListState:
    return TaskListState()


@pytest.fixture
def store(state: TaskListState, ids: SequentialIds) -> TaskStore:
    return TaskStore(state, ids)


@pytest.fixture
def session(ids: SequentialIds) -> TaskListSession:
    return TaskListSession(ids)

