from __future__ import annotations

import logging
from typing import Optional

from tasklist.domain.tasks.categories import ALL, FILTER_IDS
from tasklist.domain.tasks.draft import DraftBuilder
from tasklist.domain.tasks.ports import IdGenerator
from tasklist.domain.tasks.projector import TaskView, ViewProjector
from tasklist.domain.tasks.state import TaskListState
from tasklist.domain.tasks.store import TaskStore

logger = logging.getLogger(__name__)


class TaskListSession:
    """
    One user's task list: store, draft and the active category filter.

    Business logic only. No aiogram.
    """

    def __init__(self, ids: IdGenerator, state: Optional[TaskListState] = None) -> None:
        self.state = state if state is not None else TaskListState()
        self.store = TaskStore(self.state, ids)
        self.draft = DraftBuilder(self.state, self.store)
        self._projector = ViewProjector(self.store)
        self._filter = ALL

    @property
    def active_filter(self) -> str:
        return self._filter

    def set_filter(self, category_filter: str) -> None:
        # Unknown filters fall back to "all" rather than hiding everything
        if category_filter not in FILTER_IDS:
            logger.debug("Unknown filter=%s, using %s", category_filter, ALL)
            category_filter = ALL
        self._filter = category_filter

    def view(self) -> TaskView:
        return self._projector.view(self._filter)


class SessionRegistry:
    """In-memory sessions keyed by chat id. Dropped on process exit."""

    def __init__(self, ids: IdGenerator) -> None:
        self._ids = ids
        self._sessions: dict[int, TaskListSession] = {}

    def get(self, chat_id: int) -> TaskListSession:
        session = self._sessions.get(chat_id)
        if session is None:
            session = TaskListSession(self._ids)
            self._sessions[chat_id] = session
            logger.info("New task list session chat_id=%s", chat_id)
        return session

    def drop(self, chat_id: int) -> None:
        self._sessions.pop(chat_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
