from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional

from aiogram import BaseMiddleware
from aiogram.types import CallbackQuery, Message, TelegramObject

from tasklist.domain.tasks.ports import Clock
from tasklist.domain.tasks.session import SessionRegistry


def _chat_id(event: TelegramObject) -> Optional[int]:
    if isinstance(event, Message):
        return event.chat.id
    if isinstance(event, CallbackQuery) and event.message:
        return event.message.chat.id
    return None


class DIMiddleware(BaseMiddleware):
    """
    Inject dependencies to handlers via `data` dict.

    Handlers can request args by name, e.g.
      async def handler(message: Message, session: TaskListSession, date_format: str): ...
    """

    def __init__(self, sessions: SessionRegistry, clock: Clock, date_format: str) -> None:
        self._sessions = sessions
        self._clock = clock
        self._date_format = date_format

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        # keep names stable across the project
        data["sessions"] = self._sessions
        data["clock"] = self._clock
        data["date_format"] = self._date_format

        chat_id = _chat_id(event)
        if chat_id is not None:
            data["session"] = self._sessions.get(chat_id)

        return await handler(event, data)
