from __future__ import annotations

import logging

from aiogram.exceptions import TelegramBadRequest
from aiogram.types import Message

from tasklist.domain.tasks.session import TaskListSession
from tasklist.ui.telegram.keyboards.tasks import draft_kb, task_list_kb
from tasklist.ui.telegram.render import render_draft_text, render_list_text

logger = logging.getLogger(__name__)


def command_args(message: Message) -> str:
    text = (message.text or "").strip()
    parts = text.split(maxsplit=1)
    if len(parts) < 2:
        return ""
    return parts[1].strip()


async def _send_or_edit(target_message: Message, text: str, markup, prefer_edit: bool) -> None:
    if prefer_edit:
        try:
            await target_message.edit_text(text, reply_markup=markup)
            return
        except TelegramBadRequest as e:
            # "message is not modified", message too old, etc.
            logger.debug("edit_text failed, sending new message: %s", e)
    await target_message.answer(text, reply_markup=markup)


async def show_list(
    target_message: Message,
    session: TaskListSession,
    date_format: str,
    prefer_edit: bool = False,
    page_number: int = 0,
) -> None:
    """
    prefer_edit=True: edit target_message in place (callback UX).
    prefer_edit=False: send a new list message (command UX).
    """
    # one projection per update; text and keyboard read the same view
    view = session.view()
    await _send_or_edit(
        target_message,
        render_list_text(view, date_format, page_number),
        task_list_kb(view, page_number),
        prefer_edit,
    )


async def show_draft(
    target_message: Message,
    session: TaskListSession,
    date_format: str,
    prefer_edit: bool = False,
) -> None:
    draft = session.draft.snapshot()
    await _send_or_edit(
        target_message,
        render_draft_text(draft, date_format),
        draft_kb(draft),
        prefer_edit,
    )
