from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from tasklist.domain.tasks.session import TaskListSession
from tasklist.ui.telegram import callbacks as cbd
from tasklist.ui.telegram.handlers._common import show_list
from tasklist.ui.telegram.texts import tasks as texts

router = Router()


@router.message(Command(commands=["list", "tasks"]))
async def list_cmd(message: Message, session: TaskListSession, date_format: str):
    await show_list(message, session, date_format)


@router.callback_query(F.data.startswith(cbd.PREFIX_TASK_TOGGLE))
async def task_toggle(cb: CallbackQuery, session: TaskListSession, date_format: str):
    parsed = cbd.parse_page_and_id(cb.data, cbd.PREFIX_TASK_TOGGLE)
    if parsed is None:
        await cb.answer()
        return
    page_number, task_id = parsed
    # unknown ids (already deleted) are ignored by the store
    session.store.toggle_completed(task_id)
    await cb.answer(texts.TOGGLED)
    await show_list(cb.message, session, date_format, prefer_edit=True, page_number=page_number)


@router.callback_query(F.data.startswith(cbd.PREFIX_TASK_DEL))
async def task_delete(cb: CallbackQuery, session: TaskListSession, date_format: str):
    parsed = cbd.parse_page_and_id(cb.data, cbd.PREFIX_TASK_DEL)
    if parsed is None:
        await cb.answer()
        return
    page_number, task_id = parsed
    session.store.delete_task(task_id)
    await cb.answer(texts.DELETED)
    # page is clamped if this emptied the last page
    await show_list(cb.message, session, date_format, prefer_edit=True, page_number=page_number)


@router.callback_query(F.data.startswith(cbd.PREFIX_PAGE))
async def task_page(cb: CallbackQuery, session: TaskListSession, date_format: str):
    await cb.answer()
    page_number = cbd.parse_int_safe(cb.data[len(cbd.PREFIX_PAGE):])
    await show_list(cb.message, session, date_format, prefer_edit=True, page_number=page_number)


@router.callback_query(F.data.startswith(cbd.PREFIX_FILTER))
async def task_filter(cb: CallbackQuery, session: TaskListSession, date_format: str):
    session.set_filter(cb.data[len(cbd.PREFIX_FILTER):])
    await cb.answer()
    await show_list(cb.message, session, date_format, prefer_edit=True)
