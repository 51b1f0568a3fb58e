from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from tasklist.domain.tasks.session import TaskListSession
from tasklist.ui.telegram import callbacks as cbd
from tasklist.ui.telegram.handlers._common import show_list
from tasklist.ui.telegram.texts import tasks as texts

router = Router()


async def _cancel(message: Message, state: FSMContext, session: TaskListSession, date_format: str) -> None:
    await state.clear()
    session.draft.reset()
    await message.answer(texts.CANCELLED)
    await show_list(message, session, date_format)


@router.message(Command("cancel"))
async def cancel_cmd(message: Message, state: FSMContext, session: TaskListSession, date_format: str):
    await _cancel(message, state, session, date_format)


@router.callback_query(F.data == cbd.CB_DRAFT_CANCEL)
async def cancel_cb(cb: CallbackQuery, state: FSMContext, session: TaskListSession, date_format: str):
    await cb.answer(texts.CANCELLED)
    await state.clear()
    session.draft.reset()
    await show_list(cb.message, session, date_format, prefer_edit=True)
