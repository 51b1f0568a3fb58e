from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from tasklist.domain.tasks.session import SessionRegistry, TaskListSession
from tasklist.ui.telegram.handlers._common import show_list

router = Router()


@router.message(CommandStart())
async def start_cmd(message: Message, state: FSMContext, sessions: SessionRegistry, date_format: str):
    """/start is a fresh page load: the chat's task list starts empty."""
    await state.clear()
    sessions.drop(message.chat.id)
    await show_list(message, sessions.get(message.chat.id), date_format)


@router.message(Command("menu"))
async def menu_cmd(message: Message, state: FSMContext, session: TaskListSession, date_format: str):
    await state.clear()
    await show_list(message, session, date_format)
