"""
New-task flow: /add, the draft card and its field prompts.

/add <text> commits right away (same as pressing Enter in the text field);
everything else edits the session's draft until "Add Task" is pressed.
"""
from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from tasklist.domain.common.errors import ValidationError
from tasklist.domain.tasks.ports import Clock
from tasklist.domain.tasks.rules import parse_date_input, parse_time_input
from tasklist.domain.tasks.session import TaskListSession
from tasklist.ui.telegram import callbacks as cbd
from tasklist.ui.telegram.handlers._common import command_args, show_draft, show_list
from tasklist.ui.telegram.keyboards.tasks import category_picker_kb
from tasklist.ui.telegram.states.draft import DraftFlow
from tasklist.ui.telegram.texts import tasks as texts

router = Router()


async def _commit_from_message(message: Message, session: TaskListSession, date_format: str) -> None:
    task = session.draft.commit()
    if task is None:
        await message.answer(texts.EMPTY_TEXT)
        return
    await message.answer(texts.TASK_ADDED)
    await show_list(message, session, date_format)


@router.message(Command("add"))
async def add_cmd(message: Message, state: FSMContext, session: TaskListSession, date_format: str):
    args = command_args(message)
    if args:
        await state.clear()
        session.draft.set_text(args)
        await _commit_from_message(message, session, date_format)
        return

    await state.set_state(DraftFlow.enter_text)
    await message.answer(texts.ASK_TEXT)


@router.callback_query(F.data == cbd.CB_LIST_ADD)
async def add_cb(cb: CallbackQuery, state: FSMContext, session: TaskListSession, date_format: str):
    await cb.answer()
    await state.clear()
    await show_draft(cb.message, session, date_format)


@router.callback_query(F.data == cbd.CB_DRAFT_TEXT)
async def draft_text_cb(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    await state.set_state(DraftFlow.enter_text)
    await cb.message.answer(texts.ASK_TEXT)


@router.message(DraftFlow.enter_text)
async def draft_enter_text(message: Message, state: FSMContext, session: TaskListSession, date_format: str):
    # stored as typed; trimming happens on commit
    session.draft.set_text(message.text or "")
    await state.clear()
    await show_draft(message, session, date_format)


@router.callback_query(F.data == cbd.CB_DRAFT_PICK_CATEGORY)
async def draft_pick_category(cb: CallbackQuery, session: TaskListSession):
    await cb.answer()
    await cb.message.answer(
        texts.ASK_CATEGORY,
        reply_markup=category_picker_kb(session.draft.snapshot().category),
    )


@router.callback_query(F.data.startswith(cbd.PREFIX_DRAFT_CATEGORY))
async def draft_set_category(cb: CallbackQuery, session: TaskListSession, date_format: str):
    await cb.answer()
    session.draft.set_category(cb.data[len(cbd.PREFIX_DRAFT_CATEGORY):])
    await show_draft(cb.message, session, date_format, prefer_edit=True)


@router.callback_query(F.data == cbd.CB_DRAFT_DATE)
async def draft_date_cb(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    await state.set_state(DraftFlow.enter_date)
    await cb.message.answer(texts.ASK_DATE)


@router.message(DraftFlow.enter_date)
async def draft_enter_date(
    message: Message,
    state: FSMContext,
    session: TaskListSession,
    clock: Clock,
    date_format: str,
):
    try:
        due_date = parse_date_input(message.text or "", clock.now().date())
    except ValidationError as e:
        await message.answer(f"{e}\n{texts.ASK_DATE}")
        return

    session.draft.set_due_date(due_date)
    await state.clear()
    await show_draft(message, session, date_format)


@router.callback_query(F.data == cbd.CB_DRAFT_TIME)
async def draft_time_cb(cb: CallbackQuery, state: FSMContext):
    await cb.answer()
    await state.set_state(DraftFlow.enter_time)
    await cb.message.answer(texts.ASK_TIME)


@router.message(DraftFlow.enter_time)
async def draft_enter_time(message: Message, state: FSMContext, session: TaskListSession, date_format: str):
    try:
        picked = parse_time_input(message.text or "")
    except ValidationError as e:
        await message.answer(f"{e}\n{texts.ASK_TIME}")
        return

    session.draft.set_time(picked)
    await state.clear()
    await show_draft(message, session, date_format)


@router.callback_query(F.data == cbd.CB_DRAFT_COMMIT)
async def draft_commit_cb(cb: CallbackQuery, state: FSMContext, session: TaskListSession, date_format: str):
    task = session.draft.commit()
    if task is None:
        # draft is kept as-is so the user only has to add the text
        await cb.answer(texts.EMPTY_TEXT, show_alert=True)
        return

    await state.clear()
    await cb.answer(texts.TASK_ADDED)
    await show_list(cb.message, session, date_format, prefer_edit=True)
