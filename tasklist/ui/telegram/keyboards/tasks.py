from __future__ import annotations

from aiogram.types import InlineKeyboardMarkup

from tasklist.domain.tasks.categories import ASSIGNABLE, CATEGORIES
from tasklist.domain.tasks.formatting import category_option_label
from tasklist.domain.tasks.models import Draft
from tasklist.domain.tasks.projector import TaskView
from tasklist.ui.telegram import callbacks as cbd
from tasklist.ui.telegram.keyboards.common import ButtonSpec, build_kb, nav_row
from tasklist.ui.telegram.paging import Page, page_of

ROW_TEXT_MAX = 40


def _short(text: str, limit: int = ROW_TEXT_MAX) -> str:
    return text if len(text) <= limit else text[: limit - 1] + "…"


def task_list_rows(page: Page) -> list[list[ButtonSpec]]:
    """One row per task on the page: checkbox toggle + delete."""
    rows: list[list[ButtonSpec]] = []
    for task in page.rows:
        box = "✅" if task.completed else "⬜"
        ref = f"{page.number}:{task.id}"
        rows.append([
            ButtonSpec(f"{box} {_short(task.text)}", f"{cbd.PREFIX_TASK_TOGGLE}{ref}"),
            ButtonSpec("🗑️ Delete", f"{cbd.PREFIX_TASK_DEL}{ref}"),
        ])
    return rows


def filter_row(active: str) -> list[ButtonSpec]:
    row: list[ButtonSpec] = []
    for cat in CATEGORIES:
        label = f"• {cat.icon}" if cat.id == active else cat.icon
        row.append(ButtonSpec(label, f"{cbd.PREFIX_FILTER}{cat.id}"))
    return row


def task_list_kb(view: TaskView, page_number: int = 0) -> InlineKeyboardMarkup:
    page = page_of(view, page_number)
    rows = task_list_rows(page)
    widths = [2] * len(rows)

    rows.append(nav_row(page, cbd.PREFIX_PAGE))
    widths.append(3)

    rows.append(filter_row(view.category_filter))
    widths.append(len(CATEGORIES))

    rows.append([ButtonSpec("➕ Add Task", cbd.CB_LIST_ADD)])
    widths.append(1)
    return build_kb(rows, row_widths=widths)


def draft_kb(draft: Draft) -> InlineKeyboardMarkup:
    rows = [
        [
            ButtonSpec("✍️ Text", cbd.CB_DRAFT_TEXT),
            ButtonSpec("📑 Category", cbd.CB_DRAFT_PICK_CATEGORY),
        ],
        [
            ButtonSpec("🗓️ Date", cbd.CB_DRAFT_DATE),
            ButtonSpec("🕒 Time", cbd.CB_DRAFT_TIME),
        ],
        [
            ButtonSpec("➕ Add Task", cbd.CB_DRAFT_COMMIT),
            ButtonSpec("Cancel", cbd.CB_DRAFT_CANCEL),
        ],
    ]
    return build_kb(rows, row_widths=[2, 2, 2])


def category_picker_kb(selected: str) -> InlineKeyboardMarkup:
    """Assignable categories plus a "no category" option (empty id)."""
    buttons = [ButtonSpec("✖️ None" if selected else "• ✖️ None", cbd.PREFIX_DRAFT_CATEGORY)]
    for cat in ASSIGNABLE:
        mark = "• " if cat.id == selected else ""
        buttons.append(ButtonSpec(f"{mark}{category_option_label(cat.id)}", f"{cbd.PREFIX_DRAFT_CATEGORY}{cat.id}"))
    return build_kb([buttons], row_widths=[2])
