"""
Text rendering for the list view and the draft card (HTML parse mode).
"""
from __future__ import annotations

from html import escape
from typing import Optional

from tasklist.domain.tasks.categories import category_display
from tasklist.domain.tasks.formatting import count_label, format_due_date, format_schedule, format_time
from tasklist.domain.tasks.models import Draft, Task
from tasklist.domain.tasks.projector import TaskView
from tasklist.ui.telegram.paging import MAX_MESSAGE_LEN, page_of
from tasklist.ui.telegram.texts import tasks as texts

LINE_TEXT_MAX = 300


def tg_len(s: str) -> int:
    # Telegram counts UTF-16 code units, so most emoji count as 2
    return len(s.encode("utf-16-le")) // 2


def render_task_line(task: Task, date_format: Optional[str] = None) -> str:
    box = "✅" if task.completed else "⬜"
    raw = task.text if len(task.text) <= LINE_TEXT_MAX else task.text[: LINE_TEXT_MAX - 1] + "…"
    body = escape(raw, quote=False)
    if task.completed:
        body = f"<s>{body}</s>"
    line = f"{box} {body}"

    badge = category_display(task.category)
    if badge.has_badge:
        line += f"  [{badge.icon} {escape(badge.name)}]"

    schedule = format_schedule(task, date_format)
    if schedule:
        line += f"\n     🗓️ {escape(schedule)}"
    return line


def render_list_text(view: TaskView, date_format: Optional[str] = None, page_number: int = 0) -> str:
    """
    Header plus the rows of one page. Rows that would push the message past
    MAX_MESSAGE_LEN are replaced by a single "…and N more" line.
    """
    active = category_display(view.category_filter)
    header = f"<b>{texts.TITLE}</b>\n📝 {count_label(view.count)} · {active.icon} {escape(active.name)}"
    if view.is_empty:
        return f"{header}\n\n{texts.EMPTY_LIST}"

    page = page_of(view, page_number)
    if page.pages > 1:
        header += f" · page {page.number + 1}/{page.pages}"

    # reserve room for the overflow line
    budget = MAX_MESSAGE_LEN - tg_len(header) - 2 - tg_len(texts.MORE_ROWS.format(n=len(page.rows))) - 1
    lines: list[str] = []
    used = 0
    for i, task in enumerate(page.rows):
        line = render_task_line(task, date_format)
        cost = tg_len(line) + (1 if lines else 0)
        if used + cost > budget:
            lines.append(texts.MORE_ROWS.format(n=len(page.rows) - i))
            break
        lines.append(line)
        used += cost
    return header + "\n\n" + "\n".join(lines)


def render_draft_text(draft: Draft, date_format: Optional[str] = None) -> str:
    cat = category_display(draft.category)
    text = draft.text.strip()
    if len(text) > LINE_TEXT_MAX:
        text = text[: LINE_TEXT_MAX - 1] + "…"
    lines = [
        "<b>New task</b>",
        f"✍️ {escape(text, quote=False) if text else '—'}",
        f"📑 {escape(cat.icon + ' ' + cat.name) if cat.has_badge else 'Category: none'}",
    ]
    if draft.due_date:
        lines.append(f"🗓️ {escape(format_due_date(draft.due_date, date_format))} at {format_time(draft.time)}")
    else:
        lines.append(f"🗓️ no date · 🕒 {format_time(draft.time)}")
    return "\n".join(lines)
