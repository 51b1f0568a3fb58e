# -*- coding: utf-8 -*-
"""
Shared keyboard builder: ButtonSpec rows -> InlineKeyboardMarkup, plus the
prev/next row used by paged lists.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from tasklist.ui.telegram.paging import MAX_INLINE_BUTTONS, Page


@dataclass(frozen=True)
class ButtonSpec:
    text: str
    callback_data: str


def nav_row(page: Page, prefix: str) -> list[ButtonSpec]:
    """◀️ n/N ▶️; empty when everything fits on one page."""
    if page.pages <= 1:
        return []
    row: list[ButtonSpec] = []
    if page.has_prev:
        row.append(ButtonSpec("◀️", f"{prefix}{page.number - 1}"))
    row.append(ButtonSpec(f"{page.number + 1}/{page.pages}", f"{prefix}{page.number}"))
    if page.has_next:
        row.append(ButtonSpec("▶️", f"{prefix}{page.number + 1}"))
    return row


def build_kb(
    rows: list[list[ButtonSpec]],
    row_widths: Optional[list[int]] = None,
) -> InlineKeyboardMarkup:
    """
    row_widths[i] caps how many buttons row i puts on one line; None keeps the row as-is.
    Empty rows are skipped. More than MAX_INLINE_BUTTONS is a caller bug (Telegram rejects it).
    """
    total = sum(len(r) for r in rows)
    if total > MAX_INLINE_BUTTONS:
        raise ValueError(f"inline keyboard has {total} buttons, limit is {MAX_INLINE_BUTTONS}")

    kb = InlineKeyboardBuilder()
    for i, row in enumerate(rows):
        if not row:
            continue
        buttons = [InlineKeyboardButton(text=b.text, callback_data=b.callback_data) for b in row]
        w = row_widths[i] if row_widths and i < len(row_widths) else None
        if w is not None:
            kb.row(*buttons, width=w)
        else:
            kb.row(*buttons)
    return kb.as_markup()
