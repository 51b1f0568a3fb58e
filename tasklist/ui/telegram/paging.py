"""
Splits a projected view into pages that fit one Telegram message.

Limits: 4096 characters per message text, 100 buttons per inline keyboard.
"""
from __future__ import annotations

from dataclasses import dataclass

from tasklist.domain.tasks.models import Task
from tasklist.domain.tasks.projector import TaskView

PAGE_SIZE = 10
MAX_MESSAGE_LEN = 4096
MAX_INLINE_BUTTONS = 100


@dataclass(frozen=True)
class Page:
    rows: tuple[Task, ...]
    number: int
    pages: int

    @property
    def has_prev(self) -> bool:
        return self.number > 0

    @property
    def has_next(self) -> bool:
        return self.number < self.pages - 1


def page_of(view: TaskView, number: int, size: int = PAGE_SIZE) -> Page:
    """Out-of-range page numbers are clamped (e.g. after deleting the last row of a page)."""
    pages = max(1, -(-view.count // size))
    number = min(max(number, 0), pages - 1)
    start = number * size
    return Page(rows=view.rows[start:start + size], number=number, pages=pages)
