"""
Display helpers for task rows. Pure functions, no validation: bad input
degrades to an empty or unchanged string rather than an error.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from tasklist.domain.tasks.categories import category_display
from tasklist.domain.tasks.models import Task, TaskTime

DEFAULT_DATE_FORMAT = "%x"


def format_due_date(value: Optional[str], fmt: Optional[str] = None) -> str:
    """
    Render an ISO date (YYYY-MM-DD) with the local calendar convention
    (strftime "%x" unless `fmt` is given). Empty -> "". Unparseable input is
    returned as-is.
    """
    if not value:
        return ""
    try:
        d = date.fromisoformat(value)
    except ValueError:
        return value
    return d.strftime(fmt or DEFAULT_DATE_FORMAT)


def format_time(t: TaskTime) -> str:
    return f"{t.hours}:{t.minutes} {t.period}"


def format_schedule(task: Task, fmt: Optional[str] = None) -> str:
    # Time is only meaningful next to a date
    if not task.due_date:
        return ""
    return f"{format_due_date(task.due_date, fmt)} at {format_time(task.time)}"


def count_label(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


def category_option_label(category_id: str) -> str:
    disp = category_display(category_id)
    if not disp.has_badge:
        return ""
    return f"{disp.icon} {disp.name}"
