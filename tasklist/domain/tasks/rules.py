"""
Parsers for free-text draft input coming from chat messages.

These raise ValidationError; the task list itself never does.
"""
from __future__ import annotations

import re
from datetime import date

from tasklist.domain.common.errors import ValidationError
from tasklist.domain.common.time import parse_iso_date, shift_days
from tasklist.domain.tasks.models import TaskTime

_TIME_RE = re.compile(r"^\s*(\d{1,2})\s*[:.]?\s*(\d{2})\s*([AaPp])\.?\s*[Mm]?\.?\s*$")

CLEAR_WORDS = {"-", "none", "clear"}


def parse_time_input(text: str) -> TaskTime:
    """
    Accepts 12-hour input such as "7:30 pm", "07:30 PM", "0730am".
    Returns a TaskTime with zero-padded fields.
    """
    m = _TIME_RE.match(text or "")
    if not m:
        raise ValidationError("Time must look like 07:30 AM.")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if not 1 <= hours <= 12:
        raise ValidationError("Hours must be between 01 and 12.")
    if not 0 <= minutes <= 59:
        raise ValidationError("Minutes must be between 00 and 59.")
    period = "AM" if m.group(3).upper() == "A" else "PM"
    return TaskTime(hours=f"{hours:02d}", minutes=f"{minutes:02d}", period=period)


def parse_date_input(text: str, today: date) -> str:
    """
    Returns an ISO date string, or "" when the user clears the date.
    Accepts YYYY-MM-DD, "today" and "tomorrow".
    """
    raw = (text or "").strip().lower()
    if raw in CLEAR_WORDS:
        return ""
    if raw == "today":
        return shift_days(today, 0)
    if raw == "tomorrow":
        return shift_days(today, 1)
    try:
        return parse_iso_date(raw).isoformat()
    except ValueError:
        raise ValidationError("Date must be YYYY-MM-DD, 'today' or 'tomorrow'.") from None
