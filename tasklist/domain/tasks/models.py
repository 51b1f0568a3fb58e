from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

Period = Literal["AM", "PM"]

DEFAULT_HOURS = "12"
DEFAULT_MINUTES = "00"
DEFAULT_PERIOD: Period = "AM"


@dataclass(frozen=True)
class TaskTime:
    """
    Wall-clock time as the user picked it.

    Fields are kept as zero-padded strings ("07", "30", "AM") and are
    rendered verbatim; nothing normalizes them after the fact.
    """
    hours: str = DEFAULT_HOURS
    minutes: str = DEFAULT_MINUTES
    period: Period = DEFAULT_PERIOD


@dataclass(frozen=True)
class Task:
    id: str
    text: str
    due_date: Optional[str]
    time: TaskTime
    category: Optional[str]
    completed: bool = False


@dataclass(frozen=True)
class Draft:
    text: str = ""
    due_date: str = ""
    category: str = ""
    time: TaskTime = field(default_factory=TaskTime)
