"""
Callback data prefixes for inline keyboards.
Use these instead of hardcoded strings in handlers and keyboards.
"""
from __future__ import annotations

from typing import Optional


def parse_int_safe(value: str, default: int = 0) -> int:
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def parse_page_and_id(data: str, prefix: str) -> Optional[tuple[int, str]]:
    """"<prefix><page>:<task_id>" -> (page, task_id). None if the id part is missing."""
    page_raw, sep, task_id = data[len(prefix):].partition(":")
    if not sep or not task_id:
        return None
    return parse_int_safe(page_raw), task_id


# list view; row buttons carry the page they were shown on
PREFIX_TASK_TOGGLE = "task:toggle:"
PREFIX_TASK_DEL = "task:del:"
PREFIX_FILTER = "filter:"
PREFIX_PAGE = "page:"
CB_LIST_ADD = "list:add"

# draft card
PREFIX_DRAFT_CATEGORY = "draft:cat:"
CB_DRAFT_PICK_CATEGORY = "draft:pick_cat"
CB_DRAFT_DATE = "draft:date"
CB_DRAFT_TIME = "draft:time"
CB_DRAFT_TEXT = "draft:text"
CB_DRAFT_COMMIT = "draft:commit"
CB_DRAFT_CANCEL = "draft:cancel"
