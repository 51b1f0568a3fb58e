"""
Fixed category table.

"all" is the filter pseudo-category: it shows in the filter picker but is
never stored on a task.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ALL = "all"

NEUTRAL_ACCENT = "gray"


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    icon: str
    accent: str


@dataclass(frozen=True)
class CategoryDisplay:
    icon: str
    name: str
    accent: str

    @property
    def has_badge(self) -> bool:
        return bool(self.name)


CATEGORIES: tuple[Category, ...] = (
    Category(ALL, "All Tasks", "📋", "gray"),
    Category("work", "Work", "💼", "blue"),
    Category("personal", "Personal", "👤", "green"),
    Category("shopping", "Shopping", "🛒", "purple"),
    Category("health", "Health", "🏥", "red"),
    Category("education", "Education", "📚", "yellow"),
)

_BY_ID: dict[str, Category] = {c.id: c for c in CATEGORIES}

# Everything except the "all" pseudo-category
ASSIGNABLE: tuple[Category, ...] = tuple(c for c in CATEGORIES if c.id != ALL)
ASSIGNABLE_IDS: frozenset[str] = frozenset(c.id for c in ASSIGNABLE)
FILTER_IDS: tuple[str, ...] = tuple(c.id for c in CATEGORIES)

FALLBACK_DISPLAY = CategoryDisplay(icon="", name="", accent=NEUTRAL_ACCENT)


def get_category(category_id: Optional[str]) -> Optional[Category]:
    if not category_id:
        return None
    return _BY_ID.get(category_id)


def is_assignable(category_id: Optional[str]) -> bool:
    return bool(category_id) and category_id in ASSIGNABLE_IDS


def category_display(category_id: Optional[str]) -> CategoryDisplay:
    """Display metadata for a category id; unknown or empty ids get FALLBACK_DISPLAY."""
    cat = get_category(category_id)
    if cat is None:
        return FALLBACK_DISPLAY
    return CategoryDisplay(icon=cat.icon, name=cat.name, accent=cat.accent)
