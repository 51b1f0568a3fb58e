"""Task list domain. Public API re-exported for the UI layer and tests."""

from tasklist.domain.tasks.categories import ALL, CATEGORIES, category_display
from tasklist.domain.tasks.draft import DraftBuilder
from tasklist.domain.tasks.formatting import format_due_date, format_schedule, format_time
from tasklist.domain.tasks.models import Draft, Task, TaskTime
from tasklist.domain.tasks.projector import TaskView, ViewProjector, project
from tasklist.domain.tasks.session import SessionRegistry, TaskListSession
from tasklist.domain.tasks.state import TaskListState
from tasklist.domain.tasks.store import TaskStore

__all__ = [
    "ALL",
    "CATEGORIES",
    "category_display",
    "Draft",
    "DraftBuilder",
    "format_due_date",
    "format_schedule",
    "format_time",
    "project",
    "SessionRegistry",
    "Task",
    "TaskListSession",
    "TaskListState",
    "TaskStore",
    "TaskTime",
    "TaskView",
    "ViewProjector",
]
