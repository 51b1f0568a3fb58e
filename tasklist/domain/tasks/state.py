from __future__ import annotations

from dataclasses import dataclass, field

from tasklist.domain.tasks.models import Draft, Task


@dataclass
class TaskListState:
    """
    Everything one session owns: the task sequence, the draft form and a
    revision counter.

    Passed explicitly into TaskStore and DraftBuilder; there is no module-level
    instance. `revision` is bumped on every effective change to `tasks`.
    """
    tasks: list[Task] = field(default_factory=list)
    draft: Draft = field(default_factory=Draft)
    revision: int = 0
