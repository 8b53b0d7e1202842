# src/todo_cras/core/deadline.py

from __future__ import annotations

from datetime import datetime

from ..tasks.task_models import Task


def is_backlog(deadline: datetime | None, now: datetime) -> bool:
    """
    True iff the deadline is strictly earlier than now.

    No deadline is never backlog; a deadline equal to now is not backlog yet.
    """
    if deadline is None:
        return False
    return deadline < now


def task_is_backlog(task: Task, now: datetime) -> bool:
    return is_backlog(task.deadline, now)
