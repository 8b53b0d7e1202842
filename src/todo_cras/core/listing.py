# src/todo_cras/core/listing.py

from __future__ import annotations

"""
Full listing: every task of every category, every time.

Order is declaration order for categories and file order for tasks. With
by_deadline=True, tasks inside a category are reordered so dated tasks come
first (earliest first) and undated tasks keep their file order after them.
"""

from datetime import datetime

from ..tasks.task_models import Category, DisplayLine, Task, TaskList
from .deadline import task_is_backlog

BACKLOG_MARKER = "[BACKLOG]"


def _deadline_key(task: Task) -> tuple[int, datetime]:
    if task.deadline is None:
        return (1, datetime.min)
    return (0, task.deadline)


def ordered_tasks(category: Category, *, by_deadline: bool = False) -> list[Task]:
    tasks = list(category.tasks)
    if by_deadline:
        # sorted() is stable, so equal keys keep file order
        tasks = sorted(tasks, key=_deadline_key)
    return tasks


def render_task(category: Category, task: Task, now: datetime) -> DisplayLine:
    backlog = task_is_backlog(task, now)
    text = f"{task.description} {BACKLOG_MARKER}" if backlog else task.description
    return DisplayLine(
        text=text,
        color=category.color,
        backlog=backlog,
        category=category.name,
        deadline=task.deadline,
    )


def render_full_listing(task_list: TaskList, now: datetime, *, by_deadline: bool = False) -> list[DisplayLine]:
    lines: list[DisplayLine] = []
    for category in task_list.categories:
        for task in ordered_tasks(category, by_deadline=by_deadline):
            lines.append(render_task(category, task, now))
    return lines
