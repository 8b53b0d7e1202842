# src/todo_cras/core/greeting.py

from __future__ import annotations

"""
Probability mode: a short, colored greeting banner.

Each category flips its own weighted coin. A hit shows the category's first
task; a miss (or a hit on an empty category) shows nothing. Backlog markers are
not applied here.
"""

import logging
from dataclasses import dataclass

from ..tasks.task_models import Category, DisplayLine, TaskList
from .ports import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CategoryDraw:
    category: Category
    draw: float

    @property
    def hit(self) -> bool:
        return self.draw < self.category.probability


def draw_category(category: Category, rng: RandomSource) -> CategoryDraw:
    return CategoryDraw(category=category, draw=rng.random())


def select_greeting(task_list: TaskList, rng: RandomSource) -> list[DisplayLine]:
    lines: list[DisplayLine] = []
    for category in task_list.categories:
        # one draw per category, hit or not, so outcomes stay independent
        result = draw_category(category, rng)
        logger.debug(
            "Greeting draw category=%s p=%.2f draw=%.4f hit=%s",
            category.name,
            category.probability,
            result.draw,
            result.hit,
        )
        if not result.hit:
            continue
        task = category.first_task()
        if task is None:
            continue
        lines.append(DisplayLine(text=task.description, color=category.color, category=category.name))
    return lines
