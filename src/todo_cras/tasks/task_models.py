# src/todo_cras/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from pathlib import Path

DEADLINE_FORMAT = "%Y-%m-%d %H:%M"


class Color(StrEnum):
    """
    Closed palette a category may use.

    Values are lowercase; parsing is case-insensitive.
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @classmethod
    def parse(cls, raw: str) -> Color | None:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Task:
    description: str
    deadline: datetime | None = None
    line_no: int = 0

    def deadline_text(self) -> str | None:
        if self.deadline is None:
            return None
        return self.deadline.strftime(DEADLINE_FORMAT)


@dataclass(frozen=True, slots=True)
class Category:
    name: str
    color: Color
    probability: float
    tasks: tuple[Task, ...] = ()
    line_no: int = 0

    def first_task(self) -> Task | None:
        return self.tasks[0] if self.tasks else None


@dataclass(frozen=True, slots=True)
class TaskList:
    """
    Result of one successful load.

    Categories keep declaration order, tasks keep file order.
    """

    categories: tuple[Category, ...] = ()
    source: Path | None = None

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self.categories)

    def get(self, name: str) -> Category | None:
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def tasks(self) -> Iterator[tuple[Category, Task]]:
        for category in self.categories:
            for task in category.tasks:
                yield category, task

    def task_count(self) -> int:
        return sum(len(c.tasks) for c in self.categories)


@dataclass(frozen=True, slots=True)
class DisplayLine:
    """
    One line handed to an output adapter.

    The core decides text, color and backlog flag; the adapter decides how
    (and whether) to turn the color into escape sequences.
    """

    text: str
    color: Color | None = None
    backlog: bool = False
    category: str | None = None
    deadline: datetime | None = field(default=None, compare=False)
