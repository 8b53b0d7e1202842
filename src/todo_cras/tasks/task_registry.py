# src/todo_cras/tasks/task_registry.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .task_errors import StructuralError
from .task_models import Category, Task, TaskList
from .task_parser import CategoryLine, ParsedLine, TaskLine, parse_line

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _PendingCategory:
    header: CategoryLine
    line_no: int
    tasks: list[Task] = field(default_factory=list)

    def freeze(self) -> Category:
        return Category(
            name=self.header.name,
            color=self.header.color,
            probability=self.header.probability,
            tasks=tuple(self.tasks),
            line_no=self.line_no,
        )


class CategoryRegistry:
    """
    Folds parsed lines into a TaskList.

    Tasks attach to the most recently declared category. The registry is the
    only mutable stage; build() hands out a frozen TaskList.
    """

    def __init__(self) -> None:
        self._pending: list[_PendingCategory] = []
        self._by_name: dict[str, _PendingCategory] = {}

    def add(self, parsed: ParsedLine, *, line_no: int = 0, line: str | None = None) -> None:
        if isinstance(parsed, CategoryLine):
            self._declare(parsed, line_no=line_no, line=line)
            return
        self._attach(parsed, line_no=line_no, line=line)

    def _declare(self, header: CategoryLine, *, line_no: int, line: str | None) -> None:
        previous = self._by_name.get(header.name)
        if previous is not None:
            raise StructuralError(
                f"category {header.name!r} already declared on line {previous.line_no}",
                line_no=line_no,
                line=line,
            )
        if self._pending and not self._pending[-1].tasks:
            # usually a task like "Paint the fence white 1" read as a declaration
            empty = self._pending[-1]
            logger.warning(
                "Category %r (line %s) has no tasks before %r (line %s); check that line %s is not a task",
                empty.header.name,
                empty.line_no,
                header.name,
                line_no,
                line_no,
            )
        pending = _PendingCategory(header=header, line_no=line_no)
        self._pending.append(pending)
        self._by_name[header.name] = pending

    def _attach(self, parsed: TaskLine, *, line_no: int, line: str | None) -> None:
        if not self._pending:
            raise StructuralError("task appears before any category declaration", line_no=line_no, line=line)
        self._pending[-1].tasks.append(
            Task(description=parsed.description, deadline=parsed.deadline, line_no=line_no)
        )

    def build(self, source: Path | None = None) -> TaskList:
        return TaskList(categories=tuple(p.freeze() for p in self._pending), source=source)


def build_task_list(lines: Iterable[str], *, source: Path | None = None) -> TaskList:
    """Parse and fold raw lines (1-based numbering). Raises LoadError subclasses."""
    registry = CategoryRegistry()
    for line_no, line in enumerate(lines, start=1):
        parsed = parse_line(line, line_no)
        if parsed is None:
            continue
        registry.add(parsed, line_no=line_no, line=line)

    task_list = registry.build(source=source)
    logger.debug(
        "Built task list categories=%d tasks=%d source=%s",
        len(task_list),
        task_list.task_count(),
        source,
    )
    return task_list
