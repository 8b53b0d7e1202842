# src/todo_cras/tasks/task_errors.py

"""
Errors raised while locating and loading the task file.

Loading is all-or-nothing: any of these aborts the whole load, so a partially
read file is never rendered.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for everything the CLI reports to the user."""


class FileAccessError(TodoError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read task file {self.path}: {reason}")


class LoadError(TodoError):
    """A line of the task file could not be turned into the model."""

    def __init__(self, message: str, *, line_no: int | None = None, line: str | None = None) -> None:
        self.message = message
        self.line_no = line_no
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line_no is None:
            return self.message
        if self.line is None:
            return f"line {self.line_no}: {self.message}"
        return f"line {self.line_no}: {self.message}: {self.line.strip()!r}"


class ParseError(LoadError):
    """Line matches no recognized form (bad deadline, probability or color)."""


class StructuralError(LoadError):
    """Lines are individually valid but do not fit together."""
