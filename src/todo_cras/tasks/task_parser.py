# src/todo_cras/tasks/task_parser.py

from __future__ import annotations

"""
Single-line parser for the task file.

A line is one of:
- blank (ignored),
- a category declaration: "<name> <color> <probability>", e.g. "Work cyan 0.7",
- a task with a deadline anywhere in it: "Finish report 2030-01-01 09:00",
  which is cut out of the description,
- a plain task: any other text.

The format is whitespace-delimited, so a task that ends in "<color> <0..1>"
("Paint the fence white 1") reads as a category declaration, and a task
ending in "<word> 0", "<word> 1" or "<word> 0.x" is rejected as a category
with an unknown color. Rephrase such tasks.

Indentation is allowed and ignored, so tasks may be nested visually under
their category.
"""

import re
from dataclasses import dataclass
from datetime import datetime

from .task_errors import ParseError
from .task_models import DEADLINE_FORMAT, Color

_CATEGORY_RE = re.compile(r"^(?P<name>.+?)\s+(?P<color>[A-Za-z]+)\s+(?P<probability>[-+]?[\d.]*\d[\d.]*)$")

# Looks like a probability even when the color word is unknown ("Work purple 0.5", "Home purple 1").
_PROBABILITY_SHAPE_RE = re.compile(r"^(?:[-+]?[01]?\.\d+|[01])$")

# Anything that looks like an attempt at a deadline. Exactness is checked after.
_DEADLINE_ATTEMPT_RE = re.compile(
    r"(?<!\S)(?P<deadline>\d{4}-\d{1,2}-\d{1,2}(?:\s+\d{1,2}:\d{1,2})?|\d+-\d+-\d+\s+\d+:\d+)(?!\S)"
)
_DEADLINE_EXACT_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$")


@dataclass(frozen=True, slots=True)
class CategoryLine:
    name: str
    color: Color
    probability: float


@dataclass(frozen=True, slots=True)
class TaskLine:
    description: str
    deadline: datetime | None = None


ParsedLine = CategoryLine | TaskLine


def parse_deadline(raw: str, *, line_no: int | None = None, line: str | None = None) -> datetime:
    """Parse an exact "YYYY-MM-DD hh:mm" timestamp or raise ParseError."""
    if not _DEADLINE_EXACT_RE.match(raw):
        raise ParseError(
            f"malformed deadline {raw!r} (expected YYYY-MM-DD hh:mm)",
            line_no=line_no,
            line=line,
        )
    try:
        return datetime.strptime(raw, DEADLINE_FORMAT)
    except ValueError as e:
        raise ParseError(f"invalid deadline {raw!r} ({e})", line_no=line_no, line=line) from e


def _parse_category(text: str, line_no: int | None, line: str) -> CategoryLine | None:
    m = _CATEGORY_RE.match(text)
    if not m:
        return None

    raw_probability = m.group("probability")
    color = Color.parse(m.group("color"))
    if color is None:
        if _PROBABILITY_SHAPE_RE.match(raw_probability):
            choices = ", ".join(c.value for c in Color)
            raise ParseError(
                f"unrecognized color {m.group('color')!r} (choose from: {choices})",
                line_no=line_no,
                line=line,
            )
        return None

    try:
        probability = float(raw_probability)
    except ValueError as e:
        raise ParseError(f"malformed probability {raw_probability!r}", line_no=line_no, line=line) from e

    if not 0.0 <= probability <= 1.0:
        raise ParseError(f"probability {raw_probability} outside 0..1", line_no=line_no, line=line)

    return CategoryLine(name=m.group("name").strip(), color=color, probability=probability)


def _parse_task(text: str, line_no: int | None, line: str) -> TaskLine:
    matches = list(_DEADLINE_ATTEMPT_RE.finditer(text))
    if not matches:
        return TaskLine(description=text)
    if len(matches) > 1:
        found = ", ".join(repr(m.group("deadline")) for m in matches)
        raise ParseError(f"more than one deadline ({found})", line_no=line_no, line=line)

    m = matches[0]
    deadline = parse_deadline(m.group("deadline"), line_no=line_no, line=line)
    description = " ".join(part for part in (text[: m.start()].strip(), text[m.end() :].strip()) if part)
    if not description:
        raise ParseError("deadline without a task description", line_no=line_no, line=line)
    return TaskLine(description=description, deadline=deadline)


def parse_line(line: str, line_no: int | None = None) -> ParsedLine | None:
    """
    Parse one raw line.

    Returns None for blank lines. Raises ParseError for lines that try to be a
    category or a deadline task but get it wrong; such lines are never
    silently downgraded to plain tasks.
    """
    text = line.strip()
    if not text:
        return None

    category = _parse_category(text, line_no, line)
    if category is not None:
        return category

    return _parse_task(text, line_no, line)
