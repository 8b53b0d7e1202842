# tests/test_task_parser.py

from __future__ import annotations

from datetime import datetime

import pytest

from todo_cras.tasks.task_errors import ParseError
from todo_cras.tasks.task_models import Color
from todo_cras.tasks.task_parser import CategoryLine, TaskLine, parse_deadline, parse_line


def test_category_line() -> None:
    assert parse_line("Work cyan 0.7") == CategoryLine(name="Work", color=Color.CYAN, probability=0.7)


def test_category_name_may_have_spaces_and_color_is_case_insensitive() -> None:
    parsed = parse_line("Side projects MAGENTA 0.25")
    assert parsed == CategoryLine(name="Side projects", color=Color.MAGENTA, probability=0.25)


@pytest.mark.parametrize("raw, expected", [("0", 0.0), ("1", 1.0), ("1.00", 1.0), (".5", 0.5)])
def test_probability_bounds_are_inclusive(raw: str, expected: float) -> None:
    parsed = parse_line(f"Home green {raw}")
    assert isinstance(parsed, CategoryLine)
    assert parsed.probability == expected


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_blank_lines_produce_nothing(line: str) -> None:
    assert parse_line(line) is None


def test_plain_task_is_stripped() -> None:
    assert parse_line("    Call mom  ") == TaskLine(description="Call mom")


def test_task_with_deadline() -> None:
    parsed = parse_line("  Finish report 2030-01-01 09:00")
    assert parsed == TaskLine(description="Finish report", deadline=datetime(2030, 1, 1, 9, 0))


@pytest.mark.parametrize(
    "line",
    [
        "Buy apples 2",
        "Call 555-123-4567",
        "Read chapter 3",
        "Fix bug #42",
    ],
)
def test_ordinary_text_stays_a_plain_task(line: str) -> None:
    assert parse_line(line) == TaskLine(description=line)


def test_malformed_deadline_is_a_parse_error_naming_the_line() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_line("Finish report 2030-13-40 25:99", 7)

    err = exc_info.value
    assert err.line_no == 7
    assert err.line == "Finish report 2030-13-40 25:99"
    assert "line 7" in str(err)
    assert "2030-13-40 25:99" in str(err)


@pytest.mark.parametrize(
    "line",
    [
        "Finish report 2030-1-01 09:00",
        "Finish report 2030-01-01 9:00",
        "Finish report 2030-01-01",
        "Finish report 2030-02-30 10:00",
        "Finish report 12-01-2030 10:00",
    ],
)
def test_inexact_deadlines_are_rejected(line: str) -> None:
    with pytest.raises(ParseError):
        parse_line(line, 1)


def test_deadline_without_description() -> None:
    with pytest.raises(ParseError, match="description"):
        parse_line("2030-01-01 09:00", 3)


@pytest.mark.parametrize("line", ["Work cyan 1.5", "Work cyan -0.1", "Work cyan 2"])
def test_probability_out_of_range(line: str) -> None:
    with pytest.raises(ParseError, match="outside 0..1"):
        parse_line(line, 1)


def test_malformed_probability() -> None:
    with pytest.raises(ParseError, match="malformed probability"):
        parse_line("Work cyan 0.7.1", 1)


def test_unrecognized_color() -> None:
    with pytest.raises(ParseError, match="unrecognized color 'purple'"):
        parse_line("Work purple 0.5", 4)


def test_parse_deadline_exact_format() -> None:
    assert parse_deadline("2024-02-29 23:59") == datetime(2024, 2, 29, 23, 59)
    with pytest.raises(ParseError):
        parse_deadline("2024-02-29T23:59")


@pytest.mark.parametrize("line", ["Home purple 1", "Home purple 0", "Home Purple .5"])
def test_unrecognized_color_with_integer_probability(line: str) -> None:
    with pytest.raises(ParseError, match="unrecognized color"):
        parse_line(line, 2)


def test_deadline_in_the_middle_of_a_task() -> None:
    parsed = parse_line("Finish report 2030-01-01 09:00 urgent")
    assert parsed == TaskLine(description="Finish report urgent", deadline=datetime(2030, 1, 1, 9, 0))


def test_deadline_at_the_start_of_a_task() -> None:
    parsed = parse_line("2030-01-01 09:00 Finish report")
    assert parsed == TaskLine(description="Finish report", deadline=datetime(2030, 1, 1, 9, 0))


@pytest.mark.parametrize(
    "line",
    [
        "Finish report 2030-13-40 25:99 urgent",
        "Finish report 2030-01-01 urgent",
        "Finish 2030-01-01 09:00 or 2030-01-02 09:00",
    ],
)
def test_bad_deadline_in_the_middle_is_rejected(line: str) -> None:
    with pytest.raises(ParseError):
        parse_line(line, 5)
