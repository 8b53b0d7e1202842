# tests/test_listing.py

from __future__ import annotations

from datetime import datetime

from todo_cras.core.listing import BACKLOG_MARKER, render_full_listing
from todo_cras.tasks.task_models import Color
from todo_cras.tasks.task_registry import build_task_list

from .conftest import SAMPLE_TODO

ROUND_TRIP = "Work cyan 0.7\nFinish report 2030-01-01 09:00\nCall mom\n"


def _texts(lines) -> list[str]:
    return [line.text for line in lines]


def test_round_trip_before_deadline() -> None:
    task_list = build_task_list(ROUND_TRIP.splitlines())
    lines = render_full_listing(task_list, datetime(2029, 12, 31, 23, 59))
    assert _texts(lines) == ["Finish report", "Call mom"]
    assert [line.backlog for line in lines] == [False, False]


def test_round_trip_after_deadline() -> None:
    task_list = build_task_list(ROUND_TRIP.splitlines())
    lines = render_full_listing(task_list, datetime(2030, 1, 1, 9, 1))
    assert _texts(lines) == ["Finish report [BACKLOG]", "Call mom"]
    assert [line.backlog for line in lines] == [True, False]


def test_at_exact_deadline_there_is_no_marker() -> None:
    task_list = build_task_list(ROUND_TRIP.splitlines())
    lines = render_full_listing(task_list, datetime(2030, 1, 1, 9, 0))
    assert BACKLOG_MARKER not in lines[0].text


def test_every_task_once_in_file_order_with_color_hints() -> None:
    task_list = build_task_list(SAMPLE_TODO.splitlines())
    lines = render_full_listing(task_list, datetime(2025, 1, 1))

    assert _texts(lines) == ["Finish report", "Call mom", "Water the plants", "Pay rent [BACKLOG]"]
    assert [line.color for line in lines] == [Color.CYAN, Color.CYAN, Color.GREEN, Color.GREEN]
    assert [line.category for line in lines] == ["Work", "Work", "Home", "Home"]


def test_probability_does_not_filter_the_full_listing() -> None:
    task_list = build_task_list(["Never blue 0", "still shown"])
    assert _texts(render_full_listing(task_list, datetime(2025, 1, 1))) == ["still shown"]


def test_output_is_deterministic() -> None:
    task_list = build_task_list(SAMPLE_TODO.splitlines())
    now = datetime(2025, 6, 1, 12, 0)
    assert render_full_listing(task_list, now) == render_full_listing(task_list, now)


def test_tasks_without_deadline_never_get_a_marker() -> None:
    task_list = build_task_list(["Work cyan 1", "a", "b", "c"])
    for now in (datetime(1900, 1, 1), datetime(2500, 1, 1)):
        assert all(BACKLOG_MARKER not in line.text for line in render_full_listing(task_list, now))


def test_by_deadline_orders_dated_tasks_first() -> None:
    task_list = build_task_list(
        [
            "Work cyan 0.5",
            "undated one",
            "late 2031-01-01 00:00",
            "undated two",
            "early 2030-01-01 00:00",
        ]
    )
    lines = render_full_listing(task_list, datetime(2025, 1, 1), by_deadline=True)
    assert _texts(lines) == ["early", "late", "undated one", "undated two"]

    unsorted = render_full_listing(task_list, datetime(2025, 1, 1))
    assert _texts(unsorted) == ["undated one", "late", "undated two", "early"]
