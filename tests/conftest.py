# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from todo_cras.config import Settings

SAMPLE_TODO = """\
Work cyan 0.7
    Finish report 2030-01-01 09:00
    Call mom

Home green 0.3
    Water the plants
    Pay rent 2020-05-01 12:00
Someday blue 0
"""


@pytest.fixture()
def write_todo(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str, name: str = "todo.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def sample_file(write_todo) -> Path:
    return write_todo(SAMPLE_TODO)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Explicit settings for CLI tests.

    Built directly rather than from the environment to keep tests isolated
    from the developer's TODO_FILE / EDITOR.
    """
    return Settings(
        todo_file=tmp_path / "todo.txt",
        log_level="WARNING",
        log_file=None,
        editor="true",
        color_mode="never",
        show_headers=False,
        sort_by_deadline=False,
    )
