# src/todo_cras/tasks/task_store.py

from __future__ import annotations

import logging
from pathlib import Path

from .task_errors import FileAccessError
from .task_models import TaskList
from .task_registry import build_task_list

logger = logging.getLogger(__name__)


def read_task_file(path: str | Path) -> str:
    """Read the whole task file as UTF-8 text."""
    p = Path(path).expanduser()
    try:
        return p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileAccessError(p, "file does not exist") from e
    except IsADirectoryError as e:
        raise FileAccessError(p, "path is a directory") from e
    except UnicodeDecodeError as e:
        raise FileAccessError(p, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FileAccessError(p, e.strerror or str(e)) from e


def load_task_list_from_text(text: str, *, source: Path | None = None) -> TaskList:
    return build_task_list(text.splitlines(), source=source)


def load_task_list(path: str | Path) -> TaskList:
    """
    Read and parse the task file in one go.

    Raises FileAccessError for I/O problems and ParseError/StructuralError for
    content problems. Nothing is returned unless the whole file is valid.
    """
    p = Path(path).expanduser()
    text = read_task_file(p)
    task_list = load_task_list_from_text(text, source=p)
    logger.info("Loaded %s: %d categories, %d tasks", p, len(task_list), task_list.task_count())
    return task_list
