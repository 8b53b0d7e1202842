# src/todo_cras/cli/editor.py

"""
Edit mode.

Editing is delegated to an external editor process. After it exits the file is
re-read and validated exactly like a normal load; if it does not load, the user
may reopen the editor to fix it.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

from ..tasks.task_errors import LoadError, TodoError
from ..tasks.task_models import TaskList
from ..tasks.task_store import load_task_list

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]
Reporter = Callable[[str], None]


def open_in_editor(path: Path, editor: str) -> int:
    """Run the editor on path and block until it exits. Returns its exit code."""
    argv = shlex.split(editor) + [str(path)]
    logger.info("Launching editor: %s", argv)
    try:
        completed = subprocess.run(argv, check=False)
    except FileNotFoundError as e:
        raise TodoError(f"Editor not found: {argv[0]!r} (set TODO_CRAS_EDITOR or EDITOR)") from e
    if completed.returncode != 0:
        logger.warning("Editor exited with code %s", completed.returncode)
    return completed.returncode


def ask_yes_no(prompt: Prompt, question: str) -> bool:
    while True:
        answer = prompt(f"{question} [y/n] ").strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False


def edit_mode(
    path: Path,
    editor: str,
    *,
    prompt: Prompt = input,
    report: Reporter = print,
    launch: Callable[[Path, str], int] = open_in_editor,
) -> TaskList:
    """
    Edit, reload, validate; repeat while the file is invalid and the user agrees.

    Returns the freshly loaded TaskList. Re-raises the last LoadError if the user
    gives up on an invalid file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    while True:
        launch(path, editor)
        try:
            return load_task_list(path)
        except LoadError as e:
            logger.warning("Edited file does not load: %s", e)
            report(f"{path}: {e}")
            try:
                retry = ask_yes_no(prompt, "Reopen editor to fix it?")
            except EOFError:
                retry = False
            if not retry:
                raise
