# src/todo_cras/cli/main.py

"""
CLI entrypoint.

Modes:
- no flags: list every task, flagging overdue ones with [BACKLOG],
- -p: probability mode, a short greeting (one task per lucky category),
- -e: open the task file in an external editor, then validate it,
- -h: usage.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ..config import Settings, get_settings
from ..connectors.terminal_output import TerminalOutput
from ..core.greeting import select_greeting
from ..core.listing import render_full_listing
from ..core.ports import Clock, OutputAdapter, RandomSource, SystemClock, system_random
from ..logging_setup import setup_logging
from ..tasks.task_errors import LoadError, TodoError
from ..tasks.task_store import load_task_list
from .editor import edit_mode

logger = logging.getLogger(__name__)

DESCRIPTION = "Show your todo list, or a random pick of it as a shell greeting."

EPILOG = """\
task file format:
  Work cyan 0.7                     category: name, color, probability (0..1)
      Finish report 2030-01-01 09:00  task with a deadline (YYYY-MM-DD hh:mm)
      Call mom                        task without a deadline

colors: black, red, green, yellow, blue, magenta, cyan, white
lines ending in "<color> <0..1>" are categories; "<word> 0|1|0.x" endings are rejected
(write "Paint the fence white, 1 coat", not "Paint the fence white 1")
file: $TODO_FILE (default ~/todo.txt)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-cras",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-p",
        "--probability",
        action="store_true",
        help="probability mode: each category shows its first task with its own chance",
    )
    mode.add_argument("-e", "--edit", action="store_true", help="edit the task file in $EDITOR")
    parser.add_argument("-f", "--file", type=Path, default=None, help="task file (overrides $TODO_FILE)")
    parser.add_argument(
        "--by-deadline",
        action="store_true",
        default=None,
        help="full listing: order tasks in each category by deadline",
    )
    return parser


def run(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    clock: Clock | None = None,
    rng: RandomSource | None = None,
    output: OutputAdapter | None = None,
) -> int:
    """Parse arguments and run one mode. Returns the process exit code."""
    if settings is None:
        settings = get_settings()
    args = build_parser().parse_args(argv)

    path: Path = (args.file or settings.todo_file).expanduser()
    out: OutputAdapter = output if output is not None else TerminalOutput(color_mode=settings.color_mode)

    try:
        if args.edit:
            try:
                edit_mode(path, settings.editor, report=out.error)
            except LoadError:
                # already reported inside the edit loop
                return 1
            return 0

        task_list = load_task_list(path)

        if args.probability:
            lines = select_greeting(task_list, rng if rng is not None else system_random())
            out.emit(lines)
            return 0

        by_deadline = settings.sort_by_deadline if args.by_deadline is None else args.by_deadline
        now = (clock if clock is not None else SystemClock()).now()
        lines = render_full_listing(task_list, now, by_deadline=by_deadline)
        out.emit(lines, with_headers=settings.show_headers)
        return 0
    except TodoError as e:
        logger.debug("Command failed", exc_info=True)
        out.error(str(e))
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    return run(argv, settings=settings)


if __name__ == "__main__":
    sys.exit(main())
