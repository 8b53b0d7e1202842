# src/todo_cras/connectors/terminal_output.py

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from colorama import Fore, Style, just_fix_windows_console

from ..core.listing import BACKLOG_MARKER
from ..tasks.task_models import DEADLINE_FORMAT, Color, DisplayLine

logger = logging.getLogger(__name__)

FORE_BY_COLOR: dict[Color, str] = {
    Color.BLACK: Fore.BLACK,
    Color.RED: Fore.RED,
    Color.GREEN: Fore.GREEN,
    Color.YELLOW: Fore.YELLOW,
    Color.BLUE: Fore.BLUE,
    Color.MAGENTA: Fore.MAGENTA,
    Color.CYAN: Fore.CYAN,
    Color.WHITE: Fore.WHITE,
}

INDENT = "    "


def color_enabled(mode: str, stream: TextIO) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


class TerminalOutput:
    """
    OutputAdapter that writes DisplayLines to a text stream with colorama.

    With headers on, lines are grouped under their category name and dated
    tasks show their deadline.
    """

    def __init__(self, stream: TextIO | None = None, *, color_mode: str = "auto") -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.color_mode = color_mode
        self.use_color = color_enabled(color_mode, self.stream)
        if self.use_color:
            just_fix_windows_console()

    def _paint(self, text: str, *styles: str) -> str:
        if not self.use_color or not any(styles):
            return text
        return "".join(styles) + text + Style.RESET_ALL

    def _format_body(self, line: DisplayLine) -> str:
        fore = FORE_BY_COLOR.get(line.color, "") if line.color else ""
        if line.backlog and line.text.endswith(BACKLOG_MARKER):
            body = line.text[: -len(BACKLOG_MARKER)]
            return self._paint(body, fore) + self._paint(BACKLOG_MARKER, Fore.RED, Style.BRIGHT)
        return self._paint(line.text, fore)

    def format_lines(self, lines: Sequence[DisplayLine], *, with_headers: bool = False) -> list[str]:
        out: list[str] = []
        current: str | None = None
        for line in lines:
            if not with_headers:
                out.append(self._format_body(line))
                continue

            if line.category != current:
                current = line.category
                fore = FORE_BY_COLOR.get(line.color, "") if line.color else ""
                out.append(self._paint(current or "", fore, Style.BRIGHT))

            text = INDENT + self._format_body(line)
            if line.deadline is not None:
                text += self._paint(f" (due {line.deadline.strftime(DEADLINE_FORMAT)})", Style.DIM)
            out.append(text)
        return out

    def emit(self, lines: Sequence[DisplayLine], *, with_headers: bool = False) -> None:
        for text in self.format_lines(lines, with_headers=with_headers):
            self.stream.write(text + "\n")
        self.stream.flush()
        logger.debug("Emitted %d lines (headers=%s color=%s)", len(lines), with_headers, self.use_color)

    def error(self, message: str, stream: TextIO | None = None) -> None:
        target = stream if stream is not None else sys.stderr
        if color_enabled(self.color_mode, target):
            message = Fore.RED + message + Style.RESET_ALL
        target.write(message + "\n")
        target.flush()
