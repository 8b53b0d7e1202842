# src/todo_cras/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The renderers depend on Protocols instead of the wall clock, the global RNG
or the terminal. Tests substitute fixed clocks and scripted random sources.
"""

import random
from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from ..tasks.task_models import DisplayLine


class Clock(Protocol):
    """Source of "now" for deadline checks (naive local time)."""
    def now(self) -> datetime: ...


class RandomSource(Protocol):
    """Uniform floats in [0, 1). random.Random and SystemRandom both fit."""
    def random(self) -> float: ...


class OutputAdapter(Protocol):
    """
    Connector-side port: turns display lines into something visible.

    The core picks text/color/backlog; the adapter owns escape sequences,
    headers and layout.
    """

    def emit(self, lines: Sequence[DisplayLine], *, with_headers: bool = False) -> None: ...
    def error(self, message: str) -> None: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()


def system_random() -> RandomSource:
    # OS entropy: greetings in back-to-back shells must not correlate.
    return random.SystemRandom()
