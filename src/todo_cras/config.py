# src/todo_cras/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- TODO_FILE keeps working unprefixed; everything else uses the TODO_CRAS_ prefix.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO_CRAS"

COLOR_MODES = ("auto", "always", "never")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _color_mode() -> str:
    # https://no-color.org: any non-empty value disables color
    if os.getenv("NO_COLOR"):
        return "never"
    mode = _env(_k("COLOR"), "auto").strip().lower()
    return mode if mode in COLOR_MODES else "auto"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Task file ----
    todo_file: Path

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    # ---- Edit mode ----
    editor: str

    # ---- Output ----
    color_mode: str
    show_headers: bool
    sort_by_deadline: bool

    @staticmethod
    def from_env() -> "Settings":
        raw_file = _first_env(_k("FILE"), "TODO_FILE")
        todo_file = Path(raw_file).expanduser() if raw_file else Path.home() / "todo.txt"

        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_file = _env_path(_k("LOG_FILE"), None)

        editor = _first_env(_k("EDITOR"), "VISUAL", "EDITOR", default="vi") or "vi"

        return Settings(
            todo_file=todo_file,
            log_level=log_level,
            log_file=log_file,
            editor=editor,
            color_mode=_color_mode(),
            show_headers=_env_bool(_k("SHOW_HEADERS"), True),
            sort_by_deadline=_env_bool(_k("SORT_BY_DEADLINE"), False),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
