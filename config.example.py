# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Task file
    "TODO_FILE": "Path to the task file (default: ~/todo.txt).",
    "TODO_CRAS_FILE": "Same as TODO_FILE; takes precedence when both are set.",
    # Logging
    "TODO_CRAS_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_CRAS_LOG_FILE": "Optional log file; enables full DEBUG logs there.",
    # Edit mode
    "TODO_CRAS_EDITOR": "Editor command for -e (falls back to VISUAL, EDITOR, then vi).",
    # Output
    "TODO_CRAS_COLOR": "auto | always | never (default: auto). NO_COLOR forces never.",
    "TODO_CRAS_SHOW_HEADERS": "Group the full listing under category names (true/false, default: true).",
    "TODO_CRAS_SORT_BY_DEADLINE": "Order tasks by deadline in the full listing (true/false, default: false).",
}
