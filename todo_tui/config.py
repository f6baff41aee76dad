"""
config.py - Path resolution and app constants
Todo TUI v1.0
"""

import os

# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def get_data_dir() -> str:
    """
    Return the directory holding the database and the log file.
    - TODO_TUI_HOME set: that directory
    - otherwise        : ~/.todo-list
    """
    home = os.environ.get("TODO_TUI_HOME")
    if home:
        return os.path.abspath(os.path.expanduser(home))
    return os.path.join(os.path.expanduser("~"), ".todo-list")


DATA_DIR = get_data_dir()

# TODO_TUI_DB wins over the data directory; --db wins over both
DB_PATH = os.environ.get("TODO_TUI_DB") or os.path.join(DATA_DIR, "todos.db")
LOG_PATH = os.path.join(DATA_DIR, "todo-tui.log")

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "Todo List Manager"
APP_VERSION = "1.0.0"

LIST_VISIBLE_ROWS = 15  # rows shown before the list viewport scrolls
ESC_SEQUENCE_TIMEOUT = 0.05  # seconds to wait for the rest of an escape sequence
PANEL_WIDTH = 78
DB_BUSY_TIMEOUT_MS = 5000

# ---------------------------------------------------------------------------
# Palette (rich style names)
# ---------------------------------------------------------------------------

STYLE_ACCENT = "bold cyan"
STYLE_MUTED = "dim"
STYLE_TITLE = "bold white"
STYLE_SELECTED = "reverse"
STYLE_SUCCESS = "green"
STYLE_ERROR = "red"
STYLE_WARNING = "yellow"
STYLE_INFO = "blue"

STATUS_STYLES = {
    "pending": "yellow",
    "in_progress": "cyan",
    "completed": "green",
    "blocked": "red",
}

PRIORITY_STYLES = {
    1: "bold red",
    2: "yellow",
    3: "dim",
}
