"""
helpers.py - UI helper functions
Single responsibility: small formatting and key helpers used across screens.
"""
from datetime import datetime

from rich.markup import escape

from todo_tui.config import PRIORITY_STYLES, STATUS_STYLES
from todo_tui.domain.models import PRIORITY_LABELS
from todo_tui.terminal.keys import Key


def format_datetime(iso_str: str | None) -> str:
    """ISO 8601 string to "YYYY-MM-DD HH:MM"; fallback to raw on error."""
    try:
        dt = datetime.fromisoformat(iso_str)
        return dt.strftime("%Y-%m-%d %H:%M")
    except (ValueError, TypeError):
        return iso_str or ""


def status_markup(status: str) -> str:
    style = STATUS_STYLES.get(status, "white")
    return f"[{style}]{escape(status)}[/{style}]"


def priority_label(priority: int) -> str:
    return PRIORITY_LABELS.get(priority, str(priority))


def priority_markup(priority: int) -> str:
    style = PRIORITY_STYLES.get(priority, "white")
    return f"[{style}]{priority_label(priority)}[/{style}]"


def color_swatch(color: str | None) -> str:
    if not color:
        return "[dim]-[/dim]"
    return f"[{color}]■[/{color}] {color}"


def or_dash(value: str | None) -> str:
    return escape(value) if value else "[dim]-[/dim]"


# ---------------------------------------------------------------------------
# Key predicates shared by list screens
# ---------------------------------------------------------------------------


def is_up(key) -> bool:
    return key is Key.UP or key == "k"


def is_down(key) -> bool:
    return key is Key.DOWN or key == "j"


def is_back(key) -> bool:
    return key is Key.ESCAPE or key == "b"


def is_quit(key) -> bool:
    return key is Key.CTRL_C or key == "q"


def handle_list_navigation(state, key) -> bool:
    """Move the list cursor for up/down keys; True when the key was consumed."""
    if is_up(key):
        state.move_selection(-1)
        return True
    if is_down(key):
        state.move_selection(1)
        return True
    return False
