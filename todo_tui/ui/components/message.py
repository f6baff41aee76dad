"""
message.py - One-shot notice fragment
"""
from rich.markup import escape

from todo_tui.config import STYLE_ERROR, STYLE_INFO, STYLE_SUCCESS, STYLE_WARNING

_MESSAGE_STYLES = {
    "success": ("✓", STYLE_SUCCESS),
    "error": ("✗", STYLE_ERROR),
    "warning": ("⚠", STYLE_WARNING),
    "info": ("ℹ", STYLE_INFO),
}


def render_message(message: str | None, message_type: str = "info") -> str:
    if not message:
        return ""
    icon, style = _MESSAGE_STYLES.get(message_type, _MESSAGE_STYLES["info"])
    return f"[{style}]{icon} {escape(message)}[/{style}]"
