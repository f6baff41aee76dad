"""
views.py - Screen assembly
Single responsibility: stack header, notice, body and footer into one frame.
"""
from todo_tui.ui.components.footer import render_footer
from todo_tui.ui.components.header import render_header
from todo_tui.ui.components.message import render_message


def build_view(state, title: str, body: str, bindings: list[tuple[str, str]], subtitle: str | None = None) -> str:
    parts = [render_header(title, subtitle)]
    notice = render_message(state.message, state.message_type)
    parts.append(notice)
    parts.append(body)
    parts.append("")
    parts.append(render_footer(bindings))
    return "\n".join(parts)
