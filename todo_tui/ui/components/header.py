"""
header.py - Title/subtitle header fragment
"""
from rich.markup import escape

from todo_tui.ui.components.panel import render_panel


def render_header(title: str, subtitle: str | None = None) -> str:
    lines = [f"[bold white]{escape(title)}[/bold white]"]
    if subtitle:
        lines.append(f"[dim]{escape(subtitle)}[/dim]")
    return render_panel(lines)
