"""
panel.py - Boxed panel fragment
"""
from todo_tui.config import PANEL_WIDTH
from todo_tui.utils.text import pad_visible, visible_width


def render_panel(lines: list[str], title: str | None = None, width: int = PANEL_WIDTH, border_style: str = "cyan") -> str:
    """Draw ``lines`` (markup) inside a rounded box ``width`` cells wide."""
    inner = width - 4
    top_label = f" {title} " if title else ""
    top_fill = "─" * max(width - 2 - visible_width(top_label), 0)
    out = [f"[{border_style}]╭[/{border_style}]{top_label}[{border_style}]{top_fill}╮[/{border_style}]"]
    for line in lines or [""]:
        out.append(
            f"[{border_style}]│[/{border_style}] {pad_visible(line, inner)} [{border_style}]│[/{border_style}]"
        )
    out.append(f"[{border_style}]╰{'─' * (width - 2)}╯[/{border_style}]")
    return "\n".join(out)
