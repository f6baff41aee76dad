"""
footer.py - Keybinding footer fragment
"""
from rich.markup import escape


def render_footer(bindings: list[tuple[str, str]]) -> str:
    """One line of ``key action`` pairs separated by bars."""
    parts = [f"[bold cyan]{escape(key)}[/] [dim]{escape(action)}[/]" for key, action in bindings]
    return " " + " │ ".join(parts) + " "
