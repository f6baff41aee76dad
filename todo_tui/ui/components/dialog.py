"""
dialog.py - Confirmation dialog fragment
"""
from rich.markup import escape

from todo_tui.ui.components.panel import render_panel


def render_delete_dialog(kind: str, name: str) -> str:
    lines = [
        "",
        f"Are you sure you want to delete this {escape(kind)}?",
        "",
        f'  [bold]"{escape(name)}"[/bold]',
        "",
        "[dim]This action cannot be undone.[/dim]",
        "",
        "[bold green]y[/bold green] - Yes, delete    [bold red]n[/bold red] - No, cancel",
    ]
    return render_panel(lines, title="[bold yellow]⚠ Delete Confirmation[/bold yellow]", width=60, border_style="yellow")
