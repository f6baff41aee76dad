"""
item_detail.py - Item detail screen
"""
import textwrap

from rich.markup import escape

from todo_tui.config import PANEL_WIDTH
from todo_tui.ui.components.panel import render_panel
from todo_tui.ui.helpers import format_datetime, is_back, is_quit, or_dash, priority_markup, status_markup
from todo_tui.ui.screens import delete_confirm, item_form
from todo_tui.ui.screens.item_list import toggle_completion
from todo_tui.ui.views import build_view
from todo_tui.ui_state import AppState

BINDINGS = [("e", "Edit"), ("c", "Complete"), ("d", "Delete"), ("b", "Back"), ("q", "Quit")]


def _row(label: str, value: str) -> str:
    return f"[bold]{label:<12}[/bold] {value}"


def render(state: AppState) -> str:
    item = state.current_item
    if item is None:
        body = render_panel(["[dim]No item selected.[/dim]"])
        return build_view(state, "Item Details", body, [("b", "Back")])

    group = state.group_names().get(item.group_id) if item.group_id is not None else None
    tag = state.tag_names().get(item.tag_id) if item.tag_id is not None else None
    lines = [
        _row("Title", escape(item.title)),
        _row("Status", status_markup(item.status)),
        _row("Priority", priority_markup(item.priority)),
        _row("Group", or_dash(group)),
        _row("Tag", or_dash(tag)),
        _row("Start Date", or_dash(item.start_date)),
        _row("Due Date", or_dash(item.due_date)),
    ]
    if item.completed_at:
        lines.append(_row("Completed", escape(format_datetime(item.completed_at))))
    lines.extend([
        _row("Created", escape(format_datetime(item.created_at))),
        _row("Updated", escape(format_datetime(item.updated_at))),
        "",
        "[bold]Description[/bold]",
    ])
    if item.description:
        for paragraph in item.description.splitlines():
            lines.extend(escape(line) for line in textwrap.wrap(paragraph, PANEL_WIDTH - 4) or [""])
    else:
        lines.append("[dim]No description[/dim]")
    body = render_panel(lines, title=f"[bold]#{item.id}[/bold]")
    return build_view(state, "Item Details", body, BINDINGS)


def handle(state: AppState, key) -> None:
    if is_back(key):
        state.go_back()
        return
    if is_quit(key):
        state.quit()
        return
    item = state.current_item
    if item is None:
        return
    if key == "e":
        item_form.open_edit(state, item)
    elif key == "c":
        toggle_completion(state, item)
    elif key == "d":
        delete_confirm.request_delete(state, "item", item.id, item.title)
