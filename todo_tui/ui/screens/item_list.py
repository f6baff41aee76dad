"""
item_list.py - Item list (home screen)
Single responsibility: browse the filtered items and launch every item action.
"""
import logging
import sqlite3

from todo_tui.domain.errors import StoreError
from todo_tui.services import filter_service
from todo_tui.terminal.keys import Key
from todo_tui.ui.components.panel import render_panel
from todo_tui.ui.components.table import render_item_table
from todo_tui.ui.helpers import handle_list_navigation, is_quit
from todo_tui.ui.screens import delete_confirm, item_form
from todo_tui.ui.views import build_view
from todo_tui.ui_state import AppState, Screen

logger = logging.getLogger(__name__)

BINDINGS = [
    ("j/k", "Move"),
    ("Enter", "View"),
    ("a", "Add"),
    ("e", "Edit"),
    ("c", "Complete"),
    ("d", "Delete"),
    ("f", "Filter"),
    ("?", "Help"),
    ("q", "Quit"),
]

HELP_LINES = [
    "[bold cyan]j / ↓[/bold cyan]   next item          [bold cyan]k / ↑[/bold cyan]   previous item",
    "[bold cyan]Enter[/bold cyan]   item details       [bold cyan]a[/bold cyan]       add item",
    "[bold cyan]e[/bold cyan]       edit item          [bold cyan]c[/bold cyan]       toggle completed",
    "[bold cyan]d[/bold cyan]       delete item        [bold cyan]f[/bold cyan]       filter menu",
    "[bold cyan]g[/bold cyan]       groups             [bold cyan]t[/bold cyan]       tags",
    "[bold cyan]?[/bold cyan]       toggle this help   [bold cyan]q[/bold cyan]       quit",
]


def subtitle(state: AppState) -> str:
    parts = filter_service.describe(state.current_filter(), state.group_names(), state.tag_names())
    count = len(state.items)
    noun = "item" if count == 1 else "items"
    text = f"[{count} {noun}]"
    if parts:
        text = f"[Filter: {', '.join(parts)}] " + text
    return text


def toggle_completion(state: AppState, item) -> None:
    try:
        new_status = state.store.toggle_item_completion(item.id)
    except (StoreError, sqlite3.Error) as e:
        logger.error("Failed to toggle item %s: %s", item.id, e)
        state.set_message(f"Error updating item: {e}", "error")
        return
    if new_status == "completed":
        state.set_message(f'Item "{item.title}" completed', "success")
    else:
        state.set_message(f'Item "{item.title}" reopened', "info")
    state.refresh_data()
    if state.current_item is not None and state.current_item.id == item.id:
        state.current_item = state.store.get_item(item.id)


def render(state: AppState) -> str:
    body = render_item_table(state.items, state.selected_index, state.scroll_offset, state.visible_rows)
    if state.get_screen_state(Screen.ITEM_LIST, {}).get("show_help"):
        body += "\n\n" + render_panel(HELP_LINES, title="[bold]Keys[/bold]")
    return build_view(state, "Todo List", body, BINDINGS, subtitle=subtitle(state))


def handle(state: AppState, key) -> None:
    if handle_list_navigation(state, key):
        return
    if is_quit(key):
        state.quit()
        return
    if key == "a":
        item_form.open_add(state)
        return
    if key == "f":
        state.go_to(Screen.FILTER_MENU)
        return
    if key == "g":
        state.go_to(Screen.GROUP_LIST)
        return
    if key == "t":
        state.go_to(Screen.TAG_LIST)
        return
    if key == "?":
        view = state.get_screen_state(Screen.ITEM_LIST, {})
        state.set_screen_state(Screen.ITEM_LIST, {**view, "show_help": not view.get("show_help")})
        return

    item = state.selected(state.items)
    if item is None:
        if key in ("e", "c", "d") or key is Key.ENTER:
            state.set_message("No item selected", "warning")
        return
    if key is Key.ENTER:
        state.current_item = item
        state.go_to(Screen.ITEM_DETAIL)
    elif key == "e":
        item_form.open_edit(state, item)
    elif key == "c":
        toggle_completion(state, item)
    elif key == "d":
        delete_confirm.request_delete(state, "item", item.id, item.title)
