"""
group_list.py - Group management screen
Single responsibility: list groups with item counts and launch group actions.
"""
from todo_tui.terminal.keys import Key
from todo_tui.ui.components.table import render_group_table
from todo_tui.ui.helpers import handle_list_navigation, is_back, is_quit
from todo_tui.ui.screens import delete_confirm, group_form
from todo_tui.ui.views import build_view
from todo_tui.ui_state import AppState, Screen

BINDINGS = [
    ("j/k", "Move"),
    ("Enter", "Show items"),
    ("a", "Add"),
    ("e", "Edit"),
    ("d", "Delete"),
    ("b", "Back"),
    ("q", "Quit"),
]


def show_items(state: AppState, group) -> None:
    """Filter the item list down to ``group`` and jump there."""
    state.current_group = group
    state.filter_group_id = group.id
    state.jump_to(Screen.ITEM_LIST)
    state.refresh_data()
    state.set_message(f'Showing items in group "{group.name}"', "info")


def render(state: AppState) -> str:
    body = render_group_table(
        state.groups, state.group_counts, state.selected_index, state.scroll_offset, state.visible_rows
    )
    count = len(state.groups)
    return build_view(state, "Groups", body, BINDINGS, subtitle=f"[{count} group{'' if count == 1 else 's'}]")


def handle(state: AppState, key) -> None:
    if handle_list_navigation(state, key):
        return
    if is_back(key):
        state.go_back()
        return
    if is_quit(key):
        state.quit()
        return
    if key == "a":
        group_form.open_add(state)
        return

    group = state.selected(state.groups)
    if group is None:
        return
    if key is Key.ENTER:
        show_items(state, group)
    elif key == "e":
        group_form.open_edit(state, group)
    elif key == "d":
        delete_confirm.request_delete(state, "group", group.id, group.name)
