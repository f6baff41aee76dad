"""
tag_list.py - Tag management screen
"""
from todo_tui.terminal.keys import Key
from todo_tui.ui.components.table import render_tag_table
from todo_tui.ui.helpers import handle_list_navigation, is_back, is_quit
from todo_tui.ui.screens import delete_confirm, tag_form
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


def show_items(state: AppState, tag) -> None:
    state.current_tag = tag
    state.filter_tag_id = tag.id
    state.jump_to(Screen.ITEM_LIST)
    state.refresh_data()
    state.set_message(f'Showing items tagged "{tag.name}"', "info")


def render(state: AppState) -> str:
    body = render_tag_table(state.tags, state.tag_counts, state.selected_index, state.scroll_offset, state.visible_rows)
    count = len(state.tags)
    return build_view(state, "Tags", body, BINDINGS, subtitle=f"[{count} tag{'' if count == 1 else 's'}]")


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
        tag_form.open_add(state)
        return

    tag = state.selected(state.tags)
    if tag is None:
        return
    if key is Key.ENTER:
        show_items(state, tag)
    elif key == "e":
        tag_form.open_edit(state, tag)
    elif key == "d":
        delete_confirm.request_delete(state, "tag", tag.id, tag.name)
