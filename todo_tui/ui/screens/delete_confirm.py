"""
delete_confirm.py - Delete workflow
Single responsibility: two-step confirm/cancel deletion for items, groups and tags.
"""
import logging
import sqlite3

from todo_tui.domain.errors import StoreError
from todo_tui.terminal.keys import Key
from todo_tui.ui.components.dialog import render_delete_dialog
from todo_tui.ui.components.panel import render_panel
from todo_tui.ui.views import build_view
from todo_tui.ui_state import AppState, Screen

logger = logging.getLogger(__name__)

_DELETERS = {
    "item": "delete_item",
    "group": "delete_group",
    "tag": "delete_tag",
}

_HOME_SCREENS = {
    "item": Screen.ITEM_LIST,
    "group": Screen.GROUP_LIST,
    "tag": Screen.TAG_LIST,
}

BINDINGS = [("y", "Confirm"), ("n/Esc", "Cancel")]


def request_delete(state: AppState, kind: str, entity_id: int, name: str) -> None:
    """Record the pending deletion and open the confirmation screen."""
    if kind not in _DELETERS:
        raise ValueError(f"Unsupported delete type: {kind}")
    state.set_delete_intent(kind, entity_id, name)
    state.go_to(Screen.DELETE_CONFIRM)


def _forget_deleted(state: AppState, kind: str, entity_id: int) -> None:
    if kind == "item":
        if state.current_item is not None and state.current_item.id == entity_id:
            state.current_item = None
    elif kind == "group":
        if state.current_group is not None and state.current_group.id == entity_id:
            state.current_group = None
        if state.filter_group_id == entity_id:
            state.filter_group_id = None
    elif kind == "tag":
        if state.current_tag is not None and state.current_tag.id == entity_id:
            state.current_tag = None
        if state.filter_tag_id == entity_id:
            state.filter_tag_id = None


def confirm(state: AppState) -> None:
    if not state.has_delete_intent():
        state.go_back()
        return

    kind, entity_id, name = state.delete_type, state.delete_id, state.delete_name
    try:
        deleted = getattr(state.store, _DELETERS[kind])(entity_id)
    except (StoreError, sqlite3.Error) as e:
        logger.error("Failed to delete %s %s: %s", kind, entity_id, e)
        state.set_message(f"Error deleting {kind}: {e}", "error")
        state.clear_delete_intent()
        state.go_back()
        return

    _forget_deleted(state, kind, entity_id)
    state.clear_delete_intent()
    if deleted:
        logger.info("Deleted %s %s", kind, entity_id)
        state.set_message(f'{kind.capitalize()} "{name}" deleted', "success")
    else:
        state.set_message(f'{kind.capitalize()} "{name}" no longer exists', "warning")
    state.jump_to(_HOME_SCREENS[kind])
    state.refresh_data()


def cancel(state: AppState) -> None:
    state.clear_delete_intent()
    state.go_back()


def render(state: AppState) -> str:
    if not state.has_delete_intent():
        body = render_panel(["[dim]Nothing to delete.[/dim]"], width=60, border_style="yellow")
    else:
        body = render_delete_dialog(state.delete_type, state.delete_name)
    return build_view(state, "Delete", body, BINDINGS)


def handle(state: AppState, key) -> None:
    if key is Key.CTRL_C:
        state.quit()
    elif key in ("y", "Y") or key is Key.ENTER:
        confirm(state)
    elif key in ("n", "N", "b") or key is Key.ESCAPE:
        cancel(state)
