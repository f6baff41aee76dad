"""
filter_menu.py - Filter composer screens
Single responsibility: the filter menu and its status/group/tag sub-menus.

Each predicate is edited on its own sub-menu; picking an entry applies it
and jumps straight back to the item list.
"""
from rich.markup import escape

from todo_tui.domain.filters import FILTER_MENU_ENTRIES
from todo_tui.domain.models import ITEM_STATUSES
from todo_tui.terminal.keys import Key, digit_value
from todo_tui.ui.helpers import handle_list_navigation, is_back, is_quit, status_markup
from todo_tui.ui.views import build_view
from todo_tui.ui_state import AppState, Screen

MENU_BINDINGS = [("j/k", "Move"), ("Enter", "Select"), ("1-4", "Pick"), ("b", "Back"), ("q", "Quit")]
OPTION_BINDINGS = [("j/k", "Move"), ("Enter", "Apply"), ("b", "Back"), ("q", "Quit")]

_SUBMENUS = (Screen.FILTER_STATUS, Screen.FILTER_GROUP, Screen.FILTER_TAG)
CLEAR_ALL_INDEX = 4


def _option_line(label: str, selected: bool, current: bool) -> str:
    marker = "[bold cyan]►[/bold cyan]" if selected else " "
    check = " [green]✓[/green]" if current else ""
    text = f"[reverse]{label}[/reverse]" if selected else label
    return f"{marker} {text}{check}"


# ---------------------------------------------------------------------------
# Filter menu
# ---------------------------------------------------------------------------


def _current_value(state: AppState, index: int) -> str:
    if index == 1:
        return state.filter_status or "All"
    if index == 2:
        return state.group_names().get(state.filter_group_id, "All") if state.filter_group_id is not None else "All"
    if index == 3:
        return state.tag_names().get(state.filter_tag_id, "All") if state.filter_tag_id is not None else "All"
    return ""


def clear_all(state: AppState) -> None:
    state.clear_all_filters()
    state.jump_to(Screen.ITEM_LIST)
    state.refresh_data()
    state.set_message("All filters cleared", "info")


def _select_menu_entry(state: AppState, index: int) -> None:
    if index == CLEAR_ALL_INDEX:
        clear_all(state)
    elif 1 <= index <= len(_SUBMENUS):
        state.go_to(_SUBMENUS[index - 1])


def render_menu(state: AppState) -> str:
    lines = []
    for index, (label, description) in enumerate(FILTER_MENU_ENTRIES, start=1):
        current = _current_value(state, index)
        suffix = f" [cyan]({escape(current)})[/cyan]" if current else ""
        line = _option_line(f"{index}. {label}", state.selected_index == index, False)
        lines.append(f"{line}{suffix}")
        lines.append(f"     [dim]{description}[/dim]")
    return build_view(state, "Filter Items", "\n".join(lines), MENU_BINDINGS)


def handle_menu(state: AppState, key) -> None:
    if handle_list_navigation(state, key):
        return
    if is_back(key):
        state.go_back()
    elif is_quit(key):
        state.quit()
    elif key is Key.ENTER:
        _select_menu_entry(state, state.selected_index)
    elif digit_value(key) is not None:
        _select_menu_entry(state, digit_value(key))


# ---------------------------------------------------------------------------
# Sub-menus: entry 1 is always "All", which clears the predicate
# ---------------------------------------------------------------------------


def status_options(state: AppState) -> list[tuple[str | None, str]]:
    return [(None, "All")] + [(s, status_markup(s)) for s in ITEM_STATUSES]


def group_options(state: AppState) -> list[tuple[int | None, str]]:
    return [(None, "All")] + [(g.id, escape(g.name)) for g in state.groups]


def tag_options(state: AppState) -> list[tuple[int | None, str]]:
    return [(None, "All")] + [(t.id, escape(t.name)) for t in state.tags]


_SUBMENU_SPECS = {
    Screen.FILTER_STATUS: ("Filter by Status", status_options, "filter_status"),
    Screen.FILTER_GROUP: ("Filter by Group", group_options, "filter_group_id"),
    Screen.FILTER_TAG: ("Filter by Tag", tag_options, "filter_tag_id"),
}


def apply_option(state: AppState, attribute: str, value) -> None:
    """Set one predicate, keep the others, and show the results from the top."""
    setattr(state, attribute, value)
    state.jump_to(Screen.ITEM_LIST)
    state.refresh_data()
    state.set_message("Filter cleared" if value is None else "Filter applied", "info")


def render_options(state: AppState) -> str:
    title, options_for, attribute = _SUBMENU_SPECS[state.current_screen]
    active = getattr(state, attribute)
    lines = [
        _option_line(label, state.selected_index == index, value == active)
        for index, (value, label) in enumerate(options_for(state), start=1)
    ]
    return build_view(state, title, "\n".join(lines), OPTION_BINDINGS)


def handle_options(state: AppState, key) -> None:
    if handle_list_navigation(state, key):
        return
    if is_back(key):
        state.go_back()
    elif is_quit(key):
        state.quit()
    elif key is Key.ENTER:
        _title, options_for, attribute = _SUBMENU_SPECS[state.current_screen]
        options = options_for(state)
        if 1 <= state.selected_index <= len(options):
            apply_option(state, attribute, options[state.selected_index - 1][0])
