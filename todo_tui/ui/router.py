"""
router.py - Screen router
Single responsibility: map the current screen to its render and key handler.
"""
import logging
from dataclasses import dataclass
from typing import Callable

from rich.markup import escape

from todo_tui.ui.screens import (
    delete_confirm,
    filter_menu,
    group_form,
    group_list,
    item_detail,
    item_form,
    item_list,
    tag_form,
    tag_list,
)
from todo_tui.ui_state import AppState, Screen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    render: Callable[[AppState], str]
    handle: Callable[[AppState, object], None]


ROUTES: dict[Screen, Route] = {
    Screen.ITEM_LIST: Route(item_list.render, item_list.handle),
    Screen.ITEM_DETAIL: Route(item_detail.render, item_detail.handle),
    Screen.ITEM_ADD: Route(item_form.render, item_form.handle),
    Screen.ITEM_EDIT: Route(item_form.render, item_form.handle),
    Screen.FILTER_MENU: Route(filter_menu.render_menu, filter_menu.handle_menu),
    Screen.FILTER_STATUS: Route(filter_menu.render_options, filter_menu.handle_options),
    Screen.FILTER_GROUP: Route(filter_menu.render_options, filter_menu.handle_options),
    Screen.FILTER_TAG: Route(filter_menu.render_options, filter_menu.handle_options),
    Screen.GROUP_LIST: Route(group_list.render, group_list.handle),
    Screen.GROUP_ADD: Route(group_form.render, group_form.handle),
    Screen.GROUP_EDIT: Route(group_form.render, group_form.handle),
    Screen.TAG_LIST: Route(tag_list.render, tag_list.handle),
    Screen.TAG_ADD: Route(tag_form.render, tag_form.handle),
    Screen.TAG_EDIT: Route(tag_form.render, tag_form.handle),
    Screen.DELETE_CONFIRM: Route(delete_confirm.render, delete_confirm.handle),
}

_unrouted = [screen.name for screen in Screen if screen not in ROUTES]
if _unrouted:
    raise RuntimeError(f"Screens without a route: {', '.join(_unrouted)}")


def render(state: AppState, routes: dict[Screen, Route] = ROUTES) -> str:
    route = routes.get(state.current_screen)
    if route is None:
        logger.error("No route for screen %r", state.current_screen)
        return f"[bold red]Unknown screen: {escape(str(state.current_screen))}[/bold red]"
    return route.render(state)


def dispatch(state: AppState, key, routes: dict[Screen, Route] = ROUTES) -> None:
    route = routes.get(state.current_screen)
    if route is None:
        logger.error("Key %r dropped: no route for screen %r", key, state.current_screen)
        return
    route.handle(state, key)
