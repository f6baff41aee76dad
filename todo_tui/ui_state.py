"""
ui_state.py - UI state container
Single responsibility: the per-session state record and its navigation primitives.
"""

import enum
from dataclasses import dataclass
from typing import Any

from todo_tui.config import LIST_VISIBLE_ROWS
from todo_tui.domain.filters import FILTER_MENU_ENTRIES, ItemFilter
from todo_tui.domain.models import ITEM_STATUSES
from todo_tui.services import filter_service


class Screen(enum.Enum):
    ITEM_LIST = "item_list"
    ITEM_DETAIL = "item_detail"
    ITEM_ADD = "item_add"
    ITEM_EDIT = "item_edit"
    FILTER_MENU = "filter_menu"
    FILTER_STATUS = "filter_status"
    FILTER_GROUP = "filter_group"
    FILTER_TAG = "filter_tag"
    GROUP_LIST = "group_list"
    GROUP_ADD = "group_add"
    GROUP_EDIT = "group_edit"
    TAG_LIST = "tag_list"
    TAG_ADD = "tag_add"
    TAG_EDIT = "tag_edit"
    DELETE_CONFIRM = "delete_confirm"


@dataclass
class NavFrame:
    screen: Screen
    selected_index: int
    scroll_offset: int


class AppState:
    def __init__(self, store, visible_rows: int = LIST_VISIBLE_ROWS):
        self.store = store
        self.visible_rows = visible_rows

        self.current_screen: Screen = Screen.ITEM_LIST
        self.nav_stack: list[NavFrame] = []
        self.selected_index: int = 1  # 1-based
        self.scroll_offset: int = 0

        self.items: list = []
        self.groups: list = []
        self.tags: list = []
        self.group_counts: dict[int, int] = {}
        self.tag_counts: dict[int, int] = {}

        self.current_item = None
        self.current_group = None
        self.current_tag = None

        self.filter_status: str | None = None
        self.filter_group_id: int | None = None
        self.filter_tag_id: int | None = None

        self.form_fields: dict[str, str] = {}
        self.form_field_index: int = 1  # 1-based, field_count + 1 is the save action
        self.form_errors: dict[str, str] = {}

        self.delete_type: str | None = None  # "item" | "group" | "tag"
        self.delete_id: int | None = None
        self.delete_name: str | None = None

        self.message: str | None = None
        self.message_type: str = "info"  # "success" | "error" | "info" | "warning"

        self.screen_state: dict[Screen, Any] = {}
        self.running: bool = True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def previous_screen(self) -> Screen | None:
        return self.nav_stack[-1].screen if self.nav_stack else None

    def go_to(self, screen: Screen) -> None:
        self.nav_stack.append(NavFrame(self.current_screen, self.selected_index, self.scroll_offset))
        self.current_screen = screen
        self.selected_index = 1
        self.scroll_offset = 0

    def go_back(self) -> None:
        if not self.nav_stack:
            return
        frame = self.nav_stack.pop()
        self.current_screen = frame.screen
        self.selected_index = frame.selected_index
        self.scroll_offset = frame.scroll_offset
        self.clamp_selection()

    def jump_to(self, screen: Screen) -> None:
        """Enter ``screen`` as a fresh start: history is dropped, cursor goes to the top."""
        self.nav_stack.clear()
        self.current_screen = screen
        self.selected_index = 1
        self.scroll_offset = 0

    def quit(self) -> None:
        self.running = False

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def current_filter(self) -> ItemFilter:
        return filter_service.build_filter(self.filter_status, self.filter_group_id, self.filter_tag_id)

    def refresh_data(self) -> None:
        self.items = self.store.list_items(self.current_filter())
        self.groups = self.store.list_groups()
        self.tags = self.store.list_tags()
        self.group_counts = self.store.count_items_by_group()
        self.tag_counts = self.store.count_items_by_tag()
        self.clamp_selection()

    def clear_all_filters(self) -> None:
        self.filter_status = None
        self.filter_group_id = None
        self.filter_tag_id = None

    def group_names(self) -> dict[int, str]:
        return {g.id: g.name for g in self.groups}

    def tag_names(self) -> dict[int, str]:
        return {t.id: t.name for t in self.tags}

    # ------------------------------------------------------------------
    # Selection / viewport
    # ------------------------------------------------------------------

    def list_length(self) -> int:
        """Length of the list shown on the current screen, 0 for non-list screens."""
        screen = self.current_screen
        if screen == Screen.ITEM_LIST:
            return len(self.items)
        if screen == Screen.GROUP_LIST:
            return len(self.groups)
        if screen == Screen.TAG_LIST:
            return len(self.tags)
        if screen == Screen.FILTER_MENU:
            return len(FILTER_MENU_ENTRIES)
        if screen == Screen.FILTER_STATUS:
            return 1 + len(ITEM_STATUSES)
        if screen == Screen.FILTER_GROUP:
            return 1 + len(self.groups)
        if screen == Screen.FILTER_TAG:
            return 1 + len(self.tags)
        return 0

    def clamp_selection(self) -> None:
        n = self.list_length()
        if n == 0:
            self.selected_index = 1
            self.scroll_offset = 0
            return
        self.selected_index = min(max(self.selected_index, 1), n)
        self.ensure_visible()

    def move_selection(self, delta: int) -> None:
        n = self.list_length()
        if n == 0:
            return
        self.selected_index = min(max(self.selected_index + delta, 1), n)
        self.ensure_visible()

    def ensure_visible(self) -> None:
        if self.selected_index - 1 < self.scroll_offset:
            self.scroll_offset = self.selected_index - 1
        elif self.selected_index > self.scroll_offset + self.visible_rows:
            self.scroll_offset = self.selected_index - self.visible_rows
        self.scroll_offset = max(self.scroll_offset, 0)

    def selected(self, collection: list):
        if 1 <= self.selected_index <= len(collection):
            return collection[self.selected_index - 1]
        return None

    # ------------------------------------------------------------------
    # One-shot notice
    # ------------------------------------------------------------------

    def set_message(self, message: str, message_type: str = "info") -> None:
        self.message = message
        self.message_type = message_type

    def clear_message(self) -> None:
        self.message = None
        self.message_type = "info"

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def reset_form(self, fields: dict[str, str] | None = None) -> None:
        self.form_fields = dict(fields or {})
        self.form_field_index = 1
        self.form_errors = {}

    # ------------------------------------------------------------------
    # Delete intent
    # ------------------------------------------------------------------

    def set_delete_intent(self, delete_type: str, delete_id: int, delete_name: str) -> None:
        self.delete_type = delete_type
        self.delete_id = delete_id
        self.delete_name = delete_name

    def clear_delete_intent(self) -> None:
        self.delete_type = None
        self.delete_id = None
        self.delete_name = None

    def has_delete_intent(self) -> bool:
        return self.delete_type is not None

    # ------------------------------------------------------------------
    # Screen-private state
    # ------------------------------------------------------------------

    def get_screen_state(self, screen: Screen, default=None):
        return self.screen_state.get(screen, default)

    def set_screen_state(self, screen: Screen, value) -> None:
        self.screen_state[screen] = value

    def clear_screen_state(self, screen: Screen) -> None:
        self.screen_state.pop(screen, None)
