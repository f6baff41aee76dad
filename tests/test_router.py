import pytest
from rich.text import Text

from todo_tui.ui import router
from todo_tui.ui.screens import group_form, item_form, tag_form
from todo_tui.ui_state import Screen


@pytest.fixture
def populated(state, store):
    group_id = store.create_group("Home [main]", "Rooms", "#FF6B6B")
    tag_id = store.create_tag("Urgent", "#E74C3C")
    item_id = store.create_item(
        "Fix [bold]sink",
        description="Long text " * 20,
        status="blocked",
        priority=1,
        group_id=group_id,
        tag_id=tag_id,
        due_date="2024-06-01",
    )
    for n in range(20):
        store.create_item(f"Filler {n}")
    state.refresh_data()
    state.current_item = store.get_item(item_id)
    state.current_group = store.get_group(group_id)
    state.current_tag = store.get_tag(tag_id)
    return state


def test_every_screen_has_a_route():
    assert set(router.ROUTES) == set(Screen)


@pytest.mark.parametrize("screen", list(Screen))
def test_every_screen_renders_valid_markup(populated, screen):
    if screen in (Screen.ITEM_ADD, Screen.ITEM_EDIT):
        item_form.open_edit(populated, populated.current_item)
    elif screen in (Screen.GROUP_ADD, Screen.GROUP_EDIT):
        group_form.open_edit(populated, populated.current_group)
    elif screen in (Screen.TAG_ADD, Screen.TAG_EDIT):
        tag_form.open_edit(populated, populated.current_tag)
    elif screen == Screen.DELETE_CONFIRM:
        populated.set_delete_intent("item", 1, "Fix [bold]sink")
    populated.current_screen = screen
    populated.set_message("Saved [ok]", "success")

    output = router.render(populated)
    assert isinstance(output, str)
    plain = Text.from_markup(output).plain
    assert plain.strip()


def test_item_list_shows_scroll_position_and_escaped_titles(populated):
    populated.current_screen = Screen.ITEM_LIST
    plain = Text.from_markup(router.render(populated)).plain
    assert "Showing 1-15 of 21" in plain
    assert "Fix [bold]sink" in plain
    assert "►" in plain


def test_form_errors_are_rendered(populated):
    item_form.open_add(populated)
    populated.form_errors = {"title": "Title is required"}
    plain = Text.from_markup(router.render(populated)).plain
    assert "✗ Title is required" in plain
    assert "Add Item" in plain


def test_unknown_screen_renders_placeholder(state):
    output = router.render(state, routes={})
    assert "Unknown screen" in Text.from_markup(output).plain


def test_dispatch_without_route_leaves_state_alone(state):
    before = (state.current_screen, state.selected_index, state.running)
    router.dispatch(state, "q", routes={})
    assert (state.current_screen, state.selected_index, state.running) == before


def test_render_does_not_mutate_state(populated):
    populated.current_screen = Screen.GROUP_LIST
    snapshot = dict(vars(populated))
    router.render(populated)
    assert vars(populated) == snapshot
