import sqlite3
from unittest import mock

from todo_tui.terminal.keys import Key
from todo_tui.ui.screens import delete_confirm, group_list, item_detail, item_list
from todo_tui.ui_state import Screen


def seed_buy_milk(store):
    for n in range(1, 7):
        store.create_item(f"Chore {n}")
    return store.create_item("Buy milk")


def test_confirm_deletes_item_seven(state, store):
    item_id = seed_buy_milk(store)
    assert item_id == 7
    state.refresh_data()
    state.current_item = store.get_item(7)
    state.go_to(Screen.ITEM_DETAIL)

    delete_confirm.request_delete(state, "item", 7, "Buy milk")
    assert state.current_screen == Screen.DELETE_CONFIRM

    with mock.patch.object(store, "delete_item", wraps=store.delete_item) as spy:
        delete_confirm.handle(state, "y")

    spy.assert_called_once_with(7)
    assert "Buy milk" in state.message
    assert state.message == 'Item "Buy milk" deleted'
    assert state.message_type == "success"
    assert state.current_item is None
    assert state.current_screen == Screen.ITEM_LIST
    assert state.nav_stack == []
    assert (state.delete_type, state.delete_id, state.delete_name) == (None, None, None)
    assert [i.id for i in state.items] == [6, 5, 4, 3, 2, 1]


def test_confirm_keeps_unrelated_current_item(state, store):
    seed_buy_milk(store)
    state.refresh_data()
    state.current_item = store.get_item(3)
    delete_confirm.request_delete(state, "item", 7, "Buy milk")
    delete_confirm.handle(state, Key.ENTER)
    assert state.current_item.id == 3


def test_delete_from_detail_screen(state, store):
    store.create_item("Walk dog")
    state.refresh_data()
    item_list.handle(state, Key.ENTER)
    item_detail.handle(state, "d")
    assert state.delete_name == "Walk dog"
    delete_confirm.handle(state, "y")
    assert store.list_items() == []
    assert state.current_screen == Screen.ITEM_LIST


def test_cancel_clears_intent_and_goes_back(state, store):
    store.create_item("Keep me")
    state.refresh_data()
    item_list.handle(state, "d")
    assert state.has_delete_intent()

    with mock.patch.object(store, "delete_item") as spy:
        delete_confirm.handle(state, "n")
    spy.assert_not_called()
    assert not state.has_delete_intent()
    assert state.current_screen == Screen.ITEM_LIST
    assert len(store.list_items()) == 1


def test_escape_cancels(state):
    delete_confirm.request_delete(state, "tag", 1, "x")
    delete_confirm.handle(state, Key.ESCAPE)
    assert state.delete_type is None
    assert state.current_screen == Screen.ITEM_LIST


def test_confirm_without_intent_just_returns(state, store):
    state.go_to(Screen.DELETE_CONFIRM)
    with mock.patch.object(store, "delete_item") as spy:
        delete_confirm.confirm(state)
    spy.assert_not_called()
    assert state.current_screen == Screen.ITEM_LIST
    assert state.message is None


def test_deleting_group_keeps_items_and_clears_filter(state, store):
    group_id = store.create_group("Garden")
    store.create_item("Mow lawn", group_id=group_id)
    state.refresh_data()
    state.go_to(Screen.GROUP_LIST)
    group_list.handle(state, Key.ENTER)
    assert state.filter_group_id == group_id
    assert state.current_group.id == group_id

    state.go_to(Screen.GROUP_LIST)
    group_list.handle(state, "d")
    delete_confirm.handle(state, "y")

    assert state.current_screen == Screen.GROUP_LIST
    assert state.filter_group_id is None
    assert state.current_group is None
    assert state.message == 'Group "Garden" deleted'
    [item] = store.list_items()
    assert item.group_id is None


def test_store_failure_reports_and_returns(state, store):
    tag_id = store.create_tag("Flaky")
    state.refresh_data()
    state.go_to(Screen.TAG_LIST)
    delete_confirm.request_delete(state, "tag", tag_id, "Flaky")

    with mock.patch.object(store, "delete_tag", side_effect=sqlite3.OperationalError("disk I/O error")):
        delete_confirm.handle(state, "y")

    assert state.message == "Error deleting tag: disk I/O error"
    assert state.message_type == "error"
    assert not state.has_delete_intent()
    assert state.current_screen == Screen.TAG_LIST
    assert len(store.list_tags()) == 1


def test_item_that_vanished_is_reported(state, store):
    delete_confirm.request_delete(state, "item", 99, "Ghost")
    delete_confirm.handle(state, "y")
    assert state.message_type == "warning"
    assert state.current_screen == Screen.ITEM_LIST
