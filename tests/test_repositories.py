import pytest

from todo_tui.db import Store
from todo_tui.domain.errors import DuplicateNameError, InvalidValueError, NotFoundError


def test_create_and_get_item(store):
    item_id = store.create_item("Write report", description="Q3", priority=1, due_date="2024-09-30")
    item = store.get_item(item_id)
    assert item.title == "Write report"
    assert item.description == "Q3"
    assert item.status == "pending"
    assert item.priority == 1
    assert item.due_date == "2024-09-30"
    assert item.completed_at is None
    assert item.created_at and item.updated_at
    assert item["title"] == "Write report"


def test_get_missing_returns_none(store):
    assert store.get_item(404) is None
    assert store.get_group(404) is None
    assert store.get_tag(404) is None


def test_items_are_newest_first(store):
    first = store.create_item("first")
    second = store.create_item("second")
    assert [i.id for i in store.list_items()] == [second, first]


@pytest.mark.parametrize(
    "fields",
    [
        {"status": "done"},
        {"priority": 4},
        {"due_date": "2024-02-30"},
        {"start_date": "soon"},
    ],
)
def test_item_values_outside_closed_sets_are_rejected(store, fields):
    with pytest.raises(InvalidValueError):
        store.create_item("x", **fields)
    assert store.list_items() == []


def test_unknown_group_reference_is_rejected(store):
    with pytest.raises(InvalidValueError):
        store.create_item("x", group_id=999)


def test_update_item_tracks_completion(store):
    item_id = store.create_item("x")
    store.update_item(item_id, status="completed")
    assert store.get_item(item_id).completed_at is not None
    store.update_item(item_id, status="pending", title="y")
    item = store.get_item(item_id)
    assert item.completed_at is None
    assert item.title == "y"


def test_update_missing_item(store):
    with pytest.raises(NotFoundError):
        store.update_item(12, title="nope")


def test_toggle_completion(store):
    item_id = store.create_item("x", status="in_progress")
    assert store.toggle_item_completion(item_id) == "completed"
    assert store.get_item(item_id).completed_at is not None
    assert store.toggle_item_completion(item_id) == "pending"
    assert store.get_item(item_id).completed_at is None
    with pytest.raises(NotFoundError):
        store.toggle_item_completion(999)


def test_delete_item_reports_whether_a_row_went_away(store):
    item_id = store.create_item("x")
    assert store.delete_item(item_id) is True
    assert store.delete_item(item_id) is False


def test_duplicate_names(store):
    store.create_group("Home")
    with pytest.raises(DuplicateNameError):
        store.create_group("Home")
    tag_a = store.create_tag("a")
    store.create_tag("b")
    with pytest.raises(DuplicateNameError):
        store.update_tag(tag_a, name="b")


def test_bad_color_rejected(store):
    with pytest.raises(InvalidValueError):
        store.create_group("Home", color="red")
    with pytest.raises(InvalidValueError):
        store.create_tag("Later", color="#12345")


def test_deleting_group_and_tag_nulls_references(store):
    group_id = store.create_group("Home")
    tag_id = store.create_tag("Urgent")
    item_id = store.create_item("x", group_id=group_id, tag_id=tag_id)
    assert store.count_items_by_group() == {group_id: 1}
    assert store.count_items_by_tag() == {tag_id: 1}

    assert store.delete_group(group_id) is True
    assert store.delete_tag(tag_id) is True
    item = store.get_item(item_id)
    assert (item.group_id, item.tag_id) == (None, None)
    assert store.count_items_by_group() == {}


def test_groups_and_tags_sorted_by_name(store):
    store.create_group("b")
    store.create_group("a")
    store.create_tag("z")
    store.create_tag("m")
    assert [g.name for g in store.list_groups()] == ["a", "b"]
    assert [t.name for t in store.list_tags()] == ["m", "z"]


def test_update_group_keeps_created_at(store):
    group_id = store.create_group("Home")
    created = store.get_group(group_id).created_at
    store.update_group(group_id, description="Rooms", created_at="1999-01-01 00:00:00")
    group = store.get_group(group_id)
    assert group.description == "Rooms"
    assert group.created_at == created


def test_in_memory_store():
    s = Store.open(":memory:")
    try:
        s.create_tag("t")
        assert [t.name for t in s.list_tags()] == ["t"]
    finally:
        s.close()
