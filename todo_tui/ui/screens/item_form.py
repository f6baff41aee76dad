"""
item_form.py - Item add/edit form
Single responsibility: the item form definition and its load/save glue.
"""
from todo_tui.domain.models import ITEM_STATUSES, PRIORITY_LABELS
from todo_tui.ui.components.form_fields import render_form
from todo_tui.ui.forms import CHOICE, FormField, FormSpec, handle_form_key, optional, optional_id
from todo_tui.ui.views import build_view
from todo_tui.ui_state import AppState, Screen

STATUS_OPTIONS = tuple((s, s) for s in ITEM_STATUSES)
PRIORITY_OPTIONS = tuple((str(p), label) for p, label in PRIORITY_LABELS.items())


def _group_options(state: AppState):
    return [("", "None")] + [(str(g.id), g.name) for g in state.groups]


def _tag_options(state: AppState):
    return [("", "None")] + [(str(t.id), t.name) for t in state.tags]


ITEM_FORM = FormSpec(
    kind="item",
    fields=(
        FormField("title", "Title", required=True),
        FormField("description", "Description"),
        FormField("status", "Status", kind=CHOICE, options=STATUS_OPTIONS),
        FormField("priority", "Priority", kind=CHOICE, options=PRIORITY_OPTIONS),
        FormField("group_id", "Group", kind=CHOICE, options=_group_options),
        FormField("tag_id", "Tag", kind=CHOICE, options=_tag_options),
        FormField("start_date", "Start Date", rule="date"),
        FormField("due_date", "Due Date", rule="date"),
    ),
)

BINDINGS = [
    ("Tab/S-Tab", "Next/Prev"),
    ("↑↓", "Move/Cycle"),
    ("1-9", "Pick"),
    ("Enter", "Save"),
    ("Esc", "Cancel"),
]


def item_to_fields(item) -> dict[str, str]:
    return {
        "title": item.title,
        "description": item.description or "",
        "status": item.status,
        "priority": str(item.priority),
        "group_id": "" if item.group_id is None else str(item.group_id),
        "tag_id": "" if item.tag_id is None else str(item.tag_id),
        "start_date": item.start_date or "",
        "due_date": item.due_date or "",
    }


def open_add(state: AppState) -> None:
    fields = ITEM_FORM.blank_values(state)
    fields["priority"] = "2"
    if state.filter_group_id is not None:
        fields["group_id"] = str(state.filter_group_id)
    state.reset_form(fields)
    state.go_to(Screen.ITEM_ADD)


def open_edit(state: AppState, item) -> None:
    state.current_item = item
    state.reset_form(item_to_fields(item))
    state.go_to(Screen.ITEM_EDIT)


def save_item(state: AppState, values: dict[str, str]) -> str:
    title = values["title"]
    fields = dict(
        description=optional(values["description"]),
        status=values["status"],
        priority=int(values["priority"]),
        group_id=optional_id(values["group_id"]),
        tag_id=optional_id(values["tag_id"]),
        start_date=optional(values["start_date"]),
        due_date=optional(values["due_date"]),
    )
    if state.current_screen == Screen.ITEM_EDIT and state.current_item is not None:
        item_id = state.current_item.id
        state.store.update_item(item_id, title=title, **fields)
        state.current_item = state.store.get_item(item_id)
        return f'Item "{title}" updated'
    state.store.create_item(title, **fields)
    return f'Item "{title}" created'


def render(state: AppState) -> str:
    title = "Edit Item" if state.current_screen == Screen.ITEM_EDIT else "Add Item"
    return build_view(state, title, render_form(state, ITEM_FORM), BINDINGS, subtitle="* required")


def handle(state: AppState, key) -> None:
    handle_form_key(state, ITEM_FORM, key, save_item)
