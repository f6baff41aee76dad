"""
tag_form.py - Tag add/edit form
"""
from todo_tui.ui.components.form_fields import render_form
from todo_tui.ui.forms import FormField, FormSpec, handle_form_key, optional
from todo_tui.ui.views import build_view
from todo_tui.ui_state import AppState, Screen

TAG_FORM = FormSpec(
    kind="tag",
    fields=(
        FormField("name", "Name", required=True),
        FormField("color", "Color", rule="color"),
    ),
)

BINDINGS = [("Tab/S-Tab", "Next/Prev"), ("Enter", "Save"), ("Esc", "Cancel")]


def tag_to_fields(tag) -> dict[str, str]:
    return {"name": tag.name, "color": tag.color or ""}


def open_add(state: AppState) -> None:
    state.reset_form(TAG_FORM.blank_values(state))
    state.go_to(Screen.TAG_ADD)


def open_edit(state: AppState, tag) -> None:
    state.current_tag = tag
    state.reset_form(tag_to_fields(tag))
    state.go_to(Screen.TAG_EDIT)


def save_tag(state: AppState, values: dict[str, str]) -> str:
    name = values["name"]
    color = optional(values["color"])
    if state.current_screen == Screen.TAG_EDIT and state.current_tag is not None:
        tag_id = state.current_tag.id
        state.store.update_tag(tag_id, name=name, color=color)
        state.current_tag = state.store.get_tag(tag_id)
        return f'Tag "{name}" updated'
    state.store.create_tag(name, color)
    return f'Tag "{name}" created'


def render(state: AppState) -> str:
    title = "Edit Tag" if state.current_screen == Screen.TAG_EDIT else "Add Tag"
    return build_view(state, title, render_form(state, TAG_FORM), BINDINGS, subtitle="* required")


def handle(state: AppState, key) -> None:
    handle_form_key(state, TAG_FORM, key, save_tag)
