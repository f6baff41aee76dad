"""
group_form.py - Group add/edit form
"""
from todo_tui.ui.components.form_fields import render_form
from todo_tui.ui.forms import FormField, FormSpec, handle_form_key, optional
from todo_tui.ui.views import build_view
from todo_tui.ui_state import AppState, Screen

GROUP_FORM = FormSpec(
    kind="group",
    fields=(
        FormField("name", "Name", required=True),
        FormField("description", "Description"),
        FormField("color", "Color", rule="color"),
    ),
)

BINDINGS = [("Tab/S-Tab", "Next/Prev"), ("Enter", "Save"), ("Esc", "Cancel")]


def group_to_fields(group) -> dict[str, str]:
    return {
        "name": group.name,
        "description": group.description or "",
        "color": group.color or "",
    }


def open_add(state: AppState) -> None:
    state.reset_form(GROUP_FORM.blank_values(state))
    state.go_to(Screen.GROUP_ADD)


def open_edit(state: AppState, group) -> None:
    state.current_group = group
    state.reset_form(group_to_fields(group))
    state.go_to(Screen.GROUP_EDIT)


def save_group(state: AppState, values: dict[str, str]) -> str:
    name = values["name"]
    description = optional(values["description"])
    color = optional(values["color"])
    if state.current_screen == Screen.GROUP_EDIT and state.current_group is not None:
        group_id = state.current_group.id
        state.store.update_group(group_id, name=name, description=description, color=color)
        state.current_group = state.store.get_group(group_id)
        return f'Group "{name}" updated'
    state.store.create_group(name, description, color)
    return f'Group "{name}" created'


def render(state: AppState) -> str:
    title = "Edit Group" if state.current_screen == Screen.GROUP_EDIT else "Add Group"
    return build_view(state, title, render_form(state, GROUP_FORM), BINDINGS, subtitle="* required")


def handle(state: AppState, key) -> None:
    handle_form_key(state, GROUP_FORM, key, save_group)
