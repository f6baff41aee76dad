"""
forms.py - Form focus engine
Single responsibility: field focus, in-field editing, choice cycling,
validation and save for every create/edit form.

Field positions are 1-based; position ``field_count + 1`` is the save action.
Choice values are kept as strings in ``state.form_fields`` like text values.
"""

import logging
import re
import sqlite3
from dataclasses import dataclass
from typing import Callable, Sequence, Union

from todo_tui.domain.errors import DuplicateNameError, StoreError
from todo_tui.terminal.keys import Key, digit_value
from todo_tui.utils.time import is_valid_date

logger = logging.getLogger(__name__)

TEXT = "text"
CHOICE = "choice"

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

Options = Union[Sequence[tuple[str, str]], Callable[..., Sequence[tuple[str, str]]], None]

# (state, cleaned values) -> success notice
SaveHandler = Callable[..., str]


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = TEXT
    required: bool = False
    rule: str | None = None  # "date" | "color"
    options: Options = None  # (value, label) pairs, or a callable taking the state

    def choices(self, state) -> list[tuple[str, str]]:
        if callable(self.options):
            return list(self.options(state))
        return list(self.options or ())


@dataclass(frozen=True)
class FormSpec:
    kind: str  # entity name used in notices: "item", "group", "tag"
    fields: tuple[FormField, ...]

    @property
    def field_count(self) -> int:
        return len(self.fields)

    @property
    def save_index(self) -> int:
        return self.field_count + 1

    def field_at(self, index: int) -> FormField | None:
        if 1 <= index <= self.field_count:
            return self.fields[index - 1]
        return None

    def blank_values(self, state) -> dict[str, str]:
        values = {}
        for f in self.fields:
            if f.kind == CHOICE:
                options = f.choices(state)
                values[f.name] = options[0][0] if options else ""
            else:
                values[f.name] = ""
        return values


# ---------------------------------------------------------------------------
# Focus and editing
# ---------------------------------------------------------------------------


def move_focus(state, spec: FormSpec, delta: int) -> None:
    state.form_field_index = min(max(state.form_field_index + delta, 1), spec.save_index)


def cycle_choice(state, field: FormField, delta: int) -> None:
    options = field.choices(state)
    if not options:
        return
    values = [value for value, _label in options]
    current = state.form_fields.get(field.name, "")
    position = values.index(current) if current in values else 0
    state.form_fields[field.name] = values[(position + delta) % len(values)]


def select_choice(state, field: FormField, number: int) -> None:
    """Pick option ``number`` (1-based); out of range numbers are ignored."""
    options = field.choices(state)
    if 1 <= number <= len(options):
        state.form_fields[field.name] = options[number - 1][0]


def edit_text(state, field: FormField, key) -> None:
    value = state.form_fields.get(field.name, "")
    if key is Key.BACKSPACE:
        state.form_fields[field.name] = value[:-1]
    elif isinstance(key, str) and key.isprintable():
        state.form_fields[field.name] = value + key


def handle_form_key(state, spec: FormSpec, key, on_save: SaveHandler) -> None:
    """Route one key to the focused field, the focus cursor, or the save action."""
    if key is Key.CTRL_C:
        state.quit()
        return
    if key is Key.ESCAPE:
        state.go_back()
        return
    if key is Key.ENTER:
        save_form(state, spec, on_save)
        return
    if key is Key.TAB:
        move_focus(state, spec, 1)
        return
    if key is Key.SHIFT_TAB:
        move_focus(state, spec, -1)
        return

    field = spec.field_at(state.form_field_index)

    if field is None or field.kind == CHOICE:
        if key == "q":
            state.quit()
            return

    if field is None:
        if key is Key.UP:
            move_focus(state, spec, -1)
        elif key is Key.DOWN:
            move_focus(state, spec, 1)
        return

    if field.kind == CHOICE:
        # Up/Down stay on the field and cycle its options
        if key is Key.UP:
            cycle_choice(state, field, -1)
        elif key is Key.DOWN:
            cycle_choice(state, field, 1)
        elif digit_value(key) is not None:
            select_choice(state, field, digit_value(key))
        return

    if key is Key.UP:
        move_focus(state, spec, -1)
    elif key is Key.DOWN:
        move_focus(state, spec, 1)
    else:
        edit_text(state, field, key)


# ---------------------------------------------------------------------------
# Validation and save
# ---------------------------------------------------------------------------


def check_field(state, field: FormField, raw: str) -> str | None:
    value = raw.strip()
    if field.required and not value:
        return f"{field.label} is required"
    if not value:
        return None
    if field.rule == "date" and not (DATE_RE.match(value) and is_valid_date(value)):
        return "Invalid date format (use YYYY-MM-DD)"
    if field.rule == "color" and not COLOR_RE.match(value):
        return "Invalid color format (use #RRGGBB)"
    if field.kind == CHOICE and value not in {v for v, _label in field.choices(state)}:
        return f"Invalid {field.label.lower()} selection"
    return None


def validate_form(state, spec: FormSpec) -> bool:
    """Recompute ``form_errors`` from every field; True when the form is valid."""
    errors: dict[str, str] = {}
    for field in spec.fields:
        message = check_field(state, field, state.form_fields.get(field.name, ""))
        if message:
            errors[field.name] = message
    state.form_errors = errors
    return not errors


def cleaned_values(state, spec: FormSpec) -> dict[str, str]:
    return {f.name: state.form_fields.get(f.name, "").strip() for f in spec.fields}


def save_form(state, spec: FormSpec, on_save: SaveHandler) -> bool:
    """Validate, persist through ``on_save`` and go back; stay on the form on any failure."""
    if not validate_form(state, spec):
        state.set_message("Please fix the highlighted fields", "error")
        return False
    try:
        notice = on_save(state, cleaned_values(state, spec))
    except DuplicateNameError as e:
        logger.info("Rejected duplicate %s name %r", spec.kind, e.name)
        state.set_message(f"A {spec.kind} with that name already exists", "error")
        return False
    except (StoreError, sqlite3.Error) as e:
        logger.error("Failed to save %s: %s", spec.kind, e)
        state.set_message(f"Error saving {spec.kind}: {e}", "error")
        return False
    state.set_message(notice, "success")
    state.refresh_data()
    state.go_back()
    return True


def optional(value: str) -> str | None:
    return value or None


def optional_id(value: str) -> int | None:
    return int(value) if value else None
