import sqlite3
from unittest import mock

import pytest

from todo_tui.domain.errors import DuplicateNameError
from todo_tui.terminal.keys import Key, KeyDecoder
from todo_tui.ui.forms import CHOICE, FormField, FormSpec, handle_form_key, validate_form
from todo_tui.ui_state import Screen

SPEC = FormSpec(
    kind="tag",
    fields=(
        FormField("name", "Name", required=True),
        FormField("size", "Size", kind=CHOICE, options=(("a", "A"), ("b", "B"), ("c", "C"))),
        FormField("due", "Due", rule="date"),
        FormField("color", "Color", rule="color"),
    ),
)


@pytest.fixture
def form(state):
    state.go_to(Screen.TAG_ADD)
    state.reset_form(SPEC.blank_values(state))
    return state


def press(state, *keys, on_save=None):
    on_save = on_save or mock.Mock(return_value="saved")
    for key in keys:
        handle_form_key(state, SPEC, key, on_save)
    return on_save


def test_tab_and_shift_tab_clamp(form):
    press(form, *[Key.TAB] * 10)
    assert form.form_field_index == SPEC.save_index == 5
    press(form, *[Key.SHIFT_TAB] * 10)
    assert form.form_field_index == 1


def test_typing_and_backspace(form):
    press(form, "h", "é", "y")
    assert form.form_fields["name"] == "héy"
    press(form, Key.BACKSPACE)
    assert form.form_fields["name"] == "hé"


def test_backspace_on_empty_buffer(form):
    press(form, Key.BACKSPACE, Key.BACKSPACE)
    assert form.form_fields["name"] == ""


def test_q_is_text_on_text_fields(form):
    press(form, "q")
    assert form.form_fields["name"] == "q"
    assert form.running


def test_non_printable_keys_are_not_typed(form):
    press(form, Key.LEFT, Key.IGNORED, "\x00")
    assert form.form_fields["name"] == ""


def test_up_down_move_focus_on_text_fields(form):
    press(form, Key.DOWN)
    assert form.form_field_index == 2
    press(form, Key.TAB, Key.UP)
    assert form.form_field_index == 2
    press(form, Key.SHIFT_TAB, Key.UP)
    assert form.form_field_index == 1


def test_choice_cycles_with_wrap_and_keeps_focus(form):
    form.form_field_index = 2
    assert form.form_fields["size"] == "a"
    press(form, Key.DOWN, Key.DOWN)
    assert form.form_fields["size"] == "c"
    press(form, Key.DOWN)
    assert form.form_fields["size"] == "a"
    press(form, Key.UP)
    assert form.form_fields["size"] == "c"
    assert form.form_field_index == 2


def test_digit_selects_choice(form):
    form.form_field_index = 2
    press(form, "2")
    assert form.form_fields["size"] == "b"
    press(form, "9")
    assert form.form_fields["size"] == "b"


@pytest.mark.parametrize("raw", ["²".encode(), "٣".encode(), "①".encode()])
def test_unicode_digits_are_ignored_on_choice_field(form, feed, raw):
    form.form_field_index = 2
    key = KeyDecoder(feed(raw), esc_timeout=0).next_key()
    press(form, key)
    assert form.form_fields["size"] == "a"
    assert form.form_field_index == 2
    assert form.running


def test_q_quits_on_choice_field(form):
    form.form_field_index = 2
    press(form, "q")
    assert form.running is False


def test_ctrl_c_quits_from_text_field(form):
    press(form, Key.CTRL_C)
    assert form.running is False


def test_escape_cancels(form):
    on_save = press(form, "x", Key.ESCAPE)
    assert form.current_screen == Screen.ITEM_LIST
    on_save.assert_not_called()


def test_up_down_on_save_position(form):
    form.form_field_index = SPEC.save_index
    press(form, Key.DOWN)
    assert form.form_field_index == SPEC.save_index
    press(form, Key.UP)
    assert form.form_field_index == SPEC.field_count


def test_validation_collects_every_error(form):
    form.form_fields.update(name="   ", due="2024-02-30", color="#12345G")
    assert validate_form(form, SPEC) is False
    assert form.form_errors == {
        "name": "Name is required",
        "due": "Invalid date format (use YYYY-MM-DD)",
        "color": "Invalid color format (use #RRGGBB)",
    }


@pytest.mark.parametrize("due", ["2024-2-01", "24-02-01", "2024/02/01", "tomorrow"])
def test_bad_date_shapes(form, due):
    form.form_fields.update(name="x", due=due)
    assert validate_form(form, SPEC) is False
    assert "due" in form.form_errors


def test_valid_optional_values(form):
    form.form_fields.update(name="x", due="2024-02-29", color="#a1B2c3")
    assert validate_form(form, SPEC) is True
    assert form.form_errors == {}


def test_save_with_blank_required_field_never_calls_store(form):
    on_save = press(form, Key.ENTER)
    on_save.assert_not_called()
    assert form.form_errors["name"]
    assert form.current_screen == Screen.TAG_ADD


def test_save_success_goes_back_with_notice(form):
    on_save = press(form, " ", "n", "e", "w", " ", Key.ENTER)
    on_save.assert_called_once()
    _state, values = on_save.call_args.args
    assert values["name"] == "new"
    assert form.message == "saved"
    assert form.message_type == "success"
    assert form.current_screen == Screen.ITEM_LIST


def test_duplicate_name_keeps_form_open(form):
    on_save = mock.Mock(side_effect=DuplicateNameError("tag", "dup"))
    press(form, "d", "u", "p", Key.ENTER, on_save=on_save)
    assert form.message == "A tag with that name already exists"
    assert form.message_type == "error"
    assert form.current_screen == Screen.TAG_ADD
    assert form.form_fields["name"] == "dup"


def test_database_error_keeps_form_open(form):
    on_save = mock.Mock(side_effect=sqlite3.OperationalError("database is locked"))
    press(form, "x", Key.ENTER, on_save=on_save)
    assert form.message == "Error saving tag: database is locked"
    assert form.current_screen == Screen.TAG_ADD
    assert form.form_fields["name"] == "x"
