"""
form_fields.py - Form field fragments
Single responsibility: draw form fields, focus marker, errors and the save action.
"""
from rich.markup import escape

from todo_tui.ui.forms import CHOICE, FormField, FormSpec
from todo_tui.utils.text import pad_visible

LABEL_WIDTH = 14
CURSOR = "▏"


def _label(field: FormField) -> str:
    mark = "[red]*[/red]" if field.required else " "
    return pad_visible(f"{escape(field.label)}{mark}", LABEL_WIDTH)


def _choice_value(state, field: FormField, focused: bool) -> str:
    options = field.choices(state)
    current = state.form_fields.get(field.name, "")
    if not focused:
        label = next((lbl for value, lbl in options if value == current), current)
        return escape(label) if label else "[dim]-[/dim]"
    parts = []
    for number, (value, label) in enumerate(options, start=1):
        text = f"{number}:{escape(label)}" if number <= 9 else escape(label)
        if value == current:
            parts.append(f"[reverse]{text}[/reverse]")
        else:
            parts.append(f"[dim]{text}[/dim]")
    return "◀ " + " ".join(parts) + " ▶"


def _text_value(state, field: FormField, focused: bool) -> str:
    value = escape(state.form_fields.get(field.name, ""))
    if focused:
        return f"[underline]{value}[/underline][bold cyan]{CURSOR}[/bold cyan]"
    hint = " [dim](YYYY-MM-DD)[/dim]" if field.rule == "date" and not value else ""
    return (value or "[dim]-[/dim]") + hint


def render_field(state, field: FormField, focused: bool) -> list[str]:
    marker = "[bold cyan]►[/bold cyan]" if focused else " "
    if field.kind == CHOICE:
        value = _choice_value(state, field, focused)
    else:
        value = _text_value(state, field, focused)
    lines = [f"{marker} {_label(field)} {value}"]
    error = state.form_errors.get(field.name)
    if error:
        lines.append(" " * (LABEL_WIDTH + 3) + f"[red]✗ {escape(error)}[/red]")
    return lines


def render_form(state, spec: FormSpec) -> str:
    lines: list[str] = []
    for index, field in enumerate(spec.fields, start=1):
        lines.extend(render_field(state, field, state.form_field_index == index))
    lines.append("")
    if state.form_field_index == spec.save_index:
        lines.append("[bold cyan]►[/bold cyan] [reverse bold green] Save [/reverse bold green]")
    else:
        lines.append(f"  [green]{escape('[ Save ]')}[/green]")
    return "\n".join(lines)
