from todo_tui.ui.components.footer import render_footer
from todo_tui.ui.components.message import render_message
from todo_tui.utils.text import cell, pad_visible, plain_text, truncate, visible_width


def test_visible_width_ignores_markup():
    assert visible_width("[bold red]abc[/bold red]") == 3
    assert visible_width("[green]✓[/green] ok") == 4
    assert visible_width("") == 0


def test_visible_width_counts_wide_characters():
    assert visible_width("日本") == 4


def test_pad_visible_pads_to_visible_width():
    assert pad_visible("[bold]ab[/bold]", 5) == "[bold]ab[/bold]   "
    assert pad_visible("ab", 5, align="right") == "   ab"
    assert pad_visible("ab", 6, align="center") == "  ab  "
    assert pad_visible("日本", 6) == "日本  "


def test_pad_visible_leaves_wide_input_alone():
    assert pad_visible("abcdef", 3) == "abcdef"


def test_truncate():
    assert truncate("Hello World", 8) == "Hello W…"
    assert truncate("short", 8) == "short"
    assert truncate("abc", 1) == "…"
    assert truncate("abc", 0) == ""


def test_cell_escapes_user_text():
    assert cell("[x]", 5) == "\\[x]  "
    assert plain_text(cell("[x]", 5)) == "[x]  "


def test_cell_applies_style_and_truncates():
    value = cell("Hello World", 8, style="red")
    assert value == "[red]Hello W…[/red]"
    assert visible_width(value) == 8


def test_footer_format():
    assert render_footer([("q", "Quit"), ("a", "Add")]) == (
        " [bold cyan]q[/] [dim]Quit[/] │ [bold cyan]a[/] [dim]Add[/] "
    )


def test_message_icons():
    assert render_message(None) == ""
    assert render_message("Saved", "success") == "[green]✓ Saved[/green]"
    assert render_message("Nope", "error") == "[red]✗ Nope[/red]"
    assert plain_text(render_message("Careful", "warning")) == "⚠ Careful"
