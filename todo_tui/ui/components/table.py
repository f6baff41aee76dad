"""
table.py - Fixed-column table fragments
Single responsibility: lay out entity rows in aligned columns with a selection marker.
"""
from dataclasses import dataclass

from rich.markup import escape

from todo_tui.ui.helpers import color_swatch, priority_markup, status_markup
from todo_tui.utils.text import cell, pad_visible

SELECTOR = "►"


@dataclass
class Column:
    title: str
    width: int


def _header_row(columns: list[Column]) -> str:
    cells = [pad_visible(f"[bold]{escape(c.title)}[/bold]", c.width) for c in columns]
    return "  " + " ".join(cells)


def render_table(
    columns: list[Column],
    rows: list[list[str]],
    selected_index: int,
    scroll_offset: int,
    visible_rows: int,
    empty_text: str = "No entries",
) -> str:
    """Rows hold pre-styled markup cells; ``selected_index`` is 1-based."""
    if not rows:
        return f"  [dim]{escape(empty_text)}[/dim]"

    lines = [_header_row(columns)]
    lines.append("  " + " ".join("─" * c.width for c in columns))
    window = rows[scroll_offset:scroll_offset + visible_rows]
    for offset, row in enumerate(window, start=scroll_offset + 1):
        cells = [pad_visible(value, col.width) for value, col in zip(row, columns)]
        if offset == selected_index:
            lines.append(f"[bold cyan]{SELECTOR}[/bold cyan] [reverse]{' '.join(cells)}[/reverse]")
        else:
            lines.append("  " + " ".join(cells))

    total = len(rows)
    if total > visible_rows:
        last = min(scroll_offset + visible_rows, total)
        lines.append(f"  [dim]Showing {scroll_offset + 1}-{last} of {total}[/dim]")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Entity tables
# ---------------------------------------------------------------------------

ITEM_COLUMNS = [
    Column("#", 4),
    Column("Title", 30),
    Column("Status", 11),
    Column("Priority", 8),
    Column("Due Date", 10),
]


def render_item_table(items, selected_index: int, scroll_offset: int, visible_rows: int) -> str:
    rows = [
        [
            cell(str(item.id), 4),
            cell(item.title, 30),
            pad_visible(status_markup(item.status), 11),
            pad_visible(priority_markup(item.priority), 8),
            cell(item.due_date or "-", 10),
        ]
        for item in items
    ]
    return render_table(ITEM_COLUMNS, rows, selected_index, scroll_offset, visible_rows, "No items found")


GROUP_COLUMNS = [
    Column("Name", 24),
    Column("Items", 6),
    Column("Color", 10),
    Column("Description", 30),
]


def render_group_table(groups, counts: dict[int, int], selected_index: int, scroll_offset: int, visible_rows: int) -> str:
    rows = [
        [
            cell(g.name, 24),
            cell(str(counts.get(g.id, 0)), 6),
            color_swatch(g.color),
            cell(g.description or "", 30),
        ]
        for g in groups
    ]
    return render_table(GROUP_COLUMNS, rows, selected_index, scroll_offset, visible_rows, "No groups yet")


TAG_COLUMNS = [
    Column("Name", 24),
    Column("Items", 6),
    Column("Color", 10),
]


def render_tag_table(tags, counts: dict[int, int], selected_index: int, scroll_offset: int, visible_rows: int) -> str:
    rows = [
        [cell(t.name, 24), cell(str(counts.get(t.id, 0)), 6), color_swatch(t.color)]
        for t in tags
    ]
    return render_table(TAG_COLUMNS, rows, selected_index, scroll_offset, visible_rows, "No tags yet")
