"""
text.py - markup-aware text measurement
Single responsibility: width, padding and truncation of console markup strings.

Every table and panel renderer pads through these helpers so that inline
style tags never count towards column widths.
"""
from rich.markup import escape
from rich.text import Text


def visible_width(markup: str) -> int:
    """Number of terminal cells the markup occupies once styles are stripped."""
    return Text.from_markup(markup).cell_len


def plain_text(markup: str) -> str:
    return Text.from_markup(markup).plain


def pad_visible(markup: str, width: int, align: str = "left") -> str:
    """Pad with spaces up to ``width`` visible cells; wider input is returned as is."""
    gap = width - visible_width(markup)
    if gap <= 0:
        return markup
    if align == "right":
        return " " * gap + markup
    if align == "center":
        left = gap // 2
        return " " * left + markup + " " * (gap - left)
    return markup + " " * gap


def truncate(text: str, width: int) -> str:
    """Cut plain text to ``width`` cells, ending with an ellipsis when shortened."""
    if width <= 0:
        return ""
    t = Text(text)
    if t.cell_len <= width:
        return text
    if width == 1:
        return "…"
    t.truncate(width, overflow="ellipsis")
    return t.plain


def cell(text: str, width: int, style: str | None = None) -> str:
    """Escape, truncate, style and pad user text into one fixed-width column."""
    body = escape(truncate(text, width))
    if style:
        body = f"[{style}]{body}[/{style}]"
    return pad_visible(body, width)
