"""
filter_service.py - Filter helpers
Single responsibility: build ItemFilter values and describe active filters.
"""
from todo_tui.domain.filters import ItemFilter


def build_filter(status: str | None = None, group_id: int | None = None, tag_id: int | None = None) -> ItemFilter:
    # "All" arrives as None; an empty status string means the same
    return ItemFilter(status=status or None, group_id=group_id, tag_id=tag_id)


def describe(flt: ItemFilter, group_names: dict[int, str], tag_names: dict[int, str]) -> list[str]:
    """Human readable parts for each active predicate, in menu order."""
    parts: list[str] = []
    if flt.status:
        parts.append(f"Status: {flt.status}")
    if flt.group_id is not None:
        parts.append(f"Group: {group_names.get(flt.group_id, '?')}")
    if flt.tag_id is not None:
        parts.append(f"Tag: {tag_names.get(flt.tag_id, '?')}")
    return parts
