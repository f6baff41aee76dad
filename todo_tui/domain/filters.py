"""
filters.py - Filter DTOs
Single responsibility: carry filter inputs for item queries.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ItemFilter:
    status: str | None = None
    group_id: Optional[int] = None
    tag_id: Optional[int] = None
    # YYYY-MM-DD bounds; items without that date never match
    start_date_from: Optional[str] = None
    due_date_to: Optional[str] = None

    def is_empty(self) -> bool:
        return (
            self.status is None
            and self.group_id is None
            and self.tag_id is None
            and self.start_date_from is None
            and self.due_date_to is None
        )


# (label, description) per entry of the filter menu, in display order
FILTER_MENU_ENTRIES = (
    ("Status", "Filter by item status"),
    ("Group", "Filter by group"),
    ("Tag", "Filter by tag"),
    ("Clear All", "Remove every active filter"),
)
