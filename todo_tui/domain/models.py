"""
models.py - Domain models
Single responsibility: typed containers for core entities.
"""
from dataclasses import dataclass
from typing import Optional

ITEM_STATUSES = ("pending", "in_progress", "completed", "blocked")

# 1 = high, 2 = medium, 3 = low
PRIORITIES = (1, 2, 3)
PRIORITY_LABELS = {1: "HIGH", 2: "MEDIUM", 3: "LOW"}


@dataclass
class Item:
    title: str
    description: str | None = None
    status: str = "pending"
    priority: int = 2
    group_id: Optional[int] = None
    tag_id: Optional[int] = None
    start_date: str | None = None
    due_date: str | None = None
    completed_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    id: Optional[int] = None

    def __getitem__(self, key):
        return getattr(self, key)


@dataclass
class Group:
    name: str
    description: str | None = None
    color: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    id: Optional[int] = None

    def __getitem__(self, key):
        return getattr(self, key)


@dataclass
class Tag:
    name: str
    color: str | None = None
    created_at: str | None = None
    id: Optional[int] = None

    def __getitem__(self, key):
        return getattr(self, key)
