"""
item_service.py - Item service layer
Single responsibility: orchestrate item operations and enforce policies.
"""
import re

from todo_tui.database.connection import Database
from todo_tui.database.repositories import items as item_repo
from todo_tui.domain.errors import InvalidValueError, NotFoundError
from todo_tui.domain.filters import ItemFilter
from todo_tui.domain.models import ITEM_STATUSES, PRIORITIES, Item
from todo_tui.utils.time import is_valid_date, now_iso

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _ensure_status(status: str) -> None:
    if status not in ITEM_STATUSES:
        raise InvalidValueError(f"Unsupported status: {status}")


def _ensure_priority(priority: int) -> None:
    if priority not in PRIORITIES:
        raise InvalidValueError(f"Unsupported priority: {priority}")


def _ensure_date(value: str | None) -> None:
    if value is None:
        return
    if not _DATE_RE.match(value) or not is_valid_date(value):
        raise InvalidValueError(f"Invalid date: {value}")


def list_items(db: Database, filter: ItemFilter | None = None) -> list[Item]:
    if filter is not None:
        _ensure_date(filter.start_date_from)
        _ensure_date(filter.due_date_to)
    return item_repo.list_items(db, filter)


def get_item(db: Database, item_id: int) -> Item | None:
    return item_repo.get_item(db, item_id)


def create_item(
    db: Database,
    title: str,
    description: str | None = None,
    status: str = "pending",
    priority: int = 2,
    group_id: int | None = None,
    tag_id: int | None = None,
    start_date: str | None = None,
    due_date: str | None = None,
) -> int:
    _ensure_status(status)
    _ensure_priority(priority)
    _ensure_date(start_date)
    _ensure_date(due_date)
    now = now_iso()
    item = Item(
        title=title,
        description=description,
        status=status,
        priority=priority,
        group_id=group_id,
        tag_id=tag_id,
        start_date=start_date,
        due_date=due_date,
        completed_at=now if status == "completed" else None,
        created_at=now,
        updated_at=now,
    )
    return item_repo.create_item(db, item)


def update_item(db: Database, item_id: int, **kwargs) -> None:
    current = item_repo.get_item(db, item_id)
    if not current:
        raise NotFoundError("item", item_id)
    was_completed = current.status == "completed"
    protected_fields = {"id", "created_at", "updated_at", "completed_at"}
    for k, v in kwargs.items():
        if k in protected_fields:
            continue
        if hasattr(current, k):
            setattr(current, k, v)
    _ensure_status(current.status)
    _ensure_priority(current.priority)
    _ensure_date(current.start_date)
    _ensure_date(current.due_date)
    if current.status == "completed" and not was_completed:
        current.completed_at = now_iso()
    elif current.status != "completed":
        current.completed_at = None
    item_repo.update_item(db, current)


def toggle_completion(db: Database, item_id: int) -> str:
    return item_repo.toggle_completion(db, item_id)


def delete_item(db: Database, item_id: int) -> bool:
    return item_repo.delete_item(db, item_id)


def count_by_group(db: Database) -> dict[int, int]:
    return item_repo.count_by_group(db)


def count_by_tag(db: Database) -> dict[int, int]:
    return item_repo.count_by_tag(db)
