"""
group_service.py - Group logic
Single responsibility: group CRUD and color policy.
"""
import re

from todo_tui.database.connection import Database
from todo_tui.database.repositories import groups as group_repo
from todo_tui.domain.errors import InvalidValueError, NotFoundError
from todo_tui.domain.models import Group
from todo_tui.utils.time import now_iso

COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def ensure_color(color: str | None) -> None:
    if color is not None and not COLOR_RE.match(color):
        raise InvalidValueError(f"Invalid color: {color}")


def create(db: Database, name: str, description: str | None = None, color: str | None = None) -> int:
    if not name or not name.strip():
        raise InvalidValueError("Group name is required")
    ensure_color(color)
    g = Group(
        name=name,
        description=description,
        color=color,
        created_at=now_iso(),
        updated_at=now_iso(),
    )
    return group_repo.create(db, g)


def update(db: Database, group_id: int, **kwargs) -> None:
    current = group_repo.get(db, group_id)
    if not current:
        raise NotFoundError("group", group_id)
    protected_fields = {"id", "created_at", "updated_at"}
    for k, v in kwargs.items():
        if k in protected_fields:
            continue
        if hasattr(current, k):
            setattr(current, k, v)
    if not current.name or not current.name.strip():
        raise InvalidValueError("Group name is required")
    ensure_color(current.color)
    group_repo.update(db, current)


def get(db: Database, group_id: int) -> Group | None:
    return group_repo.get(db, group_id)


def list_all(db: Database) -> list[Group]:
    return group_repo.list_all(db)


def delete(db: Database, group_id: int) -> bool:
    return group_repo.delete(db, group_id)
