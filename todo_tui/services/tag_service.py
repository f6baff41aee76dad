"""
tag_service.py - Tag logic
Single responsibility: tag CRUD.
"""
from todo_tui.database.connection import Database
from todo_tui.database.repositories import tags as tag_repo
from todo_tui.domain.errors import InvalidValueError, NotFoundError
from todo_tui.domain.models import Tag
from todo_tui.services.group_service import ensure_color
from todo_tui.utils.time import now_iso


def create(db: Database, name: str, color: str | None = None) -> int:
    if not name or not name.strip():
        raise InvalidValueError("Tag name is required")
    ensure_color(color)
    return tag_repo.create(db, Tag(name=name, color=color, created_at=now_iso()))


def update(db: Database, tag_id: int, **kwargs) -> None:
    current = tag_repo.get(db, tag_id)
    if not current:
        raise NotFoundError("tag", tag_id)
    for k, v in kwargs.items():
        if k in {"id", "created_at"}:
            continue
        if hasattr(current, k):
            setattr(current, k, v)
    if not current.name or not current.name.strip():
        raise InvalidValueError("Tag name is required")
    ensure_color(current.color)
    tag_repo.update(db, current)


def get(db: Database, tag_id: int) -> Tag | None:
    return tag_repo.get(db, tag_id)


def list_all(db: Database) -> list[Tag]:
    return tag_repo.list_all(db)


def delete(db: Database, tag_id: int) -> bool:
    return tag_repo.delete(db, tag_id)
