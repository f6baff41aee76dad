"""
tags.py - Tag repository
Single responsibility: CRUD for tags.
"""
import sqlite3

from todo_tui.database.connection import Database, get_connection
from todo_tui.domain.errors import DuplicateNameError, NotFoundError
from todo_tui.domain.models import Tag
from todo_tui.utils.time import now_iso


def _row_to_tag(r) -> Tag:
    return Tag(id=r["id"], name=r["name"], color=r["color"], created_at=r["created_at"])


def create(db: Database, t: Tag) -> int:
    try:
        with get_connection(db) as conn:
            cur = conn.execute(
                "INSERT INTO tags (name, color, created_at) VALUES (?, ?, ?)",
                (t.name, t.color, t.created_at or now_iso()),
            )
            return cur.lastrowid
    except sqlite3.IntegrityError as e:
        if "UNIQUE" in str(e):
            raise DuplicateNameError("tag", t.name) from e
        raise


def update(db: Database, t: Tag) -> None:
    try:
        with get_connection(db) as conn:
            cur = conn.execute(
                "UPDATE tags SET name = ?, color = ? WHERE id = ?",
                (t.name, t.color, t.id),
            )
            if cur.rowcount == 0:
                raise NotFoundError("tag", t.id)
    except sqlite3.IntegrityError as e:
        if "UNIQUE" in str(e):
            raise DuplicateNameError("tag", t.name) from e
        raise


def get(db: Database, tag_id: int) -> Tag | None:
    with get_connection(db) as conn:
        row = conn.execute("SELECT * FROM tags WHERE id = ?", (tag_id,)).fetchone()
        if not row:
            return None
        return _row_to_tag(row)


def list_all(db: Database) -> list[Tag]:
    with get_connection(db) as conn:
        rows = conn.execute("SELECT * FROM tags ORDER BY name").fetchall()
        return [_row_to_tag(r) for r in rows]


def delete(db: Database, tag_id: int) -> bool:
    with get_connection(db) as conn:
        cur = conn.execute("DELETE FROM tags WHERE id = ?", (tag_id,))
        return cur.rowcount > 0
