"""
groups.py - Group repository
Single responsibility: CRUD for groups.
"""
import sqlite3

from todo_tui.database.connection import Database, get_connection
from todo_tui.domain.errors import DuplicateNameError, NotFoundError
from todo_tui.domain.models import Group
from todo_tui.utils.time import now_iso


def _row_to_group(r) -> Group:
    return Group(
        id=r["id"],
        name=r["name"],
        description=r["description"],
        color=r["color"],
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


def create(db: Database, g: Group) -> int:
    try:
        with get_connection(db) as conn:
            cur = conn.execute(
                "INSERT INTO groups (name, description, color, created_at, updated_at)"
                " VALUES (?, ?, ?, ?, ?)",
                (
                    g.name,
                    g.description,
                    g.color,
                    g.created_at or now_iso(),
                    g.updated_at or now_iso(),
                ),
            )
            return cur.lastrowid
    except sqlite3.IntegrityError as e:
        if "UNIQUE" in str(e):
            raise DuplicateNameError("group", g.name) from e
        raise


def update(db: Database, g: Group) -> None:
    try:
        with get_connection(db) as conn:
            cur = conn.execute(
                "UPDATE groups SET name = ?, description = ?, color = ?, updated_at = ? WHERE id = ?",
                (g.name, g.description, g.color, now_iso(), g.id),
            )
            if cur.rowcount == 0:
                raise NotFoundError("group", g.id)
    except sqlite3.IntegrityError as e:
        if "UNIQUE" in str(e):
            raise DuplicateNameError("group", g.name) from e
        raise


def get(db: Database, group_id: int) -> Group | None:
    with get_connection(db) as conn:
        row = conn.execute("SELECT * FROM groups WHERE id = ?", (group_id,)).fetchone()
        if not row:
            return None
        return _row_to_group(row)


def list_all(db: Database) -> list[Group]:
    with get_connection(db) as conn:
        rows = conn.execute("SELECT * FROM groups ORDER BY name").fetchall()
        return [_row_to_group(r) for r in rows]


def delete(db: Database, group_id: int) -> bool:
    # items.group_id is ON DELETE SET NULL
    with get_connection(db) as conn:
        cur = conn.execute("DELETE FROM groups WHERE id = ?", (group_id,))
        return cur.rowcount > 0
