"""
items.py - Item repository
Single responsibility: persistence for items.
"""
import sqlite3

from todo_tui.database.connection import Database, get_connection
from todo_tui.domain.errors import InvalidValueError, NotFoundError
from todo_tui.domain.filters import ItemFilter
from todo_tui.domain.models import Item
from todo_tui.utils.time import now_iso


def _row_to_item(r) -> Item:
    return Item(
        id=r["id"],
        title=r["title"],
        description=r["description"],
        status=r["status"],
        priority=r["priority"],
        group_id=r["group_id"],
        tag_id=r["tag_id"],
        start_date=r["start_date"],
        due_date=r["due_date"],
        completed_at=r["completed_at"],
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


def list_items(db: Database, filter: ItemFilter | None = None) -> list[Item]:
    filter = filter or ItemFilter()
    clauses: list[str] = []
    params: list = []

    if filter.status:
        clauses.append("status = ?")
        params.append(filter.status)

    if filter.group_id is not None:
        clauses.append("group_id = ?")
        params.append(filter.group_id)

    if filter.tag_id is not None:
        clauses.append("tag_id = ?")
        params.append(filter.tag_id)

    if filter.start_date_from:
        clauses.append("start_date IS NOT NULL AND start_date >= ?")
        params.append(filter.start_date_from)

    if filter.due_date_to:
        clauses.append("due_date IS NOT NULL AND due_date <= ?")
        params.append(filter.due_date_to)

    where_clause = (" AND ".join(clauses)) if clauses else "1=1"
    order_clause = "ORDER BY created_at DESC, id DESC"

    with get_connection(db) as conn:
        rows = conn.execute(
            f"SELECT * FROM items WHERE {where_clause} {order_clause}", params
        ).fetchall()
        return [_row_to_item(r) for r in rows]


def get_item(db: Database, item_id: int) -> Item | None:
    with get_connection(db) as conn:
        row = conn.execute("SELECT * FROM items WHERE id = ?", (item_id,)).fetchone()
        if not row:
            return None
        return _row_to_item(row)


def create_item(db: Database, item: Item) -> int:
    try:
        with get_connection(db) as conn:
            cur = conn.execute(
                "INSERT INTO items (title, description, status, priority, group_id, tag_id,"
                " start_date, due_date, completed_at, created_at, updated_at)"
                " VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    item.title,
                    item.description,
                    item.status,
                    item.priority,
                    item.group_id,
                    item.tag_id,
                    item.start_date,
                    item.due_date,
                    item.completed_at,
                    item.created_at or now_iso(),
                    item.updated_at or now_iso(),
                ),
            )
            iid = cur.lastrowid
            if iid is None:
                raise RuntimeError("Failed to insert item")
            return iid
    except sqlite3.IntegrityError as e:
        raise InvalidValueError(f"Item rejected by the database: {e}") from e


def update_item(db: Database, item: Item) -> None:
    try:
        with get_connection(db) as conn:
            cur = conn.execute(
                "UPDATE items SET title = ?, description = ?, status = ?, priority = ?,"
                " group_id = ?, tag_id = ?, start_date = ?, due_date = ?, completed_at = ?,"
                " updated_at = ? WHERE id = ?",
                (
                    item.title,
                    item.description,
                    item.status,
                    item.priority,
                    item.group_id,
                    item.tag_id,
                    item.start_date,
                    item.due_date,
                    item.completed_at,
                    now_iso(),
                    item.id,
                ),
            )
            if cur.rowcount == 0:
                raise NotFoundError("item", item.id)
    except sqlite3.IntegrityError as e:
        raise InvalidValueError(f"Item rejected by the database: {e}") from e


def toggle_completion(db: Database, item_id: int) -> str:
    with get_connection(db) as conn:
        row = conn.execute(
            "SELECT status FROM items WHERE id = ?", (item_id,)
        ).fetchone()
        if row is None:
            raise NotFoundError("item", item_id)
        now = now_iso()
        if row["status"] == "completed":
            new_status, completed_at = "pending", None
        else:
            new_status, completed_at = "completed", now
        conn.execute(
            "UPDATE items SET status = ?, completed_at = ?, updated_at = ? WHERE id = ?",
            (new_status, completed_at, now, item_id),
        )
        return new_status


def delete_item(db: Database, item_id: int) -> bool:
    with get_connection(db) as conn:
        cur = conn.execute("DELETE FROM items WHERE id = ?", (item_id,))
        return cur.rowcount > 0


def count_by_group(db: Database) -> dict[int, int]:
    """Return {group_id: item count} over all items, ignoring filters."""
    with get_connection(db) as conn:
        rows = conn.execute(
            "SELECT group_id, COUNT(*) AS cnt FROM items WHERE group_id IS NOT NULL GROUP BY group_id"
        ).fetchall()
        return {r["group_id"]: r["cnt"] for r in rows}


def count_by_tag(db: Database) -> dict[int, int]:
    """Return {tag_id: item count} over all items, ignoring filters."""
    with get_connection(db) as conn:
        rows = conn.execute(
            "SELECT tag_id, COUNT(*) AS cnt FROM items WHERE tag_id IS NOT NULL GROUP BY tag_id"
        ).fetchall()
        return {r["tag_id"]: r["cnt"] for r in rows}
