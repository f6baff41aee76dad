"""
schema.py - Schema creation helpers
Single responsibility: define and apply database schema.
"""
import logging

from todo_tui.database.connection import Database, get_connection

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS groups (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT    NOT NULL UNIQUE,
    description TEXT,
    color       TEXT,
    created_at  TEXT    NOT NULL,
    updated_at  TEXT    NOT NULL
);

CREATE TABLE IF NOT EXISTS tags (
    id         INTEGER PRIMARY KEY AUTOINCREMENT,
    name       TEXT    NOT NULL UNIQUE,
    color      TEXT,
    created_at TEXT    NOT NULL
);

CREATE TABLE IF NOT EXISTS items (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    title        TEXT    NOT NULL,
    description  TEXT,
    status       TEXT    NOT NULL DEFAULT 'pending'
                 CHECK (status IN ('pending', 'in_progress', 'completed', 'blocked')),
    priority     INTEGER NOT NULL DEFAULT 2
                 CHECK (priority IN (1, 2, 3)),
    group_id     INTEGER REFERENCES groups(id) ON DELETE SET NULL,
    tag_id       INTEGER REFERENCES tags(id) ON DELETE SET NULL,
    start_date   TEXT,
    due_date     TEXT,
    completed_at TEXT,
    created_at   TEXT    NOT NULL,
    updated_at   TEXT    NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_items_status
    ON items(status);
CREATE INDEX IF NOT EXISTS idx_items_group_id
    ON items(group_id);
CREATE INDEX IF NOT EXISTS idx_items_tag_id
    ON items(tag_id);
CREATE INDEX IF NOT EXISTS idx_items_due_date
    ON items(due_date);
"""


def initialize_schema(db: Database) -> None:
    """Create tables and indexes if missing."""
    try:
        with get_connection(db) as conn:
            conn.executescript(SCHEMA_SQL)
    except Exception as e:
        logger.error("Failed to initialize database schema: %s", e)
        raise
