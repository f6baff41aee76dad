"""
connection.py - DB connection helpers
Single responsibility: manage SQLite connections and pragmas.

A connection lives for exactly one store operation: it is opened, used in a
single transaction and closed before control returns to the caller.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from todo_tui.config import DB_BUSY_TIMEOUT_MS, DB_PATH

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


class Database:
    def __init__(self, path: str = DB_PATH):
        self.path = path
        # an in-memory database vanishes with its last connection, so keep one
        self._shared: sqlite3.Connection | None = None
        if path == MEMORY:
            self._shared = self._open()
        else:
            directory = os.path.dirname(os.path.abspath(path))
            os.makedirs(directory, exist_ok=True)

    def _open(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.path, timeout=10)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            conn.execute(f"PRAGMA busy_timeout = {DB_BUSY_TIMEOUT_MS}")
            if self.path != MEMORY:
                conn.execute("PRAGMA journal_mode = WAL")
            return conn
        except sqlite3.Error as e:
            logger.error("Failed to connect to database at %s: %s", self.path, e)
            raise

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection inside one transaction; commit on success, roll back on error."""
        conn = self._shared or self._open()
        try:
            with conn:
                yield conn
        finally:
            if conn is not self._shared:
                conn.close()

    def close(self) -> None:
        if self._shared is not None:
            self._shared.close()
            self._shared = None


def get_connection(db: Database):
    return db.connect()
