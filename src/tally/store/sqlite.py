"""SQLite storage for key-value pairs."""

import asyncio
import sqlite3
import threading
from pathlib import Path

from ..errors import StoreUnavailable
from .base import KVStore


class SQLiteKVStore(KVStore):
    """Persistent key-value storage using SQLite.

    Values live in a single two-column table. Calls run in a worker thread
    so the event loop is never blocked on disk I/O; a lock serializes access
    to the shared connection.
    """

    def __init__(self, db_path: Path) -> None:
        """Initialize the store with a database path.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create the database connection."""
        if self._conn is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
        return self._conn

    def init_db(self) -> None:
        """Create the kv table if it doesn't exist.

        Raises:
            StoreUnavailable: If the database can't be opened or created.
        """
        try:
            self._init_db()
        except (sqlite3.Error, OSError) as e:
            raise StoreUnavailable(f"Cannot open {self.db_path}: {e}") from e

    def _init_db(self) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key    TEXT PRIMARY KEY,
                    value  TEXT NOT NULL
                )
            """)
            conn.commit()

    def _get(self, key: str) -> str | None:
        with self._lock:
            conn = self._get_connection()
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def _put(self, key: str, value: str) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute(
                """
                INSERT INTO kv (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            conn.commit()

    async def get(self, key: str) -> str | None:
        try:
            return await asyncio.to_thread(self._get, key)
        except (sqlite3.Error, OSError) as e:
            raise StoreUnavailable(f"Read of '{key}' failed: {e}") from e

    async def put(self, key: str, value: str) -> None:
        try:
            await asyncio.to_thread(self._put, key, value)
        except (sqlite3.Error, OSError) as e:
            raise StoreUnavailable(f"Write of '{key}' failed: {e}") from e

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
