# src/ticklist/storage/prefs_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

logger = logging.getLogger(__name__)


class PrefsStore:
    """
    SQLite-backed local preferences (a durable key -> bytes map).

    Every write replaces the whole value of its key; there is no partial
    update and no transaction spanning several keys.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "prefs.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count_keys()
        except sqlite3.Error:
            total = -1
        logger.info("PrefsStore ready db=%s keys=%s", self._db_path, total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS prefs (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _check_key(key: str) -> str:
        if not key or not key.strip():
            raise ValueError("key is required")
        return key

    # ---- public API ----

    def count_keys(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM prefs")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def keys(self) -> list[str]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT key FROM prefs ORDER BY key ASC")
            return [str(row["key"]) for row in cur.fetchall()]
        finally:
            conn.close()

    def get_data(self, key: str) -> bytes | None:
        key = self._check_key(key)
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT value FROM prefs WHERE key = ?", (key,))
            row = cur.fetchone()
            if row is None:
                return None
            value = row["value"]
            # Rows written by other tools may hold TEXT instead of BLOB.
            return value.encode("utf-8") if isinstance(value, str) else bytes(value)
        finally:
            conn.close()

    def set_data(self, key: str, value: bytes) -> None:
        key = self._check_key(key)
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO prefs(key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, sqlite3.Binary(bytes(value)), time.time()),
            )
            conn.commit()
            logger.debug("Pref written key=%s bytes=%d", key, len(value))
        finally:
            conn.close()

    def remove(self, key: str) -> bool:
        key = self._check_key(key)
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM prefs WHERE key = ?", (key,))
            conn.commit()
            return cur.rowcount == 1
        finally:
            conn.close()
