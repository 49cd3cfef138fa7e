"""SQLitePreferences — durable, single-file platform store using sqlite3."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from contextlib import closing
from pathlib import Path
from typing import TypeVar

from prefstore import codec

T = TypeVar("T")

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS preferences (
    namespace TEXT NOT NULL,
    key       TEXT NOT NULL,
    kind      TEXT NOT NULL,
    value     TEXT NOT NULL,
    PRIMARY KEY (namespace, key)
)
"""


class SQLitePreferences:
    """Persistent typed preferences backed by a single SQLite file.

    Values are stored as their canonical text next to a type tag, so a
    float read back as an int yields the default just like the in-memory
    store.  Each call opens and closes its own connection.

    Parameters:
        db_path:   Path to the SQLite database file.  Parent directories
                   are created on first use.
        namespace: Scope inside the file, letting several applications
                   share one database.
    """

    def __init__(self, db_path: str | Path, namespace: str = "") -> None:
        self._db_path = Path(db_path)
        self._namespace = namespace
        self._initialized = False

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        if not self._initialized:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self._db_path)
        if not self._initialized:
            try:
                conn.execute(_CREATE_TABLE)
                conn.commit()
            except Exception:
                conn.close()
                raise
            self._initialized = True
        return conn

    def _put(self, key: str, kind: str, text: str) -> None:
        with closing(self._connect()) as conn, conn:
            conn.execute(
                "INSERT OR REPLACE INTO preferences (namespace, key, kind, value) "
                "VALUES (?, ?, ?, ?)",
                (self._namespace, key, kind, text),
            )

    def _fetch(self, key: str, kind: str) -> str | None:
        with closing(self._connect()) as conn:
            row = conn.execute(
                "SELECT kind, value FROM preferences WHERE namespace = ? AND key = ?",
                (self._namespace, key),
            ).fetchone()
        if row is None or row[0] != kind:
            return None
        result: str = row[1]
        return result

    # ── PlatformPreferences protocol ─────────────────────────

    def set_int(self, key: str, value: int) -> None:
        self._put(key, "int", codec.encode_int(value))

    def get_int(self, key: str, default: int) -> int:
        value = _decode(self._fetch(key, "int"), codec.decode_int)
        return default if value is None else value

    def set_float(self, key: str, value: float) -> None:
        self._put(key, "float", codec.encode_float(value))

    def get_float(self, key: str, default: float) -> float:
        value = _decode(self._fetch(key, "float"), codec.decode_float)
        return default if value is None else value

    def set_string(self, key: str, value: str) -> None:
        self._put(key, "string", codec.encode_string(value))

    def get_string(self, key: str, default: str) -> str:
        text = self._fetch(key, "string")
        return default if text is None else text

    def has_key(self, key: str) -> bool:
        with closing(self._connect()) as conn:
            row = conn.execute(
                "SELECT 1 FROM preferences WHERE namespace = ? AND key = ?",
                (self._namespace, key),
            ).fetchone()
        return row is not None

    def delete_key(self, key: str) -> None:
        with closing(self._connect()) as conn, conn:
            conn.execute(
                "DELETE FROM preferences WHERE namespace = ? AND key = ?",
                (self._namespace, key),
            )

    def delete_all(self) -> None:
        with closing(self._connect()) as conn, conn:
            conn.execute(
                "DELETE FROM preferences WHERE namespace = ?",
                (self._namespace,),
            )


def _decode(text: str | None, decode: Callable[[str], T | None]) -> T | None:
    return None if text is None else decode(text)
