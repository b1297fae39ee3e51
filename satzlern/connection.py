"""Opening SQLite connections for the store."""

from __future__ import annotations

import sqlite3
import threading
from os import PathLike
from typing import Optional, Union

from satzlern.schemas import init_schemas

DB_NAME = "anki_satze.sql"

_shared: Optional[sqlite3.Connection] = None
_shared_lock = threading.Lock()


def open_connection(path: Union[str, PathLike]) -> sqlite3.Connection:
    """Open (creating if needed) the database file at ``path``."""
    return sqlite3.connect(path, check_same_thread=False)


def open_memory_db() -> sqlite3.Connection:
    """Open a fresh in-memory database with every table created."""
    conn = sqlite3.connect(":memory:")
    init_schemas(conn)
    return conn


def get_connection() -> sqlite3.Connection:
    """Return the process-wide connection to the default database file."""
    global _shared
    with _shared_lock:
        if _shared is None:
            try:
                _shared = open_connection(DB_NAME)
            except sqlite3.Error as exc:
                raise RuntimeError(
                    f"cannot open or create the SQLite database {DB_NAME!r}"
                ) from exc
        return _shared