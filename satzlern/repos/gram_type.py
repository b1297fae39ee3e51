"""Storage of grammatical types."""

from __future__ import annotations

import sqlite3
from typing import List, Sequence

from satzlern.schemas import GramType, NewGramType

_COLUMNS = "id, code, name, created_at, deleted_at"

# A clash on the id rewrites both fields; a clash on the code only renames.
_UPSERT_SQL = (
    "INSERT INTO gram_type (id, code, name) VALUES (?, ?, ?) "
    "ON CONFLICT (id) DO UPDATE SET code = excluded.code, name = excluded.name "
    "ON CONFLICT (code) DO UPDATE SET name = excluded.name "
    f"RETURNING {_COLUMNS}"
)


def _upsert(conn: sqlite3.Connection, item: NewGramType) -> GramType:
    (row,) = conn.execute(_UPSERT_SQL, item.as_params()).fetchall()
    return GramType.from_row(row)


def bulk_insert(conn: sqlite3.Connection, data: Sequence[NewGramType]) -> List[GramType]:
    """Insert or update the rows in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(conn: sqlite3.Connection, data: Sequence[NewGramType]) -> List[GramType]:
    """Insert or update the rows inside the caller's transaction."""
    return [_upsert(conn, item) for item in data]