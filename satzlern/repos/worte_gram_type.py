"""Storage of the links between words and grammatical types."""

from __future__ import annotations

import sqlite3
from typing import List, Sequence

from satzlern.schemas import NewWorteGramType, WorteGramType

_INSERT = """
    INSERT INTO worte_gram_type (id_worte, id_gram_type)
        VALUES (?1, ?2)
    RETURNING id_worte, id_gram_type, created_at, deleted_at;
"""


def bulk_insert(
    conn: sqlite3.Connection, data: Sequence[NewWorteGramType]
) -> List[WorteGramType]:
    """Insert the links in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(
    conn: sqlite3.Connection, data: Sequence[NewWorteGramType]
) -> List[WorteGramType]:
    """Insert the links inside the caller's transaction."""
    return [
        WorteGramType.from_row(conn.execute(_INSERT, item.as_params()).fetchall()[0])
        for item in data
    ]


def fetch_by_wort_id(conn: sqlite3.Connection, ids: Sequence[int]) -> List[WorteGramType]:
    """Links of the given words that are not deleted, ordered by word id."""
    if not ids:
        return []
    placeholders = ",".join("?" * len(ids))
    sql = f"""
        SELECT id_worte, id_gram_type, created_at, deleted_at
        FROM worte_gram_type wgt
        WHERE wgt.deleted_at IS NULL
            AND wgt.id_worte IN ({placeholders})
        ORDER BY wgt.id_worte
    """
    return [WorteGramType.from_row(row) for row in conn.execute(sql, tuple(ids))]