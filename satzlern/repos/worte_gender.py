"""Storage of noun genders."""

from __future__ import annotations

import sqlite3
from typing import List, Sequence

from satzlern.schemas import NewWorteGender, WorteGender

_UPSERT = """
    INSERT INTO worte_gender (id, gender, artikel)
        VALUES (?1, ?2, ?3) ON CONFLICT(id) DO UPDATE SET gender = ?2, artikel = ?3
    RETURNING id, gender, artikel, created_at, deleted_at;
"""


def bulk_insert(conn: sqlite3.Connection, data: Sequence[NewWorteGender]) -> List[WorteGender]:
    """Insert or update the rows in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(
    conn: sqlite3.Connection, data: Sequence[NewWorteGender]
) -> List[WorteGender]:
    """Insert or update the rows inside the caller's transaction."""
    return [
        WorteGender.from_row(conn.execute(_UPSERT, item.as_params()).fetchall()[0])
        for item in data
    ]