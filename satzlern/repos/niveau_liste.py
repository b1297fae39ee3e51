"""Storage of language levels."""

from __future__ import annotations

import sqlite3
from typing import List, Sequence

from satzlern.schemas import NewNiveauListe, NiveauListe

_UPSERT = """
    INSERT INTO niveau_liste (id, niveau)
        VALUES (?1, ?2)
    ON CONFLICT(id) DO UPDATE SET niveau = ?2
    RETURNING id, niveau, created_at, deleted_at;
"""


def bulk_insert(conn: sqlite3.Connection, data: Sequence[NewNiveauListe]) -> List[NiveauListe]:
    """Insert or update the rows in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(
    conn: sqlite3.Connection, data: Sequence[NewNiveauListe]
) -> List[NiveauListe]:
    """Insert or update the rows inside the caller's transaction."""
    return [
        NiveauListe.from_row(conn.execute(_UPSERT, item.as_params()).fetchall()[0])
        for item in data
    ]