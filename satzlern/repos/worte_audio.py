"""Storage of the audio files attached to words."""

from __future__ import annotations

import sqlite3
from typing import List, Sequence

from satzlern.schemas import NewWorteAudio, WorteAudio

_UPSERT = """
    INSERT INTO worte_audio (wort_id, file_path, voice_id)
        VALUES (?1, ?2, ?3)
    ON CONFLICT(wort_id) DO UPDATE SET file_path = ?2, voice_id = ?3
    RETURNING wort_id, file_path, voice_id, created_at, deleted_at;
"""


def bulk_insert(conn: sqlite3.Connection, data: Sequence[NewWorteAudio]) -> List[WorteAudio]:
    """Insert or update the rows in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(
    conn: sqlite3.Connection, data: Sequence[NewWorteAudio]
) -> List[WorteAudio]:
    """Insert or update the rows inside the caller's transaction."""
    return [
        WorteAudio.from_row(conn.execute(_UPSERT, item.as_params()).fetchall()[0])
        for item in data
    ]


def fetch_by_id(conn: sqlite3.Connection, ids: Sequence[int]) -> List[WorteAudio]:
    """Audio rows of the given words that are not deleted, ordered by word id."""
    if not ids:
        return []
    placeholders = ",".join("?" * len(ids))
    sql = f"""
        SELECT wort_id, file_path, voice_id, created_at, deleted_at
        FROM worte_audio
        WHERE wort_id IN ({placeholders})
            AND deleted_at IS NULL
        ORDER BY wort_id
    """
    return [WorteAudio.from_row(row) for row in conn.execute(sql, tuple(ids))]