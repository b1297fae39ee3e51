"""Storage of the audio files attached to sentences."""

from __future__ import annotations

import sqlite3
from typing import List, Sequence

from satzlern.schemas import NewSetzeAudio, SetzeAudio

_UPSERT = """
    INSERT INTO setze_audio (satz_id, file_path, voice_id)
        VALUES (?1, ?2, ?3)
    ON CONFLICT(satz_id) DO UPDATE SET file_path = ?2, voice_id = ?3
    RETURNING satz_id, file_path, voice_id, created_at, deleted_at;
"""


def bulk_insert(conn: sqlite3.Connection, data: Sequence[NewSetzeAudio]) -> List[SetzeAudio]:
    """Insert or update the rows in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(
    conn: sqlite3.Connection, data: Sequence[NewSetzeAudio]
) -> List[SetzeAudio]:
    """Insert or update the rows inside the caller's transaction."""
    return [
        SetzeAudio.from_row(conn.execute(_UPSERT, item.as_params()).fetchall()[0])
        for item in data
    ]


def fetch_by_id(conn: sqlite3.Connection, ids: Sequence[int]) -> List[SetzeAudio]:
    """Audio rows of the given sentences that are not deleted, ordered by sentence id."""
    if not ids:
        return []
    placeholders = ",".join("?" * len(ids))
    sql = f"""
        SELECT satz_id, file_path, voice_id, created_at, deleted_at
        FROM setze_audio
        WHERE satz_id IN ({placeholders})
            AND deleted_at IS NULL
        ORDER BY satz_id
    """
    return [SetzeAudio.from_row(row) for row in conn.execute(sql, tuple(ids))]