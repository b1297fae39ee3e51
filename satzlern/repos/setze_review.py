"""Storage of the spaced-repetition state of sentences."""

from __future__ import annotations

import sqlite3
from typing import List, Sequence

from satzlern.schemas import NewSetzeReview, SetzeReview

_COLUMNS = (
    "id, satz_id, interval, ease_factor, repetitions, "
    "last_review, next_review, created_at, deleted_at"
)

_UPSERT = f"""
    INSERT INTO setze_review (satz_id, interval, ease_factor, repetitions, last_review, next_review)
        VALUES (?1, ?2, ?3, ?4, ?5, ?6)
    ON CONFLICT(satz_id) DO UPDATE SET
        interval = ?2,
        ease_factor = ?3,
        repetitions = ?4,
        last_review = ?5,
        next_review = ?6
    RETURNING {_COLUMNS};
"""


def bulk_insert(
    conn: sqlite3.Connection, data: Sequence[NewSetzeReview]
) -> List[SetzeReview]:
    """Insert or update the review states in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(
    conn: sqlite3.Connection, data: Sequence[NewSetzeReview]
) -> List[SetzeReview]:
    """Insert or update the review states inside the caller's transaction."""
    return [
        SetzeReview.from_row(conn.execute(_UPSERT, item.as_params()).fetchall()[0])
        for item in data
    ]


def fetch_by_satz_id(conn: sqlite3.Connection, ids: Sequence[int]) -> List[SetzeReview]:
    """Review states of the given sentences that are not deleted."""
    placeholders = ",".join("?" * len(ids))
    sql = f"""
        SELECT {_COLUMNS}
        FROM setze_review sr
        WHERE sr.deleted_at IS NULL
            AND sr.satz_id IN ({placeholders})
    """
    return [SetzeReview.from_row(row) for row in conn.execute(sql, tuple(ids))]


def fetch_review_satz_id_by_day(conn: sqlite3.Connection, date_review: str) -> List[int]:
    """Ids of sentences due before ``date_review``, earliest first."""
    rows = conn.execute(
        """
        SELECT satz_id
        FROM setze_review
        WHERE next_review < ?1
            AND deleted_at IS NULL
        ORDER BY next_review ASC
        """,
        (date_review,),
    )
    return [row[0] for row in rows]