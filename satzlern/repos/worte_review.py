"""Storage of the spaced-repetition state of words."""

from __future__ import annotations

import sqlite3
from typing import List, Sequence

from satzlern.schemas import NewWorteReview, WorteReview

_COLUMNS = (
    "id, wort_id, interval, ease_factor, repetitions, "
    "last_review, next_review, created_at, deleted_at"
)

_UPSERT = f"""
    INSERT INTO worte_review (wort_id, interval, ease_factor, repetitions, last_review, next_review)
        VALUES (?1, ?2, ?3, ?4, ?5, ?6)
    ON CONFLICT(wort_id) DO UPDATE SET
        interval = ?2,
        ease_factor = ?3,
        repetitions = ?4,
        last_review = ?5,
        next_review = ?6
    RETURNING {_COLUMNS};
"""


def bulk_insert(
    conn: sqlite3.Connection, data: Sequence[NewWorteReview]
) -> List[WorteReview]:
    """Insert or update the review states in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(
    conn: sqlite3.Connection, data: Sequence[NewWorteReview]
) -> List[WorteReview]:
    """Insert or update the review states inside the caller's transaction."""
    return [
        WorteReview.from_row(conn.execute(_UPSERT, item.as_params()).fetchall()[0])
        for item in data
    ]


def fetch_by_wort_id(conn: sqlite3.Connection, ids: Sequence[int]) -> List[WorteReview]:
    """Review states of the given words that are not deleted."""
    placeholders = ",".join("?" * len(ids))
    sql = f"""
        SELECT {_COLUMNS}
        FROM worte_review wr
        WHERE wr.deleted_at IS NULL
            AND wr.wort_id IN ({placeholders})
    """
    return [WorteReview.from_row(row) for row in conn.execute(sql, tuple(ids))]


def fetch_review_wort_id_by_day(conn: sqlite3.Connection, date_review: str) -> List[int]:
    """Ids of words due before ``date_review``, earliest first."""
    rows = conn.execute(
        """
        SELECT wort_id
        FROM worte_review
        WHERE next_review < ?1
            AND deleted_at IS NULL
        ORDER BY next_review ASC
        """,
        (date_review,),
    )
    return [row[0] for row in rows]