"""Storage of sentence pairs."""

from __future__ import annotations

import sqlite3
from typing import Iterable, List, Optional, Sequence

from satzlern.lookups import NIVEAUS
from satzlern.schemas import NewSatz, Row, Satz, parse_timestamp

_COLUMNS = "id, setze_spanisch, setze_deutsch, niveau_id, thema, created_at, deleted_at"

_INSERT = f"""
    INSERT INTO setze (setze_spanisch, setze_deutsch, niveau_id, thema)
        VALUES (?1, ?2, ?3, ?4)
    RETURNING {_COLUMNS};
"""


def _placeholders(count: int) -> str:
    return ",".join("?" * count)


def _satz_from_row(row: Row) -> Satz:
    created_at = parse_timestamp(row[5])
    if created_at is None:
        raise ValueError("sentence row has no created_at timestamp")
    return Satz(
        id=row[0],
        setze_spanisch=row[1],
        setze_deutsch=row[2],
        niveau_id=NIVEAUS.from_id(row[3]),
        thema=row[4],
        created_at=created_at,
        deleted_at=parse_timestamp(row[6]),
    )


def _first_column(rows: Iterable[Row]) -> List:
    return [row[0] for row in rows]


def fetch_all_themas(conn: sqlite3.Connection) -> List[str]:
    """Distinct topics of the sentences that are not deleted, in insertion order."""
    rows = conn.execute(
        """
        SELECT DISTINCT(thema)
        FROM setze s
        WHERE s.deleted_at IS NULL
        ORDER BY s.id
        """
    )
    return _first_column(rows)


def fetch_all_only_ids(conn: sqlite3.Connection) -> List[int]:
    """Ids of every sentence that is not deleted."""
    rows = conn.execute("SELECT id FROM setze s WHERE s.deleted_at IS NULL")
    return _first_column(rows)


def fetch_id_schwirig_thema(
    conn: sqlite3.Connection, titles: Optional[Sequence[str]] = None
) -> List[int]:
    """Ids of hard sentences (level B2 and above), optionally limited to some topics."""
    if titles:
        sql = f"""
            SELECT id
            FROM setze
            WHERE thema IN ({_placeholders(len(titles))})
                AND niveau_id >= 3 AND deleted_at IS NULL
            ORDER BY id
        """
        params: tuple = tuple(titles)
    else:
        sql = """
            SELECT id
            FROM setze
            WHERE niveau_id >= 3 AND deleted_at IS NULL
            ORDER BY id
        """
        params = ()
    return _first_column(conn.execute(sql, params))


def fetch_id_neue_sentences(conn: sqlite3.Connection) -> List[int]:
    """Ids of sentences that have never been reviewed."""
    rows = conn.execute(
        """
        SELECT s.id
        FROM setze s
        WHERE NOT EXISTS (
            SELECT 1 FROM setze_review sr WHERE sr.satz_id = s.id
        )
        AND s.deleted_at IS NULL
        ORDER BY s.id ASC
        """
    )
    return _first_column(rows)


def bulk_insert(conn: sqlite3.Connection, data: Sequence[NewSatz]) -> List[Satz]:
    """Insert the sentences in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(conn: sqlite3.Connection, data: Sequence[NewSatz]) -> List[Satz]:
    """Insert the sentences inside the caller's transaction."""
    return [
        _satz_from_row(conn.execute(_INSERT, item.as_params()).fetchall()[0])
        for item in data
    ]


def fetch_id_where_thema(conn: sqlite3.Connection, titles: Sequence[str]) -> List[int]:
    """Ids of the sentences in the given topics, ordered by the German text."""
    sql = f"""
        SELECT id
        FROM setze
        WHERE thema IN ({_placeholders(len(titles))})
        ORDER BY setze_deutsch
    """
    return _first_column(conn.execute(sql, tuple(titles)))


def fetch_by_id(conn: sqlite3.Connection, ids: Sequence[int]) -> List[Satz]:
    """The sentences with the given ids, ordered by the German text."""
    if not ids:
        return []
    sql = f"""
        SELECT {_COLUMNS}
        FROM setze
        WHERE id IN ({_placeholders(len(ids))})
        ORDER BY setze_deutsch
    """
    return [_satz_from_row(row) for row in conn.execute(sql, tuple(ids))]


def fetch_setze_without_audio(conn: sqlite3.Connection) -> List[Satz]:
    """Sentences that are not deleted and have no audio attached."""
    rows = conn.execute(
        """
        SELECT
            s.id, s.setze_spanisch, s.setze_deutsch, s.niveau_id,
            s.thema, s.created_at, s.deleted_at
        FROM setze s
        LEFT JOIN setze_audio sa ON s.id = sa.satz_id
        WHERE s.deleted_at IS NULL AND sa.satz_id IS NULL
        ORDER BY s.id ASC
        """
    )
    return [_satz_from_row(row) for row in rows]