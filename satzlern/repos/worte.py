"""Storage of vocabulary words."""

from __future__ import annotations

import sqlite3
from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence

from satzlern.lookups import GENDERS, GRAM_TYPES, NIVEAUS
from satzlern.repos import worte_gram_type
from satzlern.schemas import NewWort, NewWorteGramType, Row, Wort, parse_timestamp

_COLUMNS = (
    "id, gender_id, wort_de, wort_es, plural, niveau_id, example_de, "
    "example_es, verb_aux, trennbar, reflexiv, created_at, deleted_at"
)

_INSERT = f"""
    INSERT INTO worte
        (gender_id, wort_de, wort_es, plural, niveau_id, example_de, example_es,
         verb_aux, trennbar, reflexiv)
    VALUES (?1, ?2, ?3, ?4, ?5, ?6, ?7, ?8, ?9, ?10)
    RETURNING {_COLUMNS};
"""


def _optional_bool(value: Any) -> Optional[bool]:
    return None if value is None else bool(value)


def _wort_from_row(row: Row) -> Wort:
    created_at = parse_timestamp(row[11])
    if created_at is None:
        raise ValueError("word row has no created_at timestamp")
    gender = GENDERS.from_id(row[1]) if row[1] is not None else None
    return Wort(
        id=row[0],
        gender_id=gender,
        worte_de=row[2],
        worte_es=row[3],
        plural=row[4],
        niveau_id=NIVEAUS.from_id(row[5]),
        example_de=row[6],
        example_es=row[7],
        verb_aux=row[8],
        trennbar=_optional_bool(row[9]),
        reflexiv=_optional_bool(row[10]),
        created_at=created_at,
        deleted_at=parse_timestamp(row[12]),
    )


def bulk_insert(conn: sqlite3.Connection, data: Sequence[NewWort]) -> List[Wort]:
    """Insert the words and their grammatical types in one committed transaction."""
    with conn:
        return bulk_insert_tx(conn, data)


def bulk_insert_tx(conn: sqlite3.Connection, data: Sequence[NewWort]) -> List[Wort]:
    """Insert the words and their grammatical types inside the caller's transaction."""
    words = [
        _wort_from_row(conn.execute(_INSERT, item.as_params()).fetchall()[0])
        for item in data
    ]
    links: List[NewWorteGramType] = []
    for wort, item in zip(words, data):
        for gram_type_id in item.gram_type:
            links.append(NewWorteGramType(id_worte=wort.id, id_gram_type=gram_type_id))
            wort.gram_type_id.append(GRAM_TYPES.from_id(gram_type_id))
    worte_gram_type.bulk_insert_tx(conn, links)
    return words


def fetch_id_neue_worte(conn: sqlite3.Connection) -> List[int]:
    """Ids of words that have never been reviewed."""
    rows = conn.execute(
        """
        SELECT w.id
        FROM worte w
        WHERE NOT EXISTS (
            SELECT 1 FROM worte_review wr WHERE wr.wort_id = w.id
        )
        AND w.deleted_at IS NULL
        ORDER BY w.id ASC
        """
    )
    return [row[0] for row in rows]


def fetch_by_id(conn: sqlite3.Connection, ids: Sequence[int]) -> List[Wort]:
    """Words with the given ids that are not deleted, with their grammatical types."""
    if not ids:
        return []
    placeholders = ",".join("?" * len(ids))
    sql = f"""
        SELECT {_COLUMNS}
        FROM worte w
        WHERE w.deleted_at IS NULL
            AND w.id IN ({placeholders})
        ORDER BY w.id
    """
    words = [_wort_from_row(row) for row in conn.execute(sql, tuple(ids))]

    types_by_word: Dict[int, List[int]] = defaultdict(list)
    for link in worte_gram_type.fetch_by_wort_id(conn, ids):
        types_by_word[link.id_worte].append(link.id_gram_type)

    for wort in words:
        wort.gram_type_id.extend(
            GRAM_TYPES.from_id(gram_type_id) for gram_type_id in types_by_word.get(wort.id, [])
        )
    return words


def fetch_worte_without_audio(conn: sqlite3.Connection) -> List[Wort]:
    """Words that are not deleted and have no audio attached."""
    rows = conn.execute(
        """
        SELECT
            w.id, w.gender_id, w.wort_de, w.wort_es, w.plural, w.niveau_id,
            w.example_de, w.example_es, w.verb_aux, w.trennbar, w.reflexiv,
            w.created_at, w.deleted_at
        FROM worte w
        LEFT JOIN worte_audio wa ON w.id = wa.wort_id
        WHERE w.deleted_at IS NULL AND wa.wort_id IS NULL
        ORDER BY w.id ASC
        """
    )
    return [_wort_from_row(row) for row in rows]