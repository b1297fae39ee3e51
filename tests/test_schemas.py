import sqlite3
from datetime import datetime, timezone

import pytest

from satzlern.schemas import (
    GramType,
    NewSatz,
    NewSetzeReview,
    NewWort,
    SetzeAudio,
    WorteReview,
    init_schemas,
    parse_timestamp,
)

EXPECTED_TABLES = {
    "worte_gender",
    "niveau_liste",
    "gram_type",
    "setze",
    "setze_review",
    "setze_audio",
    "worte",
    "worte_gram_type",
    "worte_review",
    "worte_audio",
}


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    init_schemas(connection)
    yield connection
    connection.close()


def _tables(connection):
    rows = connection.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return {name for (name,) in rows}


def test_parse_timestamp_sqlite_format():
    assert parse_timestamp("2025-01-10 12:00:00") == datetime(
        2025, 1, 10, 12, 0, 0, tzinfo=timezone.utc
    )


def test_parse_timestamp_none_stays_none():
    assert parse_timestamp(None) is None


def test_parse_timestamp_zulu_and_offset_are_utc():
    zulu = parse_timestamp("2025-12-20T12:00:00Z")
    offset = parse_timestamp("2025-12-20T14:00:00+02:00")
    assert zulu == offset
    assert offset.utcoffset().total_seconds() == 0


def test_parse_timestamp_rejects_garbage():
    with pytest.raises(ValueError):
        parse_timestamp("not a date")


def test_init_schemas_creates_all_tables(conn):
    assert _tables(conn) == EXPECTED_TABLES


def test_init_schemas_is_idempotent(conn):
    init_schemas(conn)
    assert _tables(conn) == EXPECTED_TABLES


def test_init_schemas_enables_foreign_keys(conn):
    assert conn.execute("PRAGMA foreign_keys").fetchone()[0] == 1
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute(
            "INSERT INTO setze (setze_spanisch, setze_deutsch, niveau_id, thema) VALUES (?,?,?,?)",
            NewSatz("Hola", "Hallo", 99, "Thema 1").as_params(),
        )


def test_gram_type_code_is_unique(conn):
    conn.execute("INSERT INTO gram_type (id, code, name) VALUES (1, '123', '456')")
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute("INSERT INTO gram_type (id, code, name) VALUES (2, '123', '654')")


def test_gram_type_from_row_round_trip(conn):
    conn.execute("INSERT INTO gram_type (id, code, name) VALUES (1, '123', '456')")
    row = conn.execute(
        "SELECT id, code, name, created_at, deleted_at FROM gram_type"
    ).fetchone()
    gram = GramType.from_row(row)
    assert (gram.id, gram.code, gram.name) == (1, "123", "456")
    assert gram.created_at.tzinfo == timezone.utc
    assert gram.deleted_at is None


def test_setze_audio_from_row():
    audio = SetzeAudio.from_row(
        (1, "12345.mp3", "voice_1", "2025-01-10 12:00:00", "2025-01-20 12:00:00")
    )
    assert audio.file_path == "12345.mp3"
    assert audio.deleted_at == parse_timestamp("2025-01-20 12:00:00")


def test_review_row_requires_created_at():
    with pytest.raises(ValueError):
        WorteReview.from_row(
            (1, 1, 1, 2.5, 999, "2025-01-10 12:00:00", "2025-01-20 12:00:00", None, None)
        )


def test_review_unique_satz_id(conn):
    conn.execute("INSERT INTO niveau_liste (id, niveau) VALUES (1, 'A1')")
    conn.execute(
        "INSERT INTO setze (setze_spanisch, setze_deutsch, niveau_id, thema) VALUES (?,?,?,?)",
        NewSatz("Hola", "Hallo", 1, "Thema 1").as_params(),
    )
    review = NewSetzeReview(1, 1, 2.0, 1, "2025-01-10 12:00:00", "2025-01-10 12:00:00")
    sql = (
        "INSERT INTO setze_review (satz_id, interval, ease_factor, repetitions, "
        "last_review, next_review) VALUES (?,?,?,?,?,?)"
    )
    conn.execute(sql, review.as_params())
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute(sql, review.as_params())


def test_new_wort_params_exclude_gram_types():
    wort = NewWort(
        gram_type=[2, 3],
        gender_id=None,
        worte_de="laufen",
        worte_es="correr",
        plural=None,
        niveau_id=2,
        example_de="Beispiel",
        example_es="Ejemplo",
        verb_aux="sein",
        trennbar=False,
        reflexiv=False,
    )
    params = wort.as_params()
    assert len(params) == 10
    assert params[1:3] == ("laufen", "correr")
    assert params[-3:] == ("sein", False, False)