import sqlite3

import pytest

from satzlern.connection import open_memory_db
from satzlern.repos import setze, setze_audio, setze_review
from satzlern.schemas import NewSatz, NewSetzeAudio, NewSetzeReview
from satzlern.seeders import init_data


def _insert_data():
    return [
        NewSatz(setze_spanisch="Hola", setze_deutsch="Hallo", niveau_id=1, thema="Thema 1"),
        NewSatz(setze_spanisch="Adios", setze_deutsch="Tschüss", niveau_id=2, thema="Thema 2"),
    ]


def _fetch_data():
    return [
        NewSatz(setze_spanisch="Hola", setze_deutsch="Hallo", niveau_id=1, thema="Thema 1"),
        NewSatz(setze_spanisch="Adios", setze_deutsch="Tschüss", niveau_id=3, thema="Thema 2"),
    ]


@pytest.fixture
def conn():
    connection = open_memory_db()
    init_data(connection)
    yield connection
    connection.close()


@pytest.fixture
def filled(conn):
    setze.bulk_insert(conn, _fetch_data())
    return conn


def _check_inserted(res):
    assert len(res) == 2
    assert res[0].id == 1
    assert res[0].setze_spanisch == "Hola"
    assert res[0].setze_deutsch == "Hallo"
    assert res[0].niveau_id.id == 1
    assert res[0].thema == "Thema 1"
    assert res[1].id == 2
    assert res[1].setze_spanisch == "Adios"
    assert res[1].setze_deutsch == "Tschüss"
    assert res[1].niveau_id.id == 2
    assert res[1].thema == "Thema 2"
    assert all(s.deleted_at is None for s in res)


def test_bulk_insert(conn):
    _check_inserted(setze.bulk_insert(conn, _insert_data()))


def test_bulk_insert_tx(conn):
    res = setze.bulk_insert_tx(conn, _insert_data())
    conn.commit()
    _check_inserted(res)
    assert setze.fetch_all_only_ids(conn) == [1, 2]


def test_bulk_insert_empty(conn):
    assert setze.bulk_insert(conn, []) == []


def test_bulk_insert_rolls_back_on_bad_level(conn):
    data = [
        NewSatz(setze_spanisch="Hola", setze_deutsch="Hallo", niveau_id=1, thema="Thema 1"),
        NewSatz(setze_spanisch="x", setze_deutsch="y", niveau_id=99, thema="Thema 1"),
    ]
    with pytest.raises(sqlite3.IntegrityError):
        setze.bulk_insert(conn, data)
    assert setze.fetch_all_only_ids(conn) == []


def test_fetch_by_id(filled):
    assert setze.fetch_by_id(filled, []) == []

    res = setze.fetch_by_id(filled, [1, 2])
    assert len(res) == 2
    assert res[0].id == 1
    assert res[0].setze_spanisch == "Hola"
    assert res[0].setze_deutsch == "Hallo"
    assert res[0].niveau_id.id == 1
    assert res[0].thema == "Thema 1"
    assert res[1].id == 2
    assert res[1].setze_spanisch == "Adios"
    assert res[1].setze_deutsch == "Tschüss"
    assert res[1].niveau_id.id == 3
    assert res[1].thema == "Thema 2"

    assert setze.fetch_by_id(filled, [99]) == []


def test_fetch_id_where_thema(filled):
    assert setze.fetch_id_where_thema(filled, []) == []
    assert setze.fetch_id_where_thema(filled, ["Thema 1", "Thema 2"]) == [1, 2]
    assert setze.fetch_id_where_thema(filled, ["Thema 99"]) == []


def test_fetch_id_schwirig_thema(filled):
    assert setze.fetch_id_schwirig_thema(filled, None) == [2]
    assert setze.fetch_id_schwirig_thema(filled, ["Thema 1"]) == []
    assert setze.fetch_id_schwirig_thema(filled, ["Thema 2"]) == [2]


def test_fetch_id_schwirig_thema_empty_titles_means_all(filled):
    assert setze.fetch_id_schwirig_thema(filled, []) == setze.fetch_id_schwirig_thema(filled)


def test_fetch_all_only_ids(filled):
    assert setze.fetch_all_only_ids(filled) == [1, 2]


def test_fetch_all_only_ids_skips_deleted(filled):
    filled.execute("UPDATE setze SET deleted_at = CURRENT_TIMESTAMP WHERE id = 1")
    filled.commit()
    assert setze.fetch_all_only_ids(filled) == [2]


def test_fetch_all_themas(filled):
    assert setze.fetch_all_themas(filled) == ["Thema 1", "Thema 2"]


def test_fetch_all_themas_is_distinct(filled):
    setze.bulk_insert(
        filled,
        [NewSatz(setze_spanisch="Si", setze_deutsch="Ja", niveau_id=0, thema="Thema 1")],
    )
    assert setze.fetch_all_themas(filled) == ["Thema 1", "Thema 2"]


def test_fetch_neue_sentences(filled):
    assert setze.fetch_id_neue_sentences(filled) == [1, 2]

    setze_review.bulk_insert(
        filled,
        [
            NewSetzeReview(
                satz_id=1,
                repetitions=1,
                ease_factor=2.0,
                interval=1,
                last_review="2025-01-10 12:00:00",
                next_review="2025-01-10 12:00:00",
            )
        ],
    )

    assert setze.fetch_id_neue_sentences(filled) == [2]


def test_fetch_setze_without_audio(filled):
    assert [s.id for s in setze.fetch_setze_without_audio(filled)] == [1, 2]
    setze_audio.bulk_insert(
        filled, [NewSetzeAudio(satz_id=1, file_path="1.mp3", voice_id="voice_1")]
    )
    res = setze.fetch_setze_without_audio(filled)
    assert [s.id for s in res] == [2]
    assert res[0].setze_deutsch == "Tschüss"