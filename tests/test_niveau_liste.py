from datetime import datetime

import pytest

from satzlern.connection import open_memory_db
from satzlern.repos import niveau_liste
from satzlern.schemas import NewNiveauListe


def _via_tx(conn, data):
    with conn:
        return niveau_liste.bulk_insert_tx(conn, data)


DATA_1 = [NewNiveauListe(id=1, niveau="A1"), NewNiveauListe(id=2, niveau="A2")]
DATA_2 = [NewNiveauListe(id=1, niveau="C1"), NewNiveauListe(id=2, niveau="C2")]


@pytest.mark.parametrize("insert", [niveau_liste.bulk_insert, _via_tx])
def test_bulk_insert_and_update(insert):
    conn = open_memory_db()

    res_1 = insert(conn, DATA_1)
    assert len(res_1) == 2
    assert res_1[0].id == 1
    assert res_1[0].niveau == "A1"
    assert isinstance(res_1[0].created_at, datetime)
    assert res_1[0].deleted_at is None

    res_2 = insert(conn, DATA_2)
    assert len(res_2) == 2
    assert res_2[1].id == 2
    assert res_2[1].niveau == "C2"
    assert res_2[0].niveau == "C1"


def test_empty_input_returns_empty_list():
    conn = open_memory_db()
    assert niveau_liste.bulk_insert(conn, []) == []


def test_update_keeps_row_count():
    conn = open_memory_db()
    niveau_liste.bulk_insert(conn, DATA_1)
    niveau_liste.bulk_insert(conn, DATA_2)
    rows = conn.execute("SELECT id, niveau FROM niveau_liste ORDER BY id").fetchall()
    assert rows == [(1, "C1"), (2, "C2")]