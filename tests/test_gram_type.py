import sqlite3
from datetime import datetime

import pytest

from satzlern.connection import open_memory_db
from satzlern.repos import gram_type
from satzlern.schemas import NewGramType


def _via_tx(conn, data):
    with conn:
        return gram_type.bulk_insert_tx(conn, data)


DATA_1 = [
    NewGramType(id=1, code="123", name="456"),
    NewGramType(id=2, code="987", name="654"),
]
DATA_2 = [
    NewGramType(id=1, code="abc", name="def"),
    NewGramType(id=2, code="987", name="zyw"),
]


@pytest.mark.parametrize("insert", [gram_type.bulk_insert, _via_tx])
def test_bulk_insert_and_update(insert):
    conn = open_memory_db()

    res_1 = insert(conn, DATA_1)
    assert len(res_1) == 2
    assert (res_1[0].id, res_1[0].code, res_1[0].name) == (1, "123", "456")
    assert (res_1[1].id, res_1[1].code, res_1[1].name) == (2, "987", "654")
    assert all(isinstance(r.created_at, datetime) for r in res_1)
    assert all(r.deleted_at is None for r in res_1)

    res_2 = insert(conn, DATA_2)
    assert len(res_2) == 2
    assert (res_2[0].id, res_2[0].code, res_2[0].name) == (1, "abc", "def")
    assert (res_2[1].id, res_2[1].code, res_2[1].name) == (2, "987", "zyw")


def test_empty_input_returns_empty_list():
    conn = open_memory_db()
    assert gram_type.bulk_insert(conn, []) == []


def test_rows_are_persisted():
    conn = open_memory_db()
    gram_type.bulk_insert(conn, DATA_1)
    rows = conn.execute("SELECT id, code, name FROM gram_type ORDER BY id").fetchall()
    assert rows == [(1, "123", "456"), (2, "987", "654")]


def test_conflict_on_code_updates_name():
    conn = open_memory_db()
    gram_type.bulk_insert(conn, DATA_1)
    res = gram_type.bulk_insert(conn, [NewGramType(id=3, code="987", name="zyw")])
    assert (res[0].id, res[0].code, res[0].name) == (2, "987", "zyw")
    count = conn.execute("SELECT COUNT(*) FROM gram_type").fetchone()[0]
    assert count == 2


def test_failure_rolls_back_whole_batch():
    conn = open_memory_db()
    bad = [NewGramType(id=1, code="123", name="456"), NewGramType(id=2, code="x", name=None)]
    with pytest.raises(sqlite3.IntegrityError):
        gram_type.bulk_insert(conn, bad)
    assert conn.execute("SELECT COUNT(*) FROM gram_type").fetchone()[0] == 0