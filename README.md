# satzlern

A storage layer for practising German with Spanish translations. It keeps
sentences, words, their audio file records and their spaced-repetition review
state in one SQLite database, using only the Python standard library
(`sqlite3`).

## Installation

```
pip install .
```

Python 3.10 or newer is required.

## What is stored

- **Reference tables**: language levels (`NiveauListe`: A1 to C2, ids 0 to 5),
  noun genders (`WorteGender`: Maskuline/der, Femenin/die, Neutrum/das,
  Plural/die, ids 0 to 3) and grammatical types (`GramType`: `noun_common`,
  `verb_main`, `adjective`, and so on, ids 0 to 40).
- **Sentences** (`Satz`) with a Spanish and a German text, a topic (`thema`)
  and a level.
- **Words** (`Wort`) with gender, plural, examples and verb details (auxiliary
  verb, separable, reflexive), linked to any number of grammatical types.
- **Audio records** for sentences and words (`SetzeAudio`, `WorteAudio`): a file
  path and a voice id per item.
- **Review state** for sentences and words (`SetzeReview`, `WorteReview`):
  interval, ease factor, repetitions and the last and next review timestamps.

Every record type has a matching `New…` dataclass (`NewSatz`, `NewWort`,
`NewWorteReview`, …) used for inserts. All of them live in `satzlern.schemas`.

## Usage

```python
from satzlern.connection import open_memory_db
from satzlern.seeders import init_db
from satzlern.schemas import NewSatz, NewWort, NewWorteReview
from satzlern.repos import setze, worte, worte_review

conn = open_memory_db()
init_db(conn)  # create tables, write the reference rows, load the lookups

setze.bulk_insert(conn, [
    NewSatz(setze_spanisch="Tengo un perro", setze_deutsch="Ich habe einen Hund",
            niveau_id=0, thema="Akkusativ"),
])
print(setze.fetch_all_themas(conn))         # ['Akkusativ']
print(setze.fetch_id_neue_sentences(conn))  # [1]: never reviewed

[hund] = worte.bulk_insert(conn, [
    NewWort(gram_type=[0], gender_id=0, worte_de="Hund", worte_es="perro",
            plural="Hunde", niveau_id=0, example_de="Der Hund spielt.",
            example_es="El perro juega."),
])
print(hund.gender_id.artikel)               # 'der'
print([g.code for g in hund.gram_type_id])  # ['noun_common']

worte_review.bulk_insert(conn, [
    NewWorteReview(wort_id=hund.id, interval=1, ease_factor=2.5, repetitions=1,
                   last_review="2025-01-10 12:00:00",
                   next_review="2025-01-11 12:00:00"),
])
print(worte_review.fetch_review_wort_id_by_day(conn, "2025-01-12"))  # [1]
```

### Connections

`satzlern.connection` provides:

- `open_connection(path)`: open or create a database file.
- `open_memory_db()`: a fresh in-memory database with every table created.
- `get_connection()`: the process-wide connection to `anki_satze.sql` in the
  working directory, opened on first use.

`satzlern.schemas.init_schemas(conn)` turns on foreign keys and creates every
table and index that is missing. `satzlern.seeders.init_db(conn=None)` does
that and then `init_data(conn)`; without an argument it uses `get_connection()`.

### Reference lookups

Levels, genders and grammatical types are resolved through in-memory tables in
`satzlern.lookups`: `NIVEAUS`, `GENDERS` and `GRAM_TYPES`, each a
`ReferenceTable` with `from_id`, `from_key` (by `niveau`, `gender` or `code`),
`register` and `clear`. A missing entry raises `ReferenceNotFound`.

These tables are filled by `init_data`. Reading sentences or words resolves
their level, gender and grammatical types through them, so `init_data` (or
`init_db`) must have run in the current process before rows are read.

### Repositories

Each module under `satzlern.repos` covers one table:

| Module | Functions |
| --- | --- |
| `gram_type`, `niveau_liste`, `worte_gender` | `bulk_insert`, `bulk_insert_tx` (insert or update by id) |
| `setze` | `bulk_insert`, `bulk_insert_tx`, `fetch_by_id`, `fetch_all_only_ids`, `fetch_all_themas`, `fetch_id_where_thema`, `fetch_id_schwirig_thema` (level B2 and up, optionally by topic), `fetch_id_neue_sentences`, `fetch_setze_without_audio` |
| `setze_audio`, `worte_audio` | `bulk_insert`, `bulk_insert_tx` (insert or update), `fetch_by_id` |
| `setze_review` | `bulk_insert`, `bulk_insert_tx` (insert or update), `fetch_by_satz_id`, `fetch_review_satz_id_by_day` |
| `worte` | `bulk_insert`, `bulk_insert_tx` (also writes the grammatical-type links), `fetch_by_id`, `fetch_id_neue_worte`, `fetch_worte_without_audio` |
| `worte_gram_type` | `bulk_insert`, `bulk_insert_tx`, `fetch_by_wort_id` |
| `worte_review` | `bulk_insert`, `bulk_insert_tx` (insert or update), `fetch_by_wort_id`, `fetch_review_wort_id_by_day` |

`bulk_insert` runs in its own committed transaction; `bulk_insert_tx` runs
inside the caller's open transaction and leaves committing to the caller.
Queries skip rows whose `deleted_at` is set, except `fetch_id_where_thema` and
`setze.fetch_by_id`, which return every matching sentence.

## What this package does not do

It is storage only. There is no command-line program or interactive menu, no
practice session that asks questions, no CSV import, no calculation of review
intervals (callers supply `interval`, `ease_factor` and the review timestamps),
and no generation, download or deletion of audio files: audio records hold a
path, nothing more.

## Running the tests

```
pip install ".[test]"
pytest
```