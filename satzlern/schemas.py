"""Table definitions and record types for the sentence and vocabulary store."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

Row = Sequence[Any]


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored timestamp into an aware UTC datetime; ``None`` stays ``None``."""
    if value is None:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _required_timestamp(value: Optional[str]) -> datetime:
    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError("timestamp is required but missing")
    return parsed


TABLE_WORTE_GENDER = """
CREATE TABLE IF NOT EXISTS worte_gender (
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    gender              TEXT NOT NULL,
    artikel             TEXT NOT NULL,
    created_at          TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at          TEXT
)"""

INDEX_WORTE_GENDER = """
CREATE INDEX IF NOT EXISTS idx_worte_gender_created_at ON worte_gender(created_at);
"""

TABLE_NIVEAU_LISTE = """
CREATE TABLE IF NOT EXISTS niveau_liste (
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    niveau              TEXT NOT NULL,
    created_at          TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at          TEXT
)"""

INDEX_NIVEAU_LISTE = """
CREATE INDEX IF NOT EXISTS idx_niveau_liste_created_at ON niveau_liste(created_at);
"""

TABLE_GRAM_TYPE = """
CREATE TABLE IF NOT EXISTS gram_type(
    id              INTEGER PRIMARY KEY,
    code            TEXT UNIQUE NOT NULL,
    name            TEXT NOT NULL,
    created_at      TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at      TEXT
)"""

INDEX_GRAM_TYPE = """
CREATE INDEX IF NOT EXISTS idx_gram_type_code ON gram_type(code);
"""

TABLE_SETZE = """
CREATE TABLE IF NOT EXISTS setze (
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    setze_spanisch      TEXT NOT NULL,
    setze_deutsch       TEXT NOT NULL,
    thema               TEXT NOT NULL,
    niveau_id           INTEGER NOT NULL,
    created_at          TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at          TEXT,

    FOREIGN KEY(niveau_id) REFERENCES niveau_liste(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE
)"""

INDEX_SETZE = """
CREATE INDEX IF NOT EXISTS idx_setze_setze_spanisch ON setze(setze_spanisch);
CREATE INDEX IF NOT EXISTS idx_setze_setze_deutsch ON setze(setze_deutsch);
CREATE INDEX IF NOT EXISTS idx_setze_thema ON setze(thema);
CREATE INDEX IF NOT EXISTS idx_setze_niveau_id ON setze(niveau_id);
"""

TABLE_SETZE_REVIEW = """
CREATE TABLE IF NOT EXISTS setze_review (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    satz_id         INTEGER NOT NULL UNIQUE,
    interval        INTEGER NOT NULL,
    ease_factor     REAL    NOT NULL,
    repetitions     INTEGER NOT NULL,
    last_review     TEXT NOT NULL,
    next_review     TEXT NOT NULL,
    created_at      TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at      TEXT,

    FOREIGN KEY(satz_id) REFERENCES setze(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE
)"""

INDEX_SETZE_REVIEW = """
CREATE UNIQUE INDEX IF NOT EXISTS idx_setze_review_satz_id ON setze_review(satz_id);
CREATE INDEX IF NOT EXISTS idx_setze_review_next_review ON setze_review(next_review);
"""

TABLE_SETZE_AUDIO = """
CREATE TABLE IF NOT EXISTS setze_audio(
    satz_id      INTEGER PRIMARY KEY,
    file_path    TEXT NOT NULL,
    voice_id     TEXT NOT NULL,
    created_at   TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at   TEXT,

    FOREIGN KEY (satz_id) REFERENCES setze(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE
)"""

INDEX_SETZE_AUDIO = """
CREATE INDEX IF NOT EXISTS idx_setze_audio_voice_id ON setze_audio(voice_id);
"""

TABLE_WORTE = """
CREATE TABLE IF NOT EXISTS worte(
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    gender_id           INTEGER,
    wort_de             TEXT NOT NULL,
    wort_es             TEXT NOT NULL,
    plural              TEXT,
    niveau_id           INTEGER NOT NULL,
    example_de          TEXT,
    example_es          TEXT,

    verb_aux TEXT,
    trennbar BOOLEAN,
    reflexiv BOOLEAN,

    created_at          TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at          TEXT,

    FOREIGN KEY(gender_id) REFERENCES worte_gender(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE,

    FOREIGN KEY(niveau_id) REFERENCES niveau_liste(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE
)"""

INDEX_WORTE = """
CREATE INDEX IF NOT EXISTS idx_worte_created_at ON worte(created_at);
CREATE INDEX IF NOT EXISTS idx_worte_gender_id ON worte(gender_id);
CREATE INDEX IF NOT EXISTS idx_worte_niveau_id ON worte(niveau_id);
"""

TABLE_WORTE_GRAM_TYPE = """
CREATE TABLE IF NOT EXISTS worte_gram_type(
    id_worte            INTEGER NOT NULL,
    id_gram_type        INTEGER NOT NULL,
    created_at          TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at          TEXT,

    PRIMARY KEY(id_worte, id_gram_type),

    FOREIGN KEY(id_worte) REFERENCES worte(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE,

    FOREIGN KEY(id_gram_type) REFERENCES gram_type(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE
)"""

INDEX_WORTE_GRAM_TYPE = """
CREATE INDEX IF NOT EXISTS idx_worte_gram_type_id_worte ON worte_gram_type(id_worte);
CREATE INDEX IF NOT EXISTS idx_worte_gram_type_id_gram_type ON worte_gram_type(id_gram_type);
"""

TABLE_WORTE_REVIEW = """
CREATE TABLE IF NOT EXISTS worte_review (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    wort_id         INTEGER NOT NULL UNIQUE,
    interval        INTEGER NOT NULL,
    ease_factor     REAL    NOT NULL,
    repetitions     INTEGER NOT NULL,
    last_review     TEXT NOT NULL,
    next_review     TEXT NOT NULL,
    created_at      TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at      TEXT,
    FOREIGN KEY(wort_id) REFERENCES worte(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE
)"""

INDEX_WORTE_REVIEW = """
CREATE UNIQUE INDEX IF NOT EXISTS idx_worte_review_wort_id ON worte_review(wort_id);
CREATE INDEX IF NOT EXISTS idx_worte_review_next_review ON worte_review(next_review);
"""

TABLE_WORTE_AUDIO = """
CREATE TABLE IF NOT EXISTS worte_audio(
    wort_id      INTEGER PRIMARY KEY,
    file_path    TEXT NOT NULL,
    voice_id     TEXT NOT NULL,
    created_at   TEXT DEFAULT CURRENT_TIMESTAMP,
    deleted_at   TEXT,

    FOREIGN KEY (wort_id) REFERENCES worte(id)
        ON DELETE CASCADE
        ON UPDATE CASCADE
)"""

INDEX_WORTE_AUDIO = """
CREATE INDEX IF NOT EXISTS idx_worte_audio_voice_id ON worte_audio(voice_id);
"""

# Order matters: referenced tables come before the tables that point at them.
_SCHEMA_STEPS = (
    (TABLE_WORTE_GENDER, INDEX_WORTE_GENDER),
    (TABLE_NIVEAU_LISTE, INDEX_NIVEAU_LISTE),
    (TABLE_GRAM_TYPE, INDEX_GRAM_TYPE),
    (TABLE_SETZE, INDEX_SETZE),
    (TABLE_SETZE_REVIEW, INDEX_SETZE_REVIEW),
    (TABLE_SETZE_AUDIO, INDEX_SETZE_AUDIO),
    (TABLE_WORTE, INDEX_WORTE),
    (TABLE_WORTE_GRAM_TYPE, INDEX_WORTE_GRAM_TYPE),
    (TABLE_WORTE_REVIEW, INDEX_WORTE_REVIEW),
    (TABLE_WORTE_AUDIO, INDEX_WORTE_AUDIO),
)


def init_schemas(conn: sqlite3.Connection) -> None:
    """Enable foreign keys and create every table and index if missing."""
    conn.execute("PRAGMA foreign_keys = ON")
    for table_sql, index_sql in _SCHEMA_STEPS:
        conn.execute(table_sql)
        conn.executescript(index_sql)
    conn.commit()


@dataclass
class GramType:
    """A grammatical category a word can belong to."""

    id: int
    code: str
    name: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Row) -> "GramType":
        """Build from ``(id, code, name, created_at, deleted_at)``."""
        return cls(
            id=row[0],
            code=row[1],
            name=row[2],
            created_at=_required_timestamp(row[3]),
            deleted_at=parse_timestamp(row[4]),
        )


@dataclass
class NewGramType:
    """A grammatical category to insert or update."""

    id: int
    code: str
    name: str

    def as_params(self) -> tuple:
        return (self.id, self.code, self.name)


@dataclass
class NiveauListe:
    """A language level such as A1 or C2."""

    id: int
    niveau: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Row) -> "NiveauListe":
        """Build from ``(id, niveau, created_at, deleted_at)``."""
        return cls(
            id=row[0],
            niveau=row[1],
            created_at=_required_timestamp(row[2]),
            deleted_at=parse_timestamp(row[3]),
        )


@dataclass
class NewNiveauListe:
    """A language level to insert or update."""

    id: int
    niveau: str

    def as_params(self) -> tuple:
        return (self.id, self.niveau)


@dataclass
class WorteGender:
    """A noun gender with its definite article."""

    id: int
    gender: str
    artikel: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Row) -> "WorteGender":
        """Build from ``(id, gender, artikel, created_at, deleted_at)``."""
        return cls(
            id=row[0],
            gender=row[1],
            artikel=row[2],
            created_at=_required_timestamp(row[3]),
            deleted_at=parse_timestamp(row[4]),
        )


@dataclass
class NewWorteGender:
    """A noun gender to insert or update."""

    id: int
    gender: str
    artikel: str

    def as_params(self) -> tuple:
        return (self.id, self.gender, self.artikel)


@dataclass
class Satz:
    """A stored sentence pair with its resolved level."""

    id: int
    setze_spanisch: str
    setze_deutsch: str
    niveau_id: NiveauListe
    thema: str
    created_at: datetime
    deleted_at: Optional[datetime] = None


@dataclass
class NewSatz:
    """A sentence pair to insert."""

    setze_spanisch: str
    setze_deutsch: str
    niveau_id: int
    thema: str

    def as_params(self) -> tuple:
        return (self.setze_spanisch, self.setze_deutsch, self.niveau_id, self.thema)


@dataclass
class SetzeAudio:
    """The audio file attached to a sentence."""

    satz_id: int
    file_path: str
    voice_id: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Row) -> "SetzeAudio":
        """Build from ``(satz_id, file_path, voice_id, created_at, deleted_at)``."""
        return cls(
            satz_id=row[0],
            file_path=row[1],
            voice_id=row[2],
            created_at=_required_timestamp(row[3]),
            deleted_at=parse_timestamp(row[4]),
        )


@dataclass
class NewSetzeAudio:
    """Audio for a sentence to insert or update."""

    satz_id: int
    file_path: str
    voice_id: str

    def as_params(self) -> tuple:
        return (self.satz_id, self.file_path, self.voice_id)


@dataclass
class SetzeReview:
    """The spaced-repetition state of a sentence."""

    id: int
    satz_id: int
    interval: int
    ease_factor: float
    repetitions: int
    last_review: datetime
    next_review: datetime
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Row) -> "SetzeReview":
        """Build from ``(id, satz_id, interval, ease_factor, repetitions,
        last_review, next_review, created_at, deleted_at)``."""
        return cls(
            id=row[0],
            satz_id=row[1],
            interval=row[2],
            ease_factor=row[3],
            repetitions=row[4],
            last_review=_required_timestamp(row[5]),
            next_review=_required_timestamp(row[6]),
            created_at=_required_timestamp(row[7]),
            deleted_at=parse_timestamp(row[8]),
        )


@dataclass
class NewSetzeReview:
    """Review state of a sentence to insert or update."""

    satz_id: int
    interval: int
    ease_factor: float
    repetitions: int
    last_review: str
    next_review: str

    def as_params(self) -> tuple:
        return (
            self.satz_id,
            self.interval,
            self.ease_factor,
            self.repetitions,
            self.last_review,
            self.next_review,
        )


@dataclass
class Wort:
    """A stored word with its resolved gender, level and grammatical types."""

    id: int
    gender_id: Optional[WorteGender]
    worte_de: str
    worte_es: str
    plural: Optional[str]
    niveau_id: NiveauListe
    example_de: str
    example_es: str
    verb_aux: Optional[str]
    trennbar: Optional[bool]
    reflexiv: Optional[bool]
    created_at: datetime
    deleted_at: Optional[datetime] = None
    gram_type_id: list[GramType] = field(default_factory=list)


@dataclass
class NewWort:
    """A word to insert, with the ids of its grammatical types."""

    gram_type: list[int]
    gender_id: Optional[int]
    worte_de: str
    worte_es: str
    plural: Optional[str]
    niveau_id: int
    example_de: str
    example_es: str
    verb_aux: Optional[str] = None
    trennbar: Optional[bool] = None
    reflexiv: Optional[bool] = None

    def as_params(self) -> tuple:
        """Column values for the ``worte`` row; grammatical types go elsewhere."""
        return (
            self.gender_id,
            self.worte_de,
            self.worte_es,
            self.plural,
            self.niveau_id,
            self.example_de,
            self.example_es,
            self.verb_aux,
            self.trennbar,
            self.reflexiv,
        )


@dataclass
class WorteAudio:
    """The audio file attached to a word."""

    wort_id: int
    file_path: str
    voice_id: str
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Row) -> "WorteAudio":
        """Build from ``(wort_id, file_path, voice_id, created_at, deleted_at)``."""
        return cls(
            wort_id=row[0],
            file_path=row[1],
            voice_id=row[2],
            created_at=_required_timestamp(row[3]),
            deleted_at=parse_timestamp(row[4]),
        )


@dataclass
class NewWorteAudio:
    """Audio for a word to insert or update."""

    wort_id: int
    file_path: str
    voice_id: str

    def as_params(self) -> tuple:
        return (self.wort_id, self.file_path, self.voice_id)


@dataclass
class WorteGramType:
    """A link between a word and a grammatical type."""

    id_worte: int
    id_gram_type: int
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Row) -> "WorteGramType":
        """Build from ``(id_worte, id_gram_type, created_at, deleted_at)``."""
        return cls(
            id_worte=row[0],
            id_gram_type=row[1],
            created_at=_required_timestamp(row[2]),
            deleted_at=parse_timestamp(row[3]),
        )


@dataclass
class NewWorteGramType:
    """A word to grammatical type link to insert."""

    id_worte: int
    id_gram_type: int

    def as_params(self) -> tuple:
        return (self.id_worte, self.id_gram_type)


@dataclass
class WorteReview:
    """The spaced-repetition state of a word."""

    id: int
    wort_id: int
    interval: int
    ease_factor: float
    repetitions: int
    last_review: datetime
    next_review: datetime
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Row) -> "WorteReview":
        """Build from ``(id, wort_id, interval, ease_factor, repetitions,
        last_review, next_review, created_at, deleted_at)``."""
        return cls(
            id=row[0],
            wort_id=row[1],
            interval=row[2],
            ease_factor=row[3],
            repetitions=row[4],
            last_review=_required_timestamp(row[5]),
            next_review=_required_timestamp(row[6]),
            created_at=_required_timestamp(row[7]),
            deleted_at=parse_timestamp(row[8]),
        )


@dataclass
class NewWorteReview:
    """Review state of a word to insert or update."""

    wort_id: int
    interval: int
    ease_factor: float
    repetitions: int
    last_review: str
    next_review: str

    def as_params(self) -> tuple:
        return (
            self.wort_id,
            self.interval,
            self.ease_factor,
            self.repetitions,
            self.last_review,
            self.next_review,
        )