"""In-memory reference tables for grammatical types, levels and genders."""

from __future__ import annotations

import copy
import threading
from typing import Any, Dict, Generic, Iterable, TypeVar

from satzlern.schemas import GramType, NiveauListe, WorteGender

T = TypeVar("T")


class ReferenceNotFound(LookupError):
    """Raised when a reference row is not registered."""


class ReferenceTable(Generic[T]):
    """A thread-safe cache of reference rows, looked up by id or by a key field."""

    def __init__(self, label: str, key_field: str) -> None:
        self.label = label
        self.key_field = key_field
        self._rows: Dict[int, T] = {}
        self._lock = threading.Lock()

    def register(self, rows: Iterable[T]) -> None:
        """Add or replace rows, keyed by their ``id``."""
        with self._lock:
            for row in rows:
                self._rows[getattr(row, "id")] = copy.copy(row)

    def from_id(self, id: int) -> T:
        """Return a copy of the row with the given id."""
        with self._lock:
            row = self._rows.get(id)
        if row is None:
            raise ReferenceNotFound(f"{self.label} not found with id: {id}")
        return copy.copy(row)

    def from_key(self, value: Any) -> T:
        """Return a copy of the first row whose key field equals ``value``."""
        with self._lock:
            found = next(
                (row for row in self._rows.values() if getattr(row, self.key_field) == value),
                None,
            )
        if found is None:
            raise ReferenceNotFound(
                f"{self.label} not found with {self.key_field}: {value}"
            )
        return copy.copy(found)

    def clear(self) -> None:
        """Forget every registered row."""
        with self._lock:
            self._rows.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    def __contains__(self, id: object) -> bool:
        with self._lock:
            return id in self._rows


GRAM_TYPES: ReferenceTable[GramType] = ReferenceTable("Gram Type", "code")
NIVEAUS: ReferenceTable[NiveauListe] = ReferenceTable("Niveau", "niveau")
GENDERS: ReferenceTable[WorteGender] = ReferenceTable("Gender", "gender")