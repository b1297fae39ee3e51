"""Reference data every database starts with."""

from __future__ import annotations

import sqlite3
from typing import Optional

from satzlern.connection import get_connection
from satzlern.lookups import GENDERS, GRAM_TYPES, NIVEAUS
from satzlern.repos import gram_type, niveau_liste, worte_gender
from satzlern.schemas import NewGramType, NewNiveauListe, NewWorteGender, init_schemas

SEED_WORTE_GENDER_LISTE = (
    NewWorteGender(0, "Maskuline", "der"),
    NewWorteGender(1, "Femenin", "die"),
    NewWorteGender(2, "Neutrum", "das"),
    NewWorteGender(3, "Plural", "die"),
)

SEED_NIVEAU_LISTE = tuple(
    NewNiveauListe(i, niveau) for i, niveau in enumerate(("A1", "A2", "B1", "B2", "C1", "C2"))
)

SEED_GRAM_TYPE_LISTE = tuple(
    NewGramType(i, code, name)
    for i, (code, name) in enumerate(
        (
            ("noun_common", "Sustantivo comun"),
            ("noun_proper", "Nombre propio"),
            ("verb_main", "Verbo lexico"),
            ("verb_modal", "Verbo modal"),
            ("verb_auxiliary", "Verbo auxiliar"),
            ("verb_separable", "Verbo separable"),
            ("verb_reflexive", "Verbo reflexivo"),
            ("adjective", "Adjetivo"),
            ("adverb_time", "Adverbio tiempo"),
            ("adverb_place", "Adverbio lugar"),
            ("adverb_manner", "Adverbio modo"),
            ("adverb_degree", "Adverbio grado"),
            ("adverb_sentence_connector", "Adverbio conector"),
            ("pronoun_personal", "Pronombre personal"),
            ("pronoun_possessive", "Pronombre posesivo"),
            ("pronoun_reflexive", "Pronombre reflexivo"),
            ("pronoun_demonstrative", "Pronombre demostrativo"),
            ("pronoun_relative", "Pronombre relativo"),
            ("pronoun_interrogative", "Pronombre interrogativo"),
            ("pronoun_indefinite", "Pronombre indefinido"),
            ("article_definite", "Articulo definido"),
            ("article_indefinite", "Articulo indefinido"),
            ("determiner_quantifier", "Determinante cuantificador"),
            ("preposition_dative", "Preposicion dativo"),
            ("preposition_akkusative", "Preposicion acusativo"),
            ("preposition_genitive", "Preposicion genitivo"),
            ("preposition_two_way", "Preposicion doble"),
            ("conjunction_coordinating", "Conjuncion coordinante"),
            ("conjunction_subordinating", "Conjuncion subordinante"),
            ("particle_modal", "Particula modal"),
            ("particle_focus", "Particula enfoque"),
            ("particle_negation", "Particula negacion"),
            ("particle_answer", "Particula respuesta"),
            ("numeral_cardinal", "Numeral cardinal"),
            ("numeral_ordinal", "Numeral ordinal"),
            ("interjection", "Interjeccion"),
            ("fixed_phrase", "Frase fija"),
            ("prefix_separable", "Prefijo separable"),
            ("pattern_verb_dativ", "Patron verbo dativo"),
            ("pattern_verb_akkusativ", "Patron verbo acusativo"),
            ("pattern_verb_dat_akk", "Patron verbo dativo-acusativo"),
        )
    )
)


def init_data(conn: sqlite3.Connection) -> None:
    """Write the reference rows in one transaction and load them into the lookups."""
    with conn:
        genders = worte_gender.bulk_insert_tx(conn, SEED_WORTE_GENDER_LISTE)
        niveaus = niveau_liste.bulk_insert_tx(conn, SEED_NIVEAU_LISTE)
        gram_types = gram_type.bulk_insert_tx(conn, SEED_GRAM_TYPE_LISTE)
    GENDERS.register(genders)
    NIVEAUS.register(niveaus)
    GRAM_TYPES.register(gram_types)


def init_db(conn: Optional[sqlite3.Connection] = None) -> None:
    """Create the schema and seed reference data; defaults to the shared connection."""
    if conn is None:
        conn = get_connection()
    init_schemas(conn)
    init_data(conn)