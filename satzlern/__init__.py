"""SQLite storage for German/Spanish sentences, words, audio records and review state."""

__version__ = "0.1.0"