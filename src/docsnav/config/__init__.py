"""Configuration document loading and access."""

from docsnav.config.entries import find_language_entry, language_codes, language_entries
from docsnav.config.load import load_document, load_labels

__all__ = [
    "find_language_entry",
    "language_codes",
    "language_entries",
    "load_document",
    "load_labels",
]
