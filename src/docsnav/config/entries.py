"""Helpers for reading the per-language navigation entries."""

from __future__ import annotations

from typing import Any


def language_entries(document: dict[str, Any]) -> list[dict[str, Any]]:
    """Return ``navigation.languages`` from a loaded document.

    The document is expected to have passed ``load_document`` validation;
    a missing or null ``navigation`` section yields an empty list.
    """
    navigation = document.get("navigation")
    if not navigation:
        return []
    return navigation.get("languages") or []


def language_codes(document: dict[str, Any]) -> list[str]:
    """Language codes already present in the document, in their order."""
    return [entry["language"] for entry in language_entries(document)]


def find_language_entry(
    document: dict[str, Any], language: str
) -> dict[str, Any] | None:
    """Find the first existing entry for a language code."""
    for entry in language_entries(document):
        if entry.get("language") == language:
            return entry
    return None
