"""Deciding which language subtrees to process."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docsnav.config import language_codes
from docsnav.scan import list_dir


def parse_language_list(value: str) -> list[str]:
    """Split a comma-separated language list, trimming and dropping blanks."""
    return [code.strip() for code in value.split(",") if code.strip()]


def resolve_languages(
    document: dict[str, Any],
    content_root: Path,
    languages: str | None = None,
) -> list[str]:
    """Determine the ordered language codes to consider.

    The first rule that yields codes wins:

    1. An explicit comma-separated ``languages`` list.
    2. The codes already listed under ``navigation.languages``.
    3. Every visible subdirectory of ``content_root``.
    """
    if languages:
        return parse_language_list(languages)

    existing = language_codes(document)
    if existing:
        return existing

    return list_dir(content_root).dirs


def _is_safe_code(language: str) -> bool:
    return language not in ("", ".", "..") and Path(language).name == language


@dataclass
class LanguageSelection:
    """Languages split into those to build and those skipped (with reason)."""

    selected: list[str] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)


def select_languages(candidates: list[str], content_root: Path) -> LanguageSelection:
    """Keep candidates that name a directory under ``content_root``.

    Rejected codes are reported, not raised. Duplicate codes are built once.
    """
    selection = LanguageSelection()
    for language in candidates:
        if language in selection.selected:
            continue
        if not _is_safe_code(language) or "\\" in language:
            selection.skipped.append((language, "invalid language code"))
        elif not (content_root / language).is_dir():
            selection.skipped.append((language, "not a directory"))
        else:
            selection.selected.append(language)
    return selection
