"""Human-readable display names for directory slugs."""

from __future__ import annotations

import re
from collections.abc import Mapping

from docsnav.labels import DISPLAY_NAME_OVERRIDES

_SEPARATORS = re.compile(r"[-_]+")


def title_case_slug(slug: str) -> str:
    """Turn ``getting-started`` into ``Getting Started``.

    Only the first character of each token is uppercased; the rest of the
    token is kept as written, so ``api_v2-GUIDE`` becomes ``Api V2 GUIDE``.
    """
    tokens = [token for token in _SEPARATORS.split(slug) if token]
    return " ".join(token[:1].upper() + token[1:] for token in tokens)


def to_display_name(
    slug: str,
    language: str,
    overrides: Mapping[str, Mapping[str, str]] | None = None,
) -> str:
    """Resolve the label shown for a slug in the given language.

    Args:
        slug: Directory (or file) base name.
        language: Language code selecting the override table.
        overrides: Per-language override tables. Defaults to the built-in
            ``DISPLAY_NAME_OVERRIDES``.

    Returns:
        The override label if one exists, otherwise the title-cased slug.
        An empty slug is returned unchanged.
    """
    if not slug:
        return slug

    table = (DISPLAY_NAME_OVERRIDES if overrides is None else overrides).get(
        language, {}
    )
    if slug in table:
        return table[slug]

    return title_case_slug(slug)


def merge_overrides(
    base: Mapping[str, Mapping[str, str]],
    extra: Mapping[str, Mapping[str, str]],
) -> dict[str, dict[str, str]]:
    """Layer ``extra`` override tables over ``base``, slug by slug."""
    merged = {language: dict(table) for language, table in base.items()}
    for language, table in extra.items():
        merged.setdefault(language, {}).update(table)
    return merged
