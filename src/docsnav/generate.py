"""Main generation orchestration."""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from docsnav.config import find_language_entry
from docsnav.labels import DEFAULT_LANGUAGE, navbar_descriptor
from docsnav.languages import resolve_languages, select_languages
from docsnav.navigation import LanguageNode, build_language


@dataclass
class BuildResult:
    """Result of building navigation (nothing written)."""

    document: dict[str, Any]
    nodes: list[LanguageNode]
    skipped: list[tuple[str, str]]

    @property
    def languages(self) -> list[dict[str, Any]]:
        """The language nodes as they appear in the document."""
        return self.document["navigation"]["languages"]

    @property
    def page_count(self) -> int:
        return sum(node.page_count for node in self.nodes)


def render_json(data: Any) -> str:
    """Serialize with two-space indentation and a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def _navbar_language(nodes: list[dict[str, Any]]) -> str:
    for node in nodes:
        if node.get("default"):
            return node["language"]
    if nodes:
        return nodes[0]["language"]
    return DEFAULT_LANGUAGE


def merge_navigation(
    document: dict[str, Any], nodes: list[LanguageNode]
) -> dict[str, Any]:
    """Return a copy of ``document`` carrying the new language nodes.

    Only ``navigation.languages`` is replaced, and ``navbar`` is filled in
    when the document has none. Every other key is left as loaded.
    """
    merged = copy.deepcopy(document)
    if merged.get("navigation") is None:
        merged["navigation"] = {}

    language_dicts = [node.to_dict() for node in nodes]
    merged["navigation"]["languages"] = language_dicts

    if merged.get("navbar") is None:
        merged["navbar"] = navbar_descriptor(_navbar_language(language_dicts))

    return merged


def build_navigation(
    document: dict[str, Any],
    content_root: Path,
    languages: str | None = None,
    overrides: Mapping[str, Mapping[str, str]] | None = None,
) -> BuildResult:
    """Build navigation for every usable language and merge it in.

    Args:
        document: Loaded configuration document. Not modified.
        content_root: Directory holding one subtree per language.
        languages: Optional comma-separated override of the language list.
        overrides: Display-name override tables; built-ins when None.

    Returns:
        BuildResult with the merged document copy and the skipped codes.

    Raises:
        OSError: If any directory in a selected subtree cannot be listed.
    """
    content_root = content_root.resolve()
    candidates = resolve_languages(document, content_root, languages)
    selection = select_languages(candidates, content_root)

    nodes = [
        build_language(
            language,
            content_root,
            prior_entry=find_language_entry(document, language),
            overrides=overrides,
        )
        for language in selection.selected
    ]

    return BuildResult(
        document=merge_navigation(document, nodes),
        nodes=nodes,
        skipped=selection.skipped,
    )


def write_document(docs_path: Path, document: dict[str, Any]) -> None:
    """Persist the merged document in place."""
    docs_path.write_text(render_json(document), encoding="utf-8")
