"""Loading the docs.json document and display-name override files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def load_document(docs_path: Path) -> dict[str, Any]:
    """Load and check the JSON configuration document.

    Only the parts this tool reads are checked; everything else is opaque.

    Args:
        docs_path: Path to docs.json.

    Returns:
        The parsed document as plain dicts and lists.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON is invalid or the navigation section is
            not shaped as expected.
    """
    if not docs_path.exists():
        raise FileNotFoundError(f"Config file not found: {docs_path}")

    with open(docs_path, encoding="utf-8") as f:
        document = json.load(f)

    if not isinstance(document, dict):
        raise ValueError(f"Config file must be a JSON object: {docs_path}")

    _check_navigation(document.get("navigation"))
    return document


def _check_navigation(navigation: Any) -> None:
    if navigation is None:
        return
    if not isinstance(navigation, dict):
        raise ValueError(
            f"'navigation' must be an object, got {type(navigation).__name__}"
        )

    languages = navigation.get("languages")
    if languages is None:
        return
    if not isinstance(languages, list):
        raise ValueError(
            f"'navigation.languages' must be a list, got {type(languages).__name__}"
        )
    for index, entry in enumerate(languages):
        if not isinstance(entry, dict):
            raise ValueError(
                f"'navigation.languages[{index}]' must be an object, "
                f"got {type(entry).__name__}"
            )
        if not isinstance(entry.get("language"), str):
            raise ValueError(
                f"'navigation.languages[{index}].language' must be a string"
            )


def load_labels(labels_path: Path) -> dict[str, dict[str, str]]:
    """Load a YAML display-name override file.

    The file maps language codes to ``slug: label`` mappings::

        en:
          api: API
        zh-Hans:
          api: 接口

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a mapping of string mappings.
        yaml.YAMLError: If the YAML cannot be parsed.
    """
    if not labels_path.exists():
        raise FileNotFoundError(f"Labels file not found: {labels_path}")

    with open(labels_path, encoding="utf-8") as f:
        raw = yaml.load(f, Loader=yaml.SafeLoader)

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Labels file must be a mapping: {labels_path}")

    labels: dict[str, dict[str, str]] = {}
    for language, table in raw.items():
        if not isinstance(language, str):
            raise ValueError(
                f"Labels keys must be language codes, got {type(language).__name__}"
            )
        if table is None:
            table = {}
        if not isinstance(table, dict):
            raise ValueError(
                f"Labels for '{language}' must be a mapping, got {type(table).__name__}"
            )
        for slug, label in table.items():
            if not isinstance(slug, str) or not isinstance(label, str):
                raise ValueError(
                    f"Labels for '{language}' must map strings to strings"
                )
        labels[language] = dict(table)
    return labels
