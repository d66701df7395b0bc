"""Navigation model and the per-language builder."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from docsnav.labels import default_group_name, navbar_links
from docsnav.names import to_display_name
from docsnav.scan import (
    collect_pages,
    is_document,
    list_dir,
    page_id_from_file,
    sort_pages,
)


@dataclass
class Group:
    """Named, ordered list of page ids."""

    name: str
    pages: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"group": self.name, "pages": list(self.pages)}


@dataclass
class Tab:
    """Named, ordered list of groups."""

    name: str
    groups: list[Group]

    def to_dict(self) -> dict[str, Any]:
        return {"tab": self.name, "groups": [group.to_dict() for group in self.groups]}


@dataclass
class Product:
    """Named, ordered list of tabs."""

    name: str
    tabs: list[Tab]

    def to_dict(self) -> dict[str, Any]:
        return {"product": self.name, "tabs": [tab.to_dict() for tab in self.tabs]}


@dataclass
class LanguageNode:
    """Navigation for one language subtree.

    ``inherited`` holds whatever the existing configuration already stored
    for this language; it is carried through untouched except that
    ``navbar`` and ``products`` are always replaced.
    """

    language: str
    navbar: list[dict[str, str]]
    products: list[Product] = field(default_factory=list)
    inherited: dict[str, Any] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return sum(
            len(group.pages)
            for product in self.products
            for tab in product.tabs
            for group in tab.groups
        )

    def to_dict(self) -> dict[str, Any]:
        node: dict[str, Any] = {"language": self.language}
        node.update(copy.deepcopy(self.inherited))
        node["navbar"] = copy.deepcopy(self.navbar)
        node["products"] = [product.to_dict() for product in self.products]
        return node


def build_tab(
    tab_dir: Path,
    language: str,
    content_root: Path,
    overrides: Mapping[str, Mapping[str, str]] | None = None,
) -> Tab | None:
    """Build a tab from its directory, or None if it holds no pages."""
    listing = list_dir(tab_dir)

    named_groups: list[Group] = []
    for name in listing.dirs:
        pages = collect_pages(tab_dir / name, content_root)
        if pages:
            named_groups.append(
                Group(name=to_display_name(name, language, overrides), pages=pages)
            )

    default_pages = [
        page_id_from_file(content_root, tab_dir / name)
        for name in listing.files
        if is_document(name)
    ]

    groups: list[Group] = []
    if default_pages:
        groups.append(
            Group(name=default_group_name(language), pages=sort_pages(default_pages))
        )
    groups.extend(sorted(named_groups, key=lambda group: group.name))

    if not groups:
        return None
    return Tab(name=to_display_name(tab_dir.name, language, overrides), groups=groups)


def build_product(
    product_dir: Path,
    language: str,
    content_root: Path,
    overrides: Mapping[str, Mapping[str, str]] | None = None,
) -> Product | None:
    """Build a product from its directory, or None if no tab survives."""
    tabs: list[Tab] = []
    for name in list_dir(product_dir).dirs:
        tab = build_tab(product_dir / name, language, content_root, overrides)
        if tab is not None:
            tabs.append(tab)

    if not tabs:
        return None
    return Product(
        name=to_display_name(product_dir.name, language, overrides), tabs=tabs
    )


def build_language(
    language: str,
    content_root: Path,
    prior_entry: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Mapping[str, str]] | None = None,
) -> LanguageNode:
    """Walk ``content_root/language`` into a LanguageNode.

    Args:
        language: Language code, also the name of the subtree directory.
        content_root: Root directory holding one subtree per language.
        prior_entry: The configuration's existing entry for this language.
        overrides: Display-name override tables; built-ins when None.

    Returns:
        The language node. It may have no products.

    Raises:
        OSError: If any directory in the subtree cannot be listed.
    """
    language_dir = content_root / language

    products: list[Product] = []
    for name in list_dir(language_dir).dirs:
        product = build_product(language_dir / name, language, content_root, overrides)
        if product is not None:
            products.append(product)

    return LanguageNode(
        language=language,
        navbar=navbar_links(language),
        products=products,
        inherited=dict(prior_entry or {}),
    )
