"""Tests for generation orchestration."""

import copy
import json
import shutil
from pathlib import Path

import pytest

from docsnav.config import load_document
from docsnav.generate import (
    build_navigation,
    merge_navigation,
    render_json,
    write_document,
)
from docsnav.labels import navbar_descriptor, navbar_links
from docsnav.navigation import LanguageNode

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Copy docs.json and the content tree into a temporary directory."""
    shutil.copytree(FIXTURES / "content", tmp_path / "content")
    shutil.copy(FIXTURES / "docs.json", tmp_path / "docs.json")
    return tmp_path


def test_build_navigation_fixture(project: Path):
    document = load_document(project / "docs.json")

    result = build_navigation(document, project / "content")

    assert [node.language for node in result.nodes] == ["en", "zh-Hans"]
    assert result.skipped == []
    en, zh = result.languages
    assert en["default"] is True
    assert en["banner"] == {"content": "Welcome"}
    assert zh["products"] == [
        {
            "product": "AI",
            "tabs": [
                {
                    "tab": "Guides",
                    "groups": [
                        {"group": "默认", "pages": ["zh-Hans/ai/guides/setup"]},
                        {
                            "group": "知识库",
                            "pages": [
                                "zh-Hans/ai/guides/knowledge-base/index",
                                "zh-Hans/ai/guides/knowledge-base/upload",
                            ],
                        },
                    ],
                }
            ],
        }
    ]
    assert zh["navbar"] == navbar_links("zh-Hans")
    assert result.page_count == 11


def test_build_navigation_does_not_modify_input(project: Path):
    document = load_document(project / "docs.json")
    before = copy.deepcopy(document)

    build_navigation(document, project / "content")

    assert document == before


def test_unrelated_fields_preserved(project: Path):
    document = load_document(project / "docs.json")

    merged = build_navigation(document, project / "content").document

    assert list(merged) == list(document) + ["navbar"]
    for key in ("$schema", "theme", "name", "colors", "footer"):
        assert merged[key] == document[key]


def test_navbar_synthesized_from_default_language(project: Path):
    document = load_document(project / "docs.json")
    document["navigation"]["languages"][0].pop("default")
    document["navigation"]["languages"][1]["default"] = True

    merged = build_navigation(document, project / "content").document

    assert merged["navbar"] == navbar_descriptor("zh-Hans")


def test_navbar_falls_back_to_first_language(project: Path):
    document = load_document(project / "docs.json")

    result = build_navigation(document, project / "content", languages="zh-Hans")
    merged = result.document

    assert merged["navbar"] == navbar_descriptor("zh-Hans")


def test_navbar_falls_back_to_en_without_languages(tmp_path: Path):
    (tmp_path / "content").mkdir()

    result = build_navigation({}, tmp_path / "content")

    assert result.document == {
        "navigation": {"languages": []},
        "navbar": navbar_descriptor("en"),
    }


def test_existing_navbar_kept(project: Path):
    document = load_document(project / "docs.json")
    document["navbar"] = {"links": []}

    merged = build_navigation(document, project / "content").document

    assert merged["navbar"] == {"links": []}


def test_null_navbar_replaced(tmp_path: Path):
    merged = merge_navigation({"navbar": None}, [])

    assert merged["navbar"] == navbar_descriptor("en")


def test_null_navigation_replaced():
    node = LanguageNode(language="en", navbar=navbar_links("en"))

    merged = merge_navigation({"navigation": None, "name": "x"}, [node])

    assert merged["navigation"] == {"languages": [node.to_dict()]}
    assert merged["name"] == "x"


def test_other_navigation_keys_preserved():
    document = {"navigation": {"global": {"anchors": []}, "languages": []}}

    merged = merge_navigation(document, [])

    assert merged["navigation"]["global"] == {"anchors": []}


def test_explicit_languages_skip_missing(project: Path):
    document = load_document(project / "docs.json")

    result = build_navigation(document, project / "content", languages="fr, en")

    assert [node.language for node in result.nodes] == ["en"]
    assert result.skipped == [("fr", "not a directory")]


def test_languages_discovered_when_document_has_none(project: Path):
    result = build_navigation({"name": "x"}, project / "content")

    assert [node.language for node in result.nodes] == ["en", "zh-Hans"]
    assert "default" not in result.languages[0]


def test_language_without_products_still_included(project: Path):
    (project / "content" / "ja").mkdir()

    result = build_navigation({}, project / "content", languages="ja")

    assert result.languages == [
        {"language": "ja", "navbar": navbar_links("ja"), "products": []}
    ]


def test_relative_content_root(project: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(project)

    result = build_navigation({}, Path("content"), languages="en")

    assert result.languages[0]["products"][0]["tabs"][0]["groups"][0]["pages"] == [
        "en/ai/guides/setup"
    ]


def test_ignored_directory_in_tab_contributes_nothing(project: Path):
    cache = project / "content" / "en" / "ai" / "guides" / "node_modules" / "pkg"
    cache.mkdir(parents=True)
    (cache / "readme.md").write_text("# readme\n", encoding="utf-8")

    result = build_navigation({}, project / "content", languages="en")
    text = render_json(result.languages)

    assert "node_modules" not in text
    groups = result.languages[0]["products"][0]["tabs"][0]["groups"]
    assert [group["group"] for group in groups] == ["Default", "Basics"]


def test_render_json_style():
    text = render_json({"a": [1, {"b": "默认"}], "c": []})

    assert text == (
        '{\n  "a": [\n    1,\n    {\n      "b": "默认"\n    }\n  ],\n  "c": []\n}\n'
    )


def test_write_document_round_trips(project: Path):
    document = load_document(project / "docs.json")
    result = build_navigation(document, project / "content")

    write_document(project / "docs.json", result.document)

    text = (project / "docs.json").read_text(encoding="utf-8")
    assert json.loads(text) == result.document
    assert text.endswith("}\n")


def test_idempotent(project: Path):
    docs = project / "docs.json"

    for _ in range(2):
        result = build_navigation(load_document(docs), project / "content")
        write_document(docs, result.document)
    first = docs.read_bytes()

    result = build_navigation(load_document(docs), project / "content")
    write_document(docs, result.document)

    assert docs.read_bytes() == first
