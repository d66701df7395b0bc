"""Static per-language tables used to label and decorate navigation."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

DEFAULT_LANGUAGE = "en"

DOCUMENT_EXTENSIONS = frozenset({".md", ".mdx"})

# Matched case-sensitively against directory names
IGNORED_DIR_NAMES = frozenset({".git", ".github", "node_modules", "__MACOSX"})

# Matched against lowercased file names
IGNORED_FILE_NAMES = frozenset({".ds_store"})

DEFAULT_GROUP_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "en": "Default",
        "zh-Hans": "默认",
    }
)

DISPLAY_NAME_OVERRIDES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "en": MappingProxyType(
            {
                "ai": "AI",
                "agent-middleware": "Agent Middleware",
                "ai-assistant": "AI Assistant",
                "conversation": "Conversation",
                "digital-expert": "Digital Expert",
                "knowledge-base": "Knowledge Base",
                "plugin-development": "Plugin Development",
                "toolset": "Toolset",
                "troubleshooting": "Troubleshooting",
                "tutorial": "Tutorial",
                "workflow": "Workflow",
            }
        ),
        "zh-Hans": MappingProxyType(
            {
                "ai": "AI",
                "agent-middleware": "智能体中间件",
                "ai-assistant": "AI 助手",
                "conversation": "对话",
                "digital-expert": "数字专家",
                "knowledge-base": "知识库",
                "plugin-development": "插件开发",
                "toolset": "工具集",
                "troubleshooting": "故障排查",
                "tutorial": "教程",
                "workflow": "工作流",
            }
        ),
    }
)

_GITHUB_URL = "https://github.com/zhezhiming/Mintlify"
_SUPPORT_URL = "mailto:hi@mintlify.com"
_CHAT_KIT_URLS = {
    "en": "https://xpertai.cn/docs/ai/",
    "zh-Hans": "https://xpertai.cn/zh-Hans/docs/ai/",
}

# Array form, embedded inside each language node
_NAVBAR_LINKS: dict[str, list[dict[str, str]]] = {
    "en": [
        {"label": "GitHub", "href": _GITHUB_URL},
        {"label": "Support", "href": _SUPPORT_URL},
        {"label": "Try Chat-Kit", "href": _CHAT_KIT_URLS["en"]},
    ],
    "zh-Hans": [
        {"label": "GitHub", "href": _GITHUB_URL},
        {"label": "支持", "href": _SUPPORT_URL},
        {"label": "试用 Chat-Kit", "href": _CHAT_KIT_URLS["zh-Hans"]},
    ],
}

# Object form, only used as the document-level fallback
_NAVBAR_DESCRIPTORS: dict[str, dict[str, Any]] = {
    "en": {
        "links": [
            {"label": "GitHub", "href": _GITHUB_URL},
            {"label": "Support", "href": _SUPPORT_URL},
        ],
        "primary": {
            "type": "button",
            "label": "Try Chat-Kit",
            "href": _CHAT_KIT_URLS["en"],
        },
    },
    "zh-Hans": {
        "links": [
            {"label": "GitHub", "href": _GITHUB_URL},
            {"label": "支持", "href": _SUPPORT_URL},
        ],
        "primary": {
            "type": "button",
            "label": "试用 Chat-Kit",
            "href": _CHAT_KIT_URLS["zh-Hans"],
        },
    },
}


def default_group_name(language: str) -> str:
    """Label of the synthesized group holding a tab's loose pages."""
    return DEFAULT_GROUP_NAMES.get(language, DEFAULT_GROUP_NAMES[DEFAULT_LANGUAGE])


def navbar_links(language: str) -> list[dict[str, str]]:
    """Return a fresh copy of the per-language navbar link list."""
    links = _NAVBAR_LINKS.get(language, _NAVBAR_LINKS[DEFAULT_LANGUAGE])
    return copy.deepcopy(links)


def navbar_descriptor(language: str) -> dict[str, Any]:
    """Return a fresh copy of the document-level navbar for a language."""
    descriptor = _NAVBAR_DESCRIPTORS.get(
        language, _NAVBAR_DESCRIPTORS[DEFAULT_LANGUAGE]
    )
    return copy.deepcopy(descriptor)
