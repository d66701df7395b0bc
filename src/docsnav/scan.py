"""Directory listing and page discovery."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from docsnav.labels import DOCUMENT_EXTENSIONS, IGNORED_DIR_NAMES, IGNORED_FILE_NAMES


@dataclass
class DirListing:
    """Immediate children of a directory, split by kind and sorted by name."""

    dirs: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)


def list_dir(dir_path: Path) -> DirListing:
    """List the visible children of a directory.

    Hidden entries, ignored directory names and ignored file names are
    dropped. Symbolic links and special files are not listed.

    Raises:
        OSError: If the directory cannot be listed.
    """
    listing = DirListing()
    with os.scandir(dir_path) as entries:
        for entry in entries:
            name = entry.name
            if name.startswith("."):
                continue
            if entry.is_dir(follow_symlinks=False):
                if name not in IGNORED_DIR_NAMES:
                    listing.dirs.append(name)
            elif entry.is_file(follow_symlinks=False):
                if name.lower() not in IGNORED_FILE_NAMES:
                    listing.files.append(name)
    listing.dirs.sort()
    listing.files.sort()
    return listing


def is_document(name: str) -> bool:
    """Check whether a file name carries a recognized document extension."""
    return os.path.splitext(name)[1].lower() in DOCUMENT_EXTENSIONS


def page_id_from_file(content_root: Path, file_path: Path) -> str:
    """Convert a document path to its extension-less, slash-separated page id."""
    relative = file_path.relative_to(content_root)
    return relative.with_suffix("").as_posix()


def _is_index(page_id: str) -> bool:
    return page_id.rsplit("/", 1)[-1] == "index"


def sort_pages(pages: Iterable[str]) -> list[str]:
    """Sort page ids: ``index`` pages first, then by full id."""
    return sorted(pages, key=lambda page: (not _is_index(page), page))


def collect_pages(dir_path: Path, content_root: Path) -> list[str]:
    """Collect every document beneath ``dir_path`` as sorted page ids.

    Args:
        dir_path: Directory to search, at any depth.
        content_root: Root the page ids are made relative to.

    Returns:
        Page ids ordered by ``sort_pages``.
    """
    pages: list[str] = []
    stack = [dir_path]

    while stack:
        current = stack.pop()
        listing = list_dir(current)
        stack.extend(current / name for name in listing.dirs)
        pages.extend(
            page_id_from_file(content_root, current / name)
            for name in listing.files
            if is_document(name)
        )

    return sort_pages(pages)
