"""Utility helpers for working with markdown files on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from wcmatch import glob

from llmstxt.errors import ReadError

LOGGER = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".mdx", ".markdown")
GLOB_FLAGS = (
    glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.NEGATE | glob.NEGATEALL | glob.FORCEUNIX
)


def matches_glob(path: str, pattern: str) -> bool:
    """Match a forward-slash relative path against a glob pattern.

    ``*`` stays within one path segment and ``**`` spans segments. A leading
    ``!`` negates the pattern and extended globs such as ``+(a|b)`` are
    supported.
    """
    return glob.globmatch(path, pattern, flags=GLOB_FLAGS)


def is_markdown_path(path: Path) -> bool:
    return path.suffix.lower() in MARKDOWN_SUFFIXES


def iter_markdown_paths(root: Path, exclude_patterns: Iterable[str] = ()) -> Iterator[str]:
    """Yield sorted relative paths of markdown files below ``root``.

    Hidden files and directories are skipped, as is anything matching one of
    ``exclude_patterns``. A missing or unreadable root yields nothing.
    """
    patterns = [pattern for pattern in exclude_patterns if pattern]
    try:
        candidates = [child for child in root.rglob("*") if child.is_file()]
    except OSError as exc:
        LOGGER.warning("Unable to scan %s: %s", root, exc)
        return

    relative_paths = []
    for child in candidates:
        relative = child.relative_to(root).as_posix()
        if any(part.startswith(".") for part in relative.split("/")):
            continue
        if not is_markdown_path(child):
            continue
        if any(matches_glob(relative, pattern) for pattern in patterns):
            LOGGER.debug("Excluded %s", relative)
            continue
        relative_paths.append(relative)

    yield from sorted(relative_paths)


def read_markdown(path: Path) -> str:
    """Read a markdown file as UTF-8 text without translating line endings."""
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Cannot read {path}: {exc}") from exc
