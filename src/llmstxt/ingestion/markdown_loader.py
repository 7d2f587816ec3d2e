"""Markdown loading and per-file metadata extraction."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Mapping, Tuple

from llmstxt.index.sections import categorize_file
from llmstxt.models import MarkdownFile
from llmstxt.utils.files import MARKDOWN_SUFFIXES, read_markdown
from llmstxt.utils.text import extract_description, extract_title

LOGGER = logging.getLogger(__name__)

FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
FRONT_MATTER_LINE_RE = re.compile(r"^\s*(\w+):\s*(.+?)\s*$")
MARKDOWN_EXTENSION_RE = re.compile(r"\.(?:md|mdx|markdown)$", re.IGNORECASE)


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1].strip()
    return value


def split_front_matter(content: str) -> Tuple[Dict[str, str], str]:
    """Return ``(front_matter, body)``.

    Only single-line ``key: value`` scalars are recognised; nested or
    multi-line values are skipped. Without a front-matter block the mapping
    is empty and the body is ``content`` unchanged.
    """
    match = FRONT_MATTER_RE.match(content)
    if not match:
        return {}, content

    front_matter: Dict[str, str] = {}
    for line in match.group(1).splitlines():
        pair = FRONT_MATTER_LINE_RE.match(line)
        if pair:
            front_matter[pair.group(1)] = _unquote(pair.group(2))
    return front_matter, content[match.end() :]


def normalize_path(path: str) -> str:
    return path.replace("\\", "/")


def title_from_filename(path: str) -> str:
    """Return the file name without its markdown extension."""
    name = normalize_path(path).rsplit("/", 1)[-1]
    lowered = name.lower()
    for suffix in MARKDOWN_SUFFIXES:
        if lowered.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def build_url(path: str, base_url: str) -> str:
    """Join ``base_url`` and ``path`` with the markdown extension removed."""
    clean_path = MARKDOWN_EXTENSION_RE.sub("", normalize_path(path))
    if clean_path.startswith("/"):
        clean_path = clean_path[1:]
    clean_base = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{clean_base}/{clean_path}"


def build_record(
    path: str, content: str, base_url: str, sections: Mapping[str, str]
) -> MarkdownFile:
    """Build the metadata record for one markdown file.

    Front matter overrides the extracted title and description but is kept
    in ``content``.
    """
    front_matter, body = split_front_matter(content)

    title = front_matter.get("title") or extract_title(body) or title_from_filename(path)
    description = front_matter.get("description") or extract_description(body)

    return MarkdownFile(
        path=path,
        title=title,
        description=description,
        content=content,
        url=build_url(path, base_url),
        section=categorize_file(path, sections),
    )


def load_record(
    root: Path, path: str, base_url: str, sections: Mapping[str, str]
) -> MarkdownFile:
    """Read ``root / path`` and build its record.

    Raises:
        ReadError: if the file cannot be read.
    """
    content = read_markdown(root / path)
    record = build_record(path, content, base_url, sections)
    LOGGER.debug("Parsed: %s -> %s", path, record.title)
    return record
