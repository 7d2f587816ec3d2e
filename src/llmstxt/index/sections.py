"""Section classification and ordering."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from llmstxt.models import MarkdownFile
from llmstxt.utils.files import matches_glob

DEFAULT_SECTION = "Docs"
OPTIONAL_SECTION = "Optional"


def categorize_file(path: str, sections: Mapping[str, str]) -> str:
    """Return the first section whose glob pattern matches ``path``.

    Patterns are tried in mapping order; ``DEFAULT_SECTION`` is returned when
    none match.
    """
    normalized = path.replace("\\", "/")
    for name, pattern in sections.items():
        if matches_glob(normalized, pattern):
            return name
    return DEFAULT_SECTION


def section_sort_key(name: str) -> tuple[bool, str]:
    return (name == OPTIONAL_SECTION, name)


def group_by_section(files: Iterable[MarkdownFile]) -> Dict[str, List[MarkdownFile]]:
    """Group records by section, sorted with ``Optional`` last.

    Records keep their input order inside each group.
    """
    grouped: Dict[str, List[MarkdownFile]] = {}
    for record in files:
        grouped.setdefault(record.section or DEFAULT_SECTION, []).append(record)
    return {name: grouped[name] for name in sorted(grouped, key=section_sort_key)}


def ordered_files(files: Iterable[MarkdownFile]) -> List[MarkdownFile]:
    """Flatten records into the order they appear in the rendered index."""
    return [record for group in group_by_section(files).values() for record in group]
