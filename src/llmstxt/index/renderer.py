"""Rendering of the llms.txt and llms-full.txt documents."""

from __future__ import annotations

from typing import List, Sequence

from llmstxt.index.sections import group_by_section, ordered_files
from llmstxt.models import MarkdownFile


def format_file_entry(record: MarkdownFile) -> str:
    """Format a record as ``- [Title](url): Description``.

    The colon and description are omitted when the description is blank.
    """
    if record.description.strip():
        return f"- [{record.title}]({record.url}): {record.description}"
    return f"- [{record.title}]({record.url})"


def generate_llms_txt(
    files: Sequence[MarkdownFile], project_name: str, project_description: str = ""
) -> str:
    """Render the concise llms.txt index."""
    lines: List[str] = [f"# {project_name}", ""]

    if project_description.strip():
        lines.extend([f"> {project_description}", ""])

    for section, records in group_by_section(files).items():
        lines.extend([f"## {section}", ""])
        lines.extend(format_file_entry(record) for record in records)
        lines.append("")

    return "\n".join(lines).strip() + "\n"


def generate_llms_full_txt(files: Sequence[MarkdownFile]) -> str:
    """Render llms-full.txt: every file's content behind a ``Source:`` line."""
    parts: List[str] = []
    for record in ordered_files(files):
        parts.extend([f"Source: {record.url}", "", record.content, ""])
    return "\n".join(parts).strip() + "\n"
