"""Core llmstxt data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class MarkdownFile:
    """Metadata and verbatim content for one markdown source file."""

    path: str
    title: str
    description: str
    content: str
    url: str
    section: str


@dataclass(slots=True)
class GenerationResult:
    """Outcome of a generation run."""

    files_processed: int
    llms_txt_path: Path
    llms_full_txt_path: Path
    files_failed: int = 0
    failed_files: list[str] = field(default_factory=list)
