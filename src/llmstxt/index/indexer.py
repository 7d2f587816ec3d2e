"""Markdown ingestion loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Sequence

from llmstxt.ingestion.markdown_loader import load_record
from llmstxt.models import MarkdownFile
from llmstxt.utils.files import iter_markdown_paths

LOGGER = logging.getLogger(__name__)


def find_markdown(root: Path, exclude_patterns: Sequence[str] = ()) -> list[str]:
    """Find all markdown files under ``root`` as relative paths."""
    return list(iter_markdown_paths(root, exclude_patterns))


@dataclass(slots=True)
class IndexStats:
    processed: int = 0
    failed: int = 0
    failed_files: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.processed + self.failed

    def increment(self, status: str, path: str) -> None:
        if status == "processed":
            self.processed += 1
        else:
            self.failed += 1
            self.failed_files.append(path)


class Indexer:
    """Builds one record per markdown file, skipping files that fail."""

    def __init__(self, base_url: str, sections: Mapping[str, str]) -> None:
        self.base_url = base_url
        self.sections = sections

    def index(self, root: Path, paths: Sequence[str]) -> tuple[List[MarkdownFile], IndexStats]:
        """Load every path relative to ``root`` in order."""
        records: List[MarkdownFile] = []
        stats = IndexStats()

        for path in paths:
            try:
                records.append(load_record(root, path, self.base_url, self.sections))
                stats.increment("processed", path)
            except Exception as e:
                LOGGER.warning(f"Failed to parse file {path}: {e}")
                stats.increment("failed", path)

        if stats.failed:
            LOGGER.warning(
                "Successfully parsed %d of %d file(s). %d file(s) failed.",
                stats.processed,
                stats.total,
                stats.failed,
            )
        else:
            LOGGER.info("Successfully parsed %d file(s)", stats.processed)

        return records, stats
