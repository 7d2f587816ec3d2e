"""End-to-end llms.txt generation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from llmstxt.config import GeneratorConfig
from llmstxt.errors import GenerationError, OutputWriteError
from llmstxt.index.indexer import Indexer, IndexStats, find_markdown
from llmstxt.index.renderer import generate_llms_full_txt, generate_llms_txt
from llmstxt.index.storage import write_output_files
from llmstxt.integrations.github import commit_changes
from llmstxt.models import GenerationResult, MarkdownFile

LOGGER = logging.getLogger(__name__)


def collect_records(
    config: GeneratorConfig, base_dir: Path | None = None
) -> tuple[List[MarkdownFile], IndexStats]:
    """Validate ``config``, scan the input directory and build all records.

    Raises:
        ConfigError: if the configuration is invalid.
        GenerationError: if the input directory is missing, holds no markdown
            files, or none of them could be parsed.
    """
    config.validate()

    input_dir = config.resolve_input_dir(base_dir)
    if not input_dir.exists():
        raise GenerationError(f"Input directory does not exist: {input_dir}")
    if not input_dir.is_dir():
        raise GenerationError(f"Input path is not a directory: {input_dir}")

    LOGGER.info("Scanning for markdown files in: %s", input_dir)
    paths = find_markdown(input_dir, config.exclude_patterns)
    if not paths:
        suffix = f" (exclude pattern: {config.exclude_pattern})" if config.exclude_pattern else ""
        raise GenerationError(f"No markdown files found in directory: {input_dir}{suffix}")
    LOGGER.info("Found %d markdown file(s)", len(paths))

    indexer = Indexer(config.base_url, config.sections)
    records, stats = indexer.index(input_dir, paths)
    if not records:
        raise GenerationError(
            f"No markdown files could be successfully parsed. All {len(paths)} file(s) failed."
        )
    return records, stats


def run(config: GeneratorConfig, base_dir: Path | None = None) -> GenerationResult:
    """Generate ``llms.txt`` and ``llms-full.txt`` for ``config``.

    Relative directories are resolved against ``base_dir`` (the current
    working directory when omitted).
    """
    records, stats = collect_records(config, base_dir)

    llms_txt = generate_llms_txt(records, config.project_name, config.project_description)
    llms_full_txt = generate_llms_full_txt(records)
    LOGGER.info("Generated llms.txt and llms-full.txt content")

    output_dir = config.resolve_output_dir(base_dir)
    try:
        result = write_output_files(
            llms_txt,
            llms_full_txt,
            output_dir,
            stats.processed,
            files_failed=stats.failed,
            failed_files=stats.failed_files,
        )
    except OutputWriteError as exc:
        raise GenerationError(
            f"Failed to write output files to {output_dir}: {exc}. Check directory permissions."
        ) from exc
    LOGGER.info("Files written to: %s", output_dir)

    if config.commit_changes:
        LOGGER.info("Committing generated files...")
        commit_changes(
            [result.llms_txt_path, result.llms_full_txt_path],
            config.commit_message,
            cwd=output_dir,
        )

    return result
