"""Persistence of the rendered documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from llmstxt.errors import OutputWriteError
from llmstxt.models import GenerationResult

LOGGER = logging.getLogger(__name__)

LLMS_TXT_NAME = "llms.txt"
LLMS_FULL_TXT_NAME = "llms-full.txt"


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {path.name} to {path}: {exc}") from exc
    LOGGER.debug("Wrote %d characters to %s", len(text), path)


def write_output_files(
    llms_txt: str,
    llms_full_txt: str,
    output_dir: Path,
    files_processed: int,
    *,
    files_failed: int = 0,
    failed_files: Sequence[str] = (),
) -> GenerationResult:
    """Write ``llms.txt`` and ``llms-full.txt`` into ``output_dir``.

    The directory is created when missing and existing files are overwritten.

    Raises:
        OutputWriteError: if the directory or either file cannot be written.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"Cannot create output directory {output_dir}: {exc}") from exc

    llms_txt_path = output_dir / LLMS_TXT_NAME
    llms_full_txt_path = output_dir / LLMS_FULL_TXT_NAME
    _write_text(llms_txt_path, llms_txt)
    _write_text(llms_full_txt_path, llms_full_txt)

    return GenerationResult(
        files_processed=files_processed,
        llms_txt_path=llms_txt_path,
        llms_full_txt_path=llms_full_txt_path,
        files_failed=files_failed,
        failed_files=list(failed_files),
    )
