"""GitHub Actions integration: commit step and step outputs."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from llmstxt.models import GenerationResult

LOGGER = logging.getLogger(__name__)

BOT_NAME = "github-actions[bot]"
BOT_EMAIL = "github-actions[bot]@users.noreply.github.com"


def _run_git(args: list[str], cwd: Path | None = None) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=str(cwd) if cwd is not None else None,
        text=True,
        capture_output=True,
    )
    if result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode, result.args, output=result.stdout, stderr=result.stderr
        )
    return result.stdout.strip()


def commit_changes(files: Sequence[Path], message: str, cwd: Path | None = None) -> bool:
    """Stage ``files`` and commit them as the GitHub Actions bot.

    Returns ``True`` when a commit was created. Failures are logged as
    warnings and never raised.
    """
    try:
        LOGGER.info("Configuring git user...")
        _run_git(["config", "user.name", BOT_NAME], cwd)
        _run_git(["config", "user.email", BOT_EMAIL], cwd)

        LOGGER.info("Staging files: %s", ", ".join(str(path) for path in files))
        _run_git(["add", "--", *(str(path) for path in files)], cwd)

        if not _run_git(["status", "--porcelain"], cwd):
            LOGGER.info("No changes detected, skipping commit")
            return False

        LOGGER.info('Committing changes with message: "%s"', message)
        _run_git(["commit", "-m", message], cwd)
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or exc.output or "").strip() or str(exc)
        LOGGER.warning("Failed to commit changes: %s", detail)
        return False
    except OSError as exc:
        LOGGER.warning("Failed to commit changes: %s", exc)
        return False

    LOGGER.info("Changes committed successfully")
    return True


def write_action_outputs(result: GenerationResult, output_file: Path) -> None:
    """Append the run's outputs to a ``$GITHUB_OUTPUT`` file."""
    lines = [
        f"files-processed={result.files_processed}",
        f"llms-txt-path={result.llms_txt_path}",
        f"llms-full-txt-path={result.llms_full_txt_path}",
    ]
    with Path(output_file).open("a", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")
