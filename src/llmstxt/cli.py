"""Command line interface for llmstxt."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from llmstxt.config import (
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_SECTIONS_JSON,
    GeneratorConfig,
    parse_sections,
)
from llmstxt.errors import LlmsTxtError
from llmstxt.index.sections import ordered_files
from llmstxt.integrations.github import write_action_outputs
from llmstxt.pipeline import collect_records, run


console = Console()
app = typer.Typer(help="llmstxt - generate llms.txt and llms-full.txt from markdown docs")


def _envvars(name: str) -> List[str]:
    """Environment variables for an input: ``LLMSTXT_*`` and the GitHub Actions form."""
    return [f"LLMSTXT_{name.upper().replace('-', '_')}", f"INPUT_{name.upper()}"]


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _report_error(exc: LlmsTxtError) -> None:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")


def _report_failures(paths: List[str]) -> None:
    for path in paths:
        console.print(f"[yellow]Skipped:[/yellow] {escape(path)}")


InputDirOption = typer.Option(
    Path("."), "--input-directory", "-i", envvar=_envvars("input-directory"),
    help="Directory to scan for markdown files",
)
BaseUrlOption = typer.Option(
    "", "--base-url", envvar=_envvars("base-url"), help="Base URL used to build file links"
)
ProjectNameOption = typer.Option(
    "", "--project-name", envvar=_envvars("project-name"), help="Project name for the H1 header"
)
ProjectDescriptionOption = typer.Option(
    "", "--project-description", envvar=_envvars("project-description"),
    help="Short summary rendered as a blockquote",
)
ExcludeOption = typer.Option(
    "", "--exclude-pattern", envvar=_envvars("exclude-pattern"),
    help="Comma-separated glob patterns to skip",
)
SectionsOption = typer.Option(
    DEFAULT_SECTIONS_JSON, "--sections", envvar=_envvars("sections"),
    help="JSON object mapping section names to glob patterns",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose logging")


@app.command()
def generate(
    input_directory: Path = InputDirOption,
    output_directory: Path = typer.Option(
        Path("."), "--output-directory", "-o", envvar=_envvars("output-directory"),
        help="Directory where llms.txt and llms-full.txt are written",
    ),
    base_url: str = BaseUrlOption,
    project_name: str = ProjectNameOption,
    project_description: str = ProjectDescriptionOption,
    exclude_pattern: str = ExcludeOption,
    sections: str = SectionsOption,
    commit: bool = typer.Option(
        False, "--commit/--no-commit", envvar=_envvars("commit-changes"),
        help="Commit the generated files with git",
    ),
    commit_message: str = typer.Option(
        DEFAULT_COMMIT_MESSAGE, "--commit-message", envvar=_envvars("commit-message"),
        help="Message for the optional commit",
    ),
    verbose: bool = VerboseOption,
) -> None:
    """Generate llms.txt and llms-full.txt."""
    _setup_logging(verbose)
    try:
        config = GeneratorConfig(
            base_url=base_url,
            project_name=project_name,
            input_directory=input_directory,
            output_directory=output_directory,
            project_description=project_description,
            exclude_pattern=exclude_pattern,
            sections=parse_sections(sections),
            commit_changes=commit,
            commit_message=commit_message,
        )
        result = run(config, Path.cwd())
    except LlmsTxtError as exc:
        _report_error(exc)
        raise typer.Exit(code=1) from exc

    github_output = os.environ.get("GITHUB_OUTPUT")
    if github_output:
        write_action_outputs(result, Path(github_output))

    console.print(
        f"Processed: {result.files_processed}, failed: {result.files_failed}"
    )
    _report_failures(result.failed_files)
    console.print(f"Generated: [bold]{result.llms_txt_path}[/bold]")
    console.print(f"Generated: [bold]{result.llms_full_txt_path}[/bold]")


@app.command()
def preview(
    input_directory: Path = InputDirOption,
    base_url: str = BaseUrlOption,
    project_name: str = ProjectNameOption,
    exclude_pattern: str = ExcludeOption,
    sections: str = SectionsOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the entries llms.txt would contain without writing files."""
    _setup_logging(verbose)
    try:
        config = GeneratorConfig(
            base_url=base_url,
            project_name=project_name,
            input_directory=input_directory,
            exclude_pattern=exclude_pattern,
            sections=parse_sections(sections),
        )
        records, stats = collect_records(config, Path.cwd())
    except LlmsTxtError as exc:
        _report_error(exc)
        raise typer.Exit(code=1) from exc

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Section")
    table.add_column("Title")
    table.add_column("URL")
    table.add_column("Description")

    for record in ordered_files(records):
        table.add_row(
            escape(record.section),
            escape(record.title),
            escape(record.url),
            escape(record.description[:120]),
        )

    console.print(table)
    console.print(f"Processed: {stats.processed}, failed: {stats.failed}")
    _report_failures(stats.failed_files)
