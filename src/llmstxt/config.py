"""Generator configuration and input parsing."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List
from urllib.parse import urlparse

from llmstxt.errors import ConfigError

DEFAULT_SECTIONS_JSON = '{"Docs": "**"}'
DEFAULT_COMMIT_MESSAGE = "chore: update llms.txt files"


def _default_sections() -> Dict[str, str]:
    return {"Docs": "**"}


def parse_sections(raw: str | None) -> Dict[str, str]:
    """Parse a JSON object mapping section names to glob patterns.

    Key order is preserved. Blank input yields the default mapping.
    """
    if raw is None or not raw.strip():
        return _default_sections()
    try:
        sections = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid sections JSON: {exc}") from exc
    if not isinstance(sections, dict):
        raise ConfigError("Invalid sections JSON: Sections must be a JSON object")
    for name, pattern in sections.items():
        if not isinstance(pattern, str):
            raise ConfigError(
                f"Invalid sections JSON: pattern for section {name!r} must be a string"
            )
    return sections


def parse_exclude_patterns(raw: str | None) -> List[str]:
    """Split a comma-separated list of glob patterns."""
    if not raw:
        return []
    return [pattern.strip() for pattern in raw.split(",") if pattern.strip()]


def is_valid_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    if any(char.isspace() for char in parsed.netloc):
        return False
    return bool(parsed.scheme and parsed.netloc)


@dataclass(slots=True)
class GeneratorConfig:
    base_url: str
    project_name: str
    input_directory: Path = Path(".")
    output_directory: Path = Path(".")
    project_description: str = ""
    exclude_pattern: str = ""
    sections: Dict[str, str] = field(default_factory=_default_sections)
    commit_changes: bool = False
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    @property
    def exclude_patterns(self) -> List[str]:
        return parse_exclude_patterns(self.exclude_pattern)

    def validate(self) -> None:
        """Raise ``ConfigError`` when a required input is missing or malformed."""
        if not self.base_url or not self.base_url.strip():
            raise ConfigError("base-url is required and cannot be empty")
        if not self.project_name or not self.project_name.strip():
            raise ConfigError("project-name is required and cannot be empty")
        if not is_valid_url(self.base_url):
            raise ConfigError(
                f"Invalid base-url format: {self.base_url}. "
                "Must be a valid URL (e.g., https://example.com)"
            )
        if not isinstance(self.sections, dict):
            raise ConfigError("Invalid sections JSON: Sections must be a JSON object")

    def resolve_input_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.input_directory, base_dir)

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.output_directory, base_dir)


def _resolve(path: Path, base_dir: Path | None) -> Path:
    path = Path(path)
    if path.is_absolute() or base_dir is None:
        return path.resolve()
    return (base_dir / path).resolve()
