"""Tests for core data models."""

from __future__ import annotations

from pathlib import Path

from llmstxt.models import GenerationResult, MarkdownFile


class TestMarkdownFile:
    """Test MarkdownFile dataclass."""

    def test_create_record(self) -> None:
        """Should create a record with all fields."""
        record = MarkdownFile(
            path="docs/guide.md",
            title="Guide",
            description="A guide",
            content="# Guide\n\nA guide",
            url="https://example.com/docs/guide",
            section="Docs",
        )

        assert record.path == "docs/guide.md"
        assert record.title == "Guide"
        assert record.description == "A guide"
        assert record.url == "https://example.com/docs/guide"
        assert record.section == "Docs"

    def test_record_equality(self) -> None:
        """Should compare records by value."""
        kwargs = dict(path="a.md", title="A", description="", content="a", url="u", section="Docs")

        assert MarkdownFile(**kwargs) == MarkdownFile(**kwargs)
        assert MarkdownFile(**kwargs) != MarkdownFile(**{**kwargs, "section": "API"})


class TestGenerationResult:
    """Test GenerationResult dataclass."""

    def test_defaults(self) -> None:
        """Failed count defaults to zero."""
        result = GenerationResult(
            files_processed=3,
            llms_txt_path=Path("out/llms.txt"),
            llms_full_txt_path=Path("out/llms-full.txt"),
        )

        assert result.files_failed == 0
        assert result.files_processed == 3
        assert result.failed_files == []
