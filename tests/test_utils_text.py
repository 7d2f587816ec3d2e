"""Tests for heading and description extraction."""

from __future__ import annotations

import pytest

from llmstxt.utils.text import extract_description, extract_title, normalize_newlines


class TestExtractTitle:
    """Test extract_title function."""

    def test_atx_heading(self) -> None:
        """Should extract a # heading."""
        assert extract_title("# Getting Started\n\nfoo") == "Getting Started"

    def test_setext_heading(self) -> None:
        """Should extract a heading underlined with ===."""
        assert extract_title("Title\n===\n\nfoo") == "Title"

    def test_strips_whitespace(self) -> None:
        """Should trim whitespace around the heading text."""
        assert extract_title("#    Title with spaces   \n\nContent.") == "Title with spaces"

    def test_first_heading_wins(self) -> None:
        """Should return the first H1 when several exist."""
        assert extract_title("# First Title\n\nContent\n\n# Second Title") == "First Title"

    def test_atx_preferred_over_setext(self) -> None:
        """An ATX heading anywhere beats an earlier setext heading."""
        content = "Setext\n======\n\nText\n\n# Atx"
        assert extract_title(content) == "Atx"

    def test_h2_is_not_a_title(self) -> None:
        """Should ignore lower-level headings."""
        assert extract_title("## H2 Heading\n\nSome content.") is None

    def test_setext_with_trailing_whitespace(self) -> None:
        """Underline may carry trailing whitespace."""
        assert extract_title("My Title\n========   \n\nSome content.") == "My Title"

    def test_crlf_line_endings(self) -> None:
        """Should handle Windows line endings."""
        assert extract_title("Title\r\n=====\r\n\r\nBody") == "Title"

    def test_blank_atx_falls_back_to_setext(self) -> None:
        """A # line without text is skipped in favour of a setext heading."""
        assert extract_title("#  \n\nTitle\n===\n\nBody.") == "Title"

    @pytest.mark.parametrize("content", ["", "plain text", "#NoSpace", "#   \n\nBody."])
    def test_no_heading(self, content: str) -> None:
        """Should return None when there is no H1."""
        assert extract_title(content) is None


class TestExtractDescription:
    """Test extract_description function."""

    def test_first_paragraph_after_heading(self) -> None:
        """Should return the paragraph following the H1."""
        content = "# Title\n\nThis is the description.\n\nMore content."
        assert extract_description(content) == "This is the description."

    def test_setext_heading_removed(self) -> None:
        """Should skip a setext heading."""
        assert extract_description("Title\n=====\n\nThis is the description.") == (
            "This is the description."
        )

    def test_skips_blockquotes(self) -> None:
        """Should skip blockquote blocks."""
        content = "# Title\n\n> A quote\n\nThis is the description."
        assert extract_description(content) == "This is the description."

    def test_skips_subheadings(self) -> None:
        """Should skip H2 blocks."""
        content = "# Title\n\n## Subtitle\n\nThis is the description."
        assert extract_description(content) == "This is the description."

    def test_no_paragraph(self) -> None:
        """Should return an empty string when only headings exist."""
        assert extract_description("# Title\n\n## Another Heading") == ""

    def test_multiline_paragraph(self) -> None:
        """Should collapse line breaks into spaces."""
        content = "# Title\n\nThis is a description\nthat spans multiple lines."
        assert extract_description(content) == "This is a description that spans multiple lines."

    def test_content_without_heading(self) -> None:
        """Should use the first paragraph of headingless content."""
        assert extract_description("Just some content without heading.") == (
            "Just some content without heading."
        )

    def test_several_blank_lines(self) -> None:
        """Runs of blank lines separate blocks."""
        content = "# Title\n\n\n\n> quote\n \n\nFirst para\n\n\nSecond"
        assert extract_description(content) == "First para"

    def test_empty_content(self) -> None:
        """Should handle empty input."""
        assert extract_description("") == ""

    def test_only_first_h1_removed(self) -> None:
        """A second H1 is treated as a heading block and skipped."""
        content = "# One\n\n# Two\n\nText"
        assert extract_description(content) == "Text"


class TestNormalizeNewlines:
    """Test normalize_newlines function."""

    def test_converts_crlf_and_cr(self) -> None:
        """Should convert CRLF and CR to LF."""
        assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"
