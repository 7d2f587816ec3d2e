"""Heading and description extraction for markdown text."""

from __future__ import annotations

import re
from typing import Optional

ATX_H1_RE = re.compile(r"^#[ \t]+(\S.*)$", re.MULTILINE)
SETEXT_H1_RE = re.compile(r"^(.+)\n=+[ \t]*$", re.MULTILINE)
BLANK_LINES_RE = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)*")


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def extract_title(content: str) -> Optional[str]:
    """Return the first H1 heading of ``content`` or ``None``.

    An ATX heading (``# Title``) anywhere in the text wins over a setext
    heading (``Title`` underlined with ``===``).
    """
    text = normalize_newlines(content)

    for pattern in (ATX_H1_RE, SETEXT_H1_RE):
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return None


def extract_description(content: str) -> str:
    """Return the first prose paragraph after the H1 heading.

    Headings and blockquotes are skipped. Line breaks inside the paragraph
    are collapsed to single spaces. Returns an empty string when nothing
    qualifies.
    """
    text = normalize_newlines(content)
    text = ATX_H1_RE.sub("", text, count=1)
    text = SETEXT_H1_RE.sub("", text, count=1)

    for block in BLANK_LINES_RE.split(text):
        paragraph = block.strip()
        if not paragraph or paragraph.startswith(("#", ">")):
            continue
        return " ".join(line.strip() for line in paragraph.split("\n"))
    return ""
