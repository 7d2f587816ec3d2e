"""Exceptions raised by llmstxt."""

from __future__ import annotations


class LlmsTxtError(Exception):
    """Base exception for llms.txt generation failures."""


class ConfigError(LlmsTxtError, ValueError):
    """Raised when generator inputs are missing or malformed."""


class ReadError(LlmsTxtError, OSError):
    """Raised when a markdown source cannot be read."""


class OutputWriteError(LlmsTxtError, OSError):
    """Raised when the output directory or files cannot be written."""


class GenerationError(LlmsTxtError):
    """Raised when a run cannot produce output."""
