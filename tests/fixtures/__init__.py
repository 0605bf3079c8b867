"""Test fixtures for devto-sync tests.

This module provides test fixtures for:
- Sample markdown documents (valid and invalid frontmatter)
- Sample dev.to article payloads
"""

from .sample_markdown import (
    SAMPLE_MARKDOWN_MINIMAL,
    SAMPLE_MARKDOWN_FULL,
    SAMPLE_MARKDOWN_DRAFT,
    SAMPLE_MARKDOWN_NO_FRONTMATTER,
    SAMPLE_MARKDOWN_NO_TITLE,
    SAMPLE_MARKDOWN_BAD_DATE,
)
from .sample_articles import make_article_payload

__all__ = [
    "SAMPLE_MARKDOWN_MINIMAL",
    "SAMPLE_MARKDOWN_FULL",
    "SAMPLE_MARKDOWN_DRAFT",
    "SAMPLE_MARKDOWN_NO_FRONTMATTER",
    "SAMPLE_MARKDOWN_NO_TITLE",
    "SAMPLE_MARKDOWN_BAD_DATE",
    "make_article_payload",
]
