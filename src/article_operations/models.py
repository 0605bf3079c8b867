"""Data models for article operations."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class UploadResult:
    """Result of creating or updating an article.

    Attributes:
        success: Whether the API accepted the write
        operation: "create" or "update"
        article_id: Target article id for updates (None for creates)
        status_code: HTTP status, None if no response was received
        error: Error message (status and body, or transport error)
    """

    success: bool
    operation: str
    article_id: Optional[int] = None
    status_code: Optional[int] = None
    error: Optional[str] = None
