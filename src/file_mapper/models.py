"""Data models for file mapper.

This module defines the runtime configuration used across the sync tool.
All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass

DEFAULT_API_URL = "https://dev.to/api"


@dataclass
class SyncConfig:
    """Runtime settings for a sync run.

    Loaded from ``.devto-sync.yaml`` by ConfigLoader, every field has a
    default so the file is optional.

    Attributes:
        api_url: Base URL of the dev.to API (no trailing slash)
        per_page: Page size requested when fetching the article index
        max_retries: Retries for create/update requests on transport errors
        retry_backoff: Base backoff in seconds (doubled after each retry)
        timeout: Per-request timeout in seconds
        title_width: Display width for titles in status lines
    """
    api_url: str = DEFAULT_API_URL
    per_page: int = 1000
    max_retries: int = 3
    retry_backoff: float = 1.0
    timeout: float = 30
    title_width: int = 50
