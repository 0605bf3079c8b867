"""Local file handling for devto-sync.

This package discovers markdown files, extracts and validates their
frontmatter, hashes their content, and loads the tool's YAML settings.
"""

from .config_loader import ConfigLoader
from .content_hasher import ContentHasher
from .discovery import discover_documents, is_candidate
from .errors import (
    ConfigError,
    FileMapperError,
    FilesystemError,
    FrontmatterError,
    InvalidDateError,
    MalformedFrontmatterError,
    MissingFrontmatterError,
    MissingTitleError,
)
from .frontmatter_handler import FrontmatterHandler
from .models import SyncConfig

__all__ = [
    'ConfigLoader',
    'ContentHasher',
    'discover_documents',
    'is_candidate',
    'ConfigError',
    'FileMapperError',
    'FilesystemError',
    'FrontmatterError',
    'InvalidDateError',
    'MalformedFrontmatterError',
    'MissingFrontmatterError',
    'MissingTitleError',
    'FrontmatterHandler',
    'SyncConfig',
]
