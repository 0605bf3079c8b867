"""Typed exception hierarchy for file mapper errors.

This module defines all custom exceptions used by the file mapper library.
All exceptions inherit from FileMapperError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from src.devto_client.errors import SyncError

EDITOR_GUIDE_URL = "https://dev.to/p/editor_guide"


class FileMapperError(SyncError):
    """Base exception for all file mapper errors."""
    pass


class FilesystemError(FileMapperError):
    """Raised when filesystem operations fail (read, walk, permissions, etc)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class ConfigError(FileMapperError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class FrontmatterError(FileMapperError):
    """Raised when YAML frontmatter parsing or validation fails."""

    def __init__(self, file_path: str, message: str):
        super().__init__(
            f"Frontmatter error in {file_path}: {message}"
        )
        self.file_path = file_path
        self.message = message


class MissingFrontmatterError(FrontmatterError):
    """Raised when a document has no delimited frontmatter block."""

    def __init__(self, file_path: str):
        super().__init__(
            file_path,
            "file is missing required markdown frontmatter.\n"
            f"  ▶ Please see {EDITOR_GUIDE_URL} for more information on what "
            "frontmatter is expected"
        )


class MalformedFrontmatterError(FrontmatterError):
    """Raised when the frontmatter block is not a YAML key/value mapping."""
    pass


class MissingTitleError(FrontmatterError):
    """Raised when the frontmatter has no string title."""

    def __init__(self, file_path: str):
        super().__init__(file_path, "frontmatter is missing a string title")


class InvalidDateError(FrontmatterError):
    """Raised when the frontmatter date is not an RFC 3339 timestamp."""

    def __init__(self, file_path: str, value: str):
        super().__init__(file_path, f"frontmatter has an invalid date: {value}")
        self.value = value
