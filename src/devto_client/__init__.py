"""dev.to client library for devto-sync.

This package provides Python abstractions over the dev.to REST API,
with typed errors, API key loading, and a retry helper for writes.
"""

from .errors import (
    SyncError,
    DevtoError,
    MissingCredentialsError,
    InvalidCredentialsError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "SyncError",
    "DevtoError",
    "MissingCredentialsError",
    "InvalidCredentialsError",
    "APIUnreachableError",
    "APIAccessError",
]
