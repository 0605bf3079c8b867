"""Typed exception hierarchy for dev.to-related errors.

This module defines all custom exceptions used by the dev.to client library.
All exceptions inherit from DevtoError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional


class SyncError(Exception):
    """Base exception for all devto-sync errors.

    Use this to catch any application-level error from the sync tool.
    """
    pass


class DevtoError(SyncError):
    """Base exception for all dev.to-related errors."""
    pass


API_KEY_SETTINGS_URL = "https://dev.to/settings/account"


class MissingCredentialsError(DevtoError):
    """Raised when no API key is available in the environment."""

    def __init__(self, env_var: str):
        super().__init__(
            f"Please export a {env_var} env variable.\n"
            f"  ▶ You can generate one by visiting {API_KEY_SETTINGS_URL}"
        )
        self.env_var = env_var


class InvalidCredentialsError(DevtoError):
    """Raised when the API rejects the API key."""

    def __init__(self, endpoint: str, status_code: Optional[int] = None):
        message = f"bad or invalid API key (endpoint: {endpoint}"
        if status_code is not None:
            message += f", status: {status_code}"
        message += ")"
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class APIUnreachableError(DevtoError):
    """Raised when the dev.to API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(DevtoError):
    """Raised when API access fails after retries or with an unexpected response."""

    def __init__(
        self,
        message: str = "dev.to API failure",
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
