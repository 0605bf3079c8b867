"""Authentication module for loading the dev.to API key.

This module handles loading the dev.to API key from environment variables
using python-dotenv. The key is an opaque string handed to the API wrapper,
which sends it in the ``api-key`` header of every request.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import MissingCredentialsError

API_KEY_ENV_VAR = 'DEVTO_API_KEY'


class Credentials(NamedTuple):
    """dev.to API credentials."""
    api_key: str

    def __repr__(self) -> str:
        return "Credentials(api_key='***')"


class Authenticator:
    """Loads and validates the dev.to API key from environment variables.

    The key is loaded from a .env file using python-dotenv and is never
    cached or logged.

    Required environment variables:
        DEVTO_API_KEY: API key generated at https://dev.to/settings/account

    Raises:
        MissingCredentialsError: If the API key is missing

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
    """

    def __init__(self, env_var: str = API_KEY_ENV_VAR):
        """Initialize the authenticator by loading environment variables from .env file.

        Args:
            env_var: Name of the environment variable holding the API key
        """
        self.env_var = env_var
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get the dev.to API key from the environment.

        Returns:
            Credentials: A named tuple containing the api_key

        Raises:
            MissingCredentialsError: If the API key is missing or blank
        """
        api_key = os.getenv(self.env_var)

        if not api_key or not api_key.strip():
            raise MissingCredentialsError(self.env_var)

        return Credentials(api_key=api_key.strip())
