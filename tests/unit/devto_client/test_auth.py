"""Unit tests for devto_client.auth module."""

import pytest
from unittest.mock import patch
from src.devto_client.auth import Authenticator, Credentials
from src.devto_client.errors import MissingCredentialsError


class TestCredentials:
    """Test cases for Credentials NamedTuple."""

    def test_credentials_creation(self):
        creds = Credentials(api_key="secret-key")
        assert creds.api_key == "secret-key"

    def test_credentials_are_immutable(self):
        creds = Credentials(api_key="secret-key")
        with pytest.raises(AttributeError):
            creds.api_key = "other"

    def test_repr_hides_key(self):
        assert "secret-key" not in repr(Credentials(api_key="secret-key"))


class TestAuthenticator:
    """Test cases for Authenticator class."""

    @patch('src.devto_client.auth.load_dotenv')
    def test_init_loads_dotenv(self, mock_load_dotenv):
        """Authenticator __init__ should call load_dotenv()."""
        Authenticator()
        mock_load_dotenv.assert_called_once()

    @patch('src.devto_client.auth.load_dotenv')
    def test_get_credentials_success(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("DEVTO_API_KEY", "abc123")

        creds = Authenticator().get_credentials()

        assert isinstance(creds, Credentials)
        assert creds.api_key == "abc123"

    @patch('src.devto_client.auth.load_dotenv')
    def test_get_credentials_strips_whitespace(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("DEVTO_API_KEY", "  abc123\n")

        assert Authenticator().get_credentials().api_key == "abc123"

    @patch('src.devto_client.auth.load_dotenv')
    def test_get_credentials_missing(self, mock_load_dotenv):
        with pytest.raises(MissingCredentialsError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.env_var == "DEVTO_API_KEY"

    @patch('src.devto_client.auth.load_dotenv')
    def test_get_credentials_blank(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("DEVTO_API_KEY", "   ")

        with pytest.raises(MissingCredentialsError):
            Authenticator().get_credentials()

    @patch('src.devto_client.auth.load_dotenv')
    def test_custom_env_var(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("OTHER_KEY", "xyz")

        creds = Authenticator(env_var="OTHER_KEY").get_credentials()

        assert creds.api_key == "xyz"
