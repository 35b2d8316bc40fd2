"""Unit tests for nuclino_client.auth module."""

import pytest
from unittest.mock import patch
from src.nuclino_client.auth import Authenticator, Credentials, BASE_URL
from src.nuclino_client.errors import ApiKeyNotFoundError


class TestCredentials:
    """Test cases for Credentials NamedTuple."""

    def test_credentials_creation(self):
        creds = Credentials(api_key="secret-key", base_url="https://api.nuclino.com")
        assert creds.api_key == "secret-key"
        assert creds.base_url == "https://api.nuclino.com"

    def test_credentials_are_immutable(self):
        creds = Credentials(api_key="secret-key", base_url="https://api.nuclino.com")
        with pytest.raises(AttributeError):
            creds.api_key = "different-key"


class TestAuthenticator:
    """Test cases for Authenticator class."""

    @patch('src.nuclino_client.auth.load_dotenv')
    def test_init_loads_dotenv(self, mock_load_dotenv):
        """Authenticator __init__ should call load_dotenv()."""
        Authenticator()
        mock_load_dotenv.assert_called_once()

    @patch('src.nuclino_client.auth.load_dotenv')
    def test_get_credentials_success(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("NUCLINO_API_KEY", "secret-key")

        creds = Authenticator().get_credentials()

        assert isinstance(creds, Credentials)
        assert creds.api_key == "secret-key"
        assert creds.base_url == BASE_URL

    @patch('src.nuclino_client.auth.load_dotenv')
    def test_base_url_override(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("NUCLINO_API_KEY", "secret-key")
        monkeypatch.setenv("NUCLINO_BASE_URL", "https://nuclino.test")

        creds = Authenticator().get_credentials()

        assert creds.base_url == "https://nuclino.test"

    @patch('src.nuclino_client.auth.load_dotenv')
    def test_missing_key_raises(self, mock_load_dotenv):
        with pytest.raises(ApiKeyNotFoundError) as exc_info:
            Authenticator().get_credentials()
        assert exc_info.value.env_var == "NUCLINO_API_KEY"

    @patch('src.nuclino_client.auth.load_dotenv')
    def test_empty_key_treated_as_missing(self, mock_load_dotenv, monkeypatch):
        monkeypatch.setenv("NUCLINO_API_KEY", "")
        with pytest.raises(ApiKeyNotFoundError):
            Authenticator().get_credentials()
