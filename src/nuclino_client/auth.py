"""Authentication module for loading Nuclino credentials.

This module handles loading the Nuclino API key from environment variables
using python-dotenv. The key is required; the base URL may optionally be
overridden for testing against another host.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import ApiKeyNotFoundError

# The env var checked for the API key.
APIKEY_ENV_VAR = "NUCLINO_API_KEY"

# Optional override for the API host.
BASE_URL_ENV_VAR = "NUCLINO_BASE_URL"

# The base url for the entire API.
BASE_URL = "https://api.nuclino.com"


class Credentials(NamedTuple):
    """Nuclino API credentials."""
    api_key: str
    base_url: str


class Authenticator:
    """Loads and validates Nuclino credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Environment variables:
        NUCLINO_API_KEY: Nuclino API key (required)
        NUCLINO_BASE_URL: API base URL (optional, defaults to https://api.nuclino.com)

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.base_url}")
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get Nuclino credentials from environment variables.

        Returns:
            Credentials: A named tuple containing api_key and base_url

        Raises:
            ApiKeyNotFoundError: If the API key is missing or empty
        """
        api_key = os.getenv(APIKEY_ENV_VAR)
        if not api_key:
            raise ApiKeyNotFoundError(APIKEY_ENV_VAR)

        base_url = os.getenv(BASE_URL_ENV_VAR) or BASE_URL
        return Credentials(api_key=api_key, base_url=base_url)
