"""Data models for CLI operations."""

from enum import IntEnum

from src.nuclino_client.errors import (
    ApiKeyNotFoundError,
    NuclinoError,
    RequestError,
    ServerError,
    ServiceError,
)


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): General error (bad input, malformed responses)
    - AUTH_ERROR (3): Missing API key, or the service rejected it
    - NETWORK_ERROR (4): Transport failure or server-side error

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4

    @classmethod
    def for_error(cls, error: NuclinoError) -> "ExitCode":
        """Pick the exit code matching a client error."""
        if isinstance(error, ApiKeyNotFoundError):
            return cls.AUTH_ERROR
        if isinstance(error, ServiceError) and error.status in (401, 403):
            return cls.AUTH_ERROR
        if isinstance(error, (RequestError, ServerError)):
            return cls.NETWORK_ERROR
        return cls.GENERAL_ERROR
