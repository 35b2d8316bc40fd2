"""Typed exception hierarchy for Nuclino client errors.

This module defines all custom exceptions raised by the Nuclino client library.
All exceptions inherit from the NuclinoError base class so callers can catch
everything from the library in one place, or match on a specific kind to decide
whether to retry (server errors), fix the request (client errors), or give up
(missing credentials).
"""

from typing import Optional


class NuclinoError(Exception):
    """Base exception for all Nuclino client errors."""
    pass


class ApiKeyNotFoundError(NuclinoError):
    """Raised when the API key cannot be found in the process environment."""

    def __init__(self, env_var: str = "NUCLINO_API_KEY"):
        super().__init__(
            f"Cannot find an API key in the process environment ({env_var})"
        )
        self.env_var = env_var


class ServiceError(NuclinoError):
    """Base exception for failures reported by the Nuclino service itself."""

    def __init__(self, status: int, message: str, prefix: str):
        super().__init__(f"{prefix}: status={status}; {message}")
        self.status = status
        self.message = message


class ClientError(ServiceError):
    """Raised when the service reports an error in the client's request (4xx)."""

    def __init__(self, status: int, message: str = ""):
        super().__init__(status, message, "Client error")


class ServerError(ServiceError):
    """Raised when the service reports an error on its own side (5xx)."""

    def __init__(self, status: int, message: str = ""):
        super().__init__(status, message, "Nuclino service error")


class RequestError(NuclinoError):
    """Raised when the transport fails before any response status was obtained."""

    def __init__(self, message: str):
        super().__init__(f"Request failed: {message}")
        self.message = message


class FileIOError(NuclinoError):
    """Raised when a local file operation fails."""

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"I/O error on {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class JsonError(NuclinoError):
    """Raised when a payload fails to parse as the expected JSON shape."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoDataReturnedError(NuclinoError):
    """Raised when a successful response did not include a data field."""

    def __init__(self):
        super().__init__("Didn't get a data field on the response")


class ProgrammerError(NuclinoError):
    """Raised when this library violates one of its own invariants.

    A correct caller should never see this. Please report it as a bug.
    """

    def __init__(self, detail: Optional[str] = None):
        message = "Programmer error. Please file a bug."
        if detail:
            message += f" ({detail})"
        super().__init__(message)
        self.detail = detail


def make_error(status: int, message: str) -> ServiceError:
    """Turn a failed response into the matching service error.

    Args:
        status: HTTP status code of the response
        message: Message the service included with the failure

    Returns:
        ClientError for statuses below 500, ServerError otherwise
    """
    if status < 500:
        return ClientError(status, message)
    return ServerError(status, message)
