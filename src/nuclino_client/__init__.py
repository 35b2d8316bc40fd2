"""Nuclino client library.

This package provides Python abstractions over the Nuclino REST API v0,
enabling clean and type-safe interactions with Nuclino teams, workspaces,
pages and files. The client itself lives in `src.nuclino_client.client`.
"""

from .errors import (
    NuclinoError,
    ApiKeyNotFoundError,
    ServiceError,
    ClientError,
    ServerError,
    RequestError,
    FileIOError,
    JsonError,
    NoDataReturnedError,
    ProgrammerError,
)

__all__ = [
    "NuclinoError",
    "ApiKeyNotFoundError",
    "ServiceError",
    "ClientError",
    "ServerError",
    "RequestError",
    "FileIOError",
    "JsonError",
    "NoDataReturnedError",
    "ProgrammerError",
]
