"""Shared helpers for decoding API payloads into models.

Decoders raise KeyError, TypeError or ValueError on malformed input; the
envelope decoder turns those into JsonError for the caller.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID


def require_object(data: Any, what: str) -> Dict[str, Any]:
    """Check that a decoded JSON value is an object."""
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object for {what}, got {type(data).__name__}")
    return data


def parse_uuid(value: Any) -> UUID:
    """Parse an API identifier into a UUID."""
    if not isinstance(value, str):
        raise TypeError(f"expected a uuid string, got {type(value).__name__}")
    return UUID(value)


def parse_uuid_list(values: Any) -> List[UUID]:
    """Parse a JSON array of identifiers, keeping server order."""
    if not isinstance(values, list):
        raise TypeError(f"expected a list of uuids, got {type(values).__name__}")
    return [parse_uuid(v) for v in values]


def parse_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string for '{name}', got {type(value).__name__}")
    return value


def parse_optional_str(value: Any, name: str) -> Optional[str]:
    if value is None:
        return None
    return parse_str(value, name)
