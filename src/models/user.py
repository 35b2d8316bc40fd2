"""User and team data models."""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from uuid import UUID

from src.models.base import parse_optional_str, parse_str, parse_uuid, require_object


@dataclass(frozen=True)
class User:
    """A Nuclino user.

    Attributes:
        id: Unique identifier for the user
        first_name: The user's first name
        last_name: The user's last name
        email: The user's email address
        avatar_url: URL of the user's avatar, if one is set
    """
    id: UUID
    first_name: str
    last_name: str
    email: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Create from API response dict."""
        data = require_object(data, "user")
        return cls(
            id=parse_uuid(data["id"]),
            first_name=parse_str(data["firstName"], "firstName"),
            last_name=parse_str(data["lastName"], "lastName"),
            email=parse_str(data["email"], "email"),
            avatar_url=parse_optional_str(data.get("avatarUrl"), "avatarUrl"),
        )


@dataclass(frozen=True)
class Team:
    """A Nuclino team.

    Attributes:
        id: Unique identifier for the team
        url: The team's url in the Nuclino app
        name: The team's name
        created_at: Creation timestamp as an ISO-8601 string
        created_user_id: ID of the user who created the team
    """
    id: UUID
    url: str
    name: str
    created_at: str
    created_user_id: UUID

    @property
    def created(self) -> str:
        return self.created_at

    @property
    def created_by(self) -> UUID:
        return self.created_user_id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Create from API response dict."""
        data = require_object(data, "team")
        return cls(
            id=parse_uuid(data["id"]),
            url=parse_str(data["url"], "url"),
            name=parse_str(data["name"], "name"),
            created_at=parse_str(data["createdAt"], "createdAt"),
            created_user_id=parse_uuid(data["createdUserId"]),
        )


@dataclass(frozen=True)
class IdOnly:
    """An id-only stub, returned by DELETE endpoints."""
    id: UUID

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IdOnly":
        data = require_object(data, "id stub")
        return cls(id=parse_uuid(data["id"]))
