"""Downloadable file data models."""

from dataclasses import dataclass
from typing import Any, Dict
from uuid import UUID

from src.models.base import parse_str, parse_uuid, require_object


@dataclass(frozen=True)
class DownloadInfo:
    """Information required to download a file.

    Attributes:
        url: Signed download URL, valid for 10 minutes after creation
        expires_at: ISO-8601 timestamp at which the url stops working
    """
    url: str
    expires_at: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DownloadInfo":
        data = require_object(data, "download")
        return cls(
            url=parse_str(data["url"], "url"),
            expires_at=parse_str(data["expiresAt"], "expiresAt"),
        )


@dataclass(frozen=True)
class File:
    """A downloadable file attached to a wiki page.

    Attributes:
        id: Unique identifier for the file
        item_id: ID of the item the file is attached to
        file_name: Name of the file
        created_at: Upload timestamp as an ISO-8601 string
        created_user_id: ID of the user who uploaded the file
        download: Short-lived download link
    """
    id: UUID
    item_id: UUID
    file_name: str
    created_at: str
    created_user_id: UUID
    download: DownloadInfo

    @property
    def filename(self) -> str:
        return self.file_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "File":
        """Create from API response dict."""
        data = require_object(data, "file")
        return cls(
            id=parse_uuid(data["id"]),
            item_id=parse_uuid(data["itemId"]),
            file_name=parse_str(data["fileName"], "fileName"),
            created_at=parse_str(data["createdAt"], "createdAt"),
            created_user_id=parse_uuid(data["createdUserId"]),
            download=DownloadInfo.from_dict(data["download"]),
        )
