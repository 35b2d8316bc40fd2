"""Page data models.

A Nuclino page is either an "item" (a regular wiki page with Markdown content)
or a "collection" (a page that only lists other pages). The wire format tags
each page with an `object` discriminator. `Page` wraps exactly one of the two
variants and exposes the data they have in common; callers that need
variant-specific data (children, content, field values) check the variant
explicitly via `page.item` / `page.collection`.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from src.models.base import (
    parse_optional_str,
    parse_str,
    parse_uuid,
    parse_uuid_list,
    require_object,
)
from src.nuclino_client.errors import ProgrammerError


class PageKind(str, Enum):
    """How Nuclino distinguishes items from collections."""
    ITEM = "item"
    COLLECTION = "collection"


@dataclass(frozen=True)
class ContentMeta:
    """IDs of the items, collections and files referenced inside an item's content."""
    item_ids: List[UUID] = field(default_factory=list)
    file_ids: List[UUID] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentMeta":
        data = require_object(data, "contentMeta")
        return cls(
            item_ids=parse_uuid_list(data["itemIds"]),
            file_ids=parse_uuid_list(data["fileIds"]),
        )


@dataclass(frozen=True)
class Item:
    """A wiki page with Markdown content.

    Attributes:
        id: Unique identifier for the page
        workspace_id: ID of the workspace the page belongs to
        url: The page's url in the Nuclino app
        title: Page title
        created_at: Creation timestamp as an ISO-8601 string
        created_user_id: ID of the user who created the page
        last_updated_at: Last-modified timestamp as an ISO-8601 string
        last_updated_user_id: ID of the user who last modified the page
        fields: Mapping of field name to field value
        content_meta: IDs referenced inside the content
        content: Markdown content; absent in list and search results
        highlight: Search string to highlight, set on search results
    """
    id: UUID
    workspace_id: UUID
    url: str
    title: str
    created_at: str
    created_user_id: UUID
    last_updated_at: str
    last_updated_user_id: UUID
    fields: Dict[str, Any] = field(default_factory=dict)
    content_meta: ContentMeta = field(default_factory=ContentMeta)
    content: Optional[str] = None
    highlight: Optional[str] = None

    @property
    def field_values(self) -> Dict[str, Any]:
        return self.fields

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        """Create from API response dict."""
        data = require_object(data, "item")
        fields = data.get("fields") or {}
        require_object(fields, "fields")
        return cls(
            id=parse_uuid(data["id"]),
            workspace_id=parse_uuid(data["workspaceId"]),
            url=parse_str(data["url"], "url"),
            title=parse_str(data["title"], "title"),
            created_at=parse_str(data["createdAt"], "createdAt"),
            created_user_id=parse_uuid(data["createdUserId"]),
            last_updated_at=parse_str(data["lastUpdatedAt"], "lastUpdatedAt"),
            last_updated_user_id=parse_uuid(data["lastUpdatedUserId"]),
            fields=dict(fields),
            content_meta=ContentMeta.from_dict(data["contentMeta"]),
            content=parse_optional_str(data.get("content"), "content"),
            highlight=parse_optional_str(data.get("highlight"), "highlight"),
        )


@dataclass(frozen=True)
class Collection:
    """A page that is an ordered list of child pages, with no content of its own."""
    id: UUID
    workspace_id: UUID
    url: str
    title: str
    created_at: str
    created_user_id: UUID
    last_updated_at: str
    last_updated_user_id: UUID
    child_ids: List[UUID] = field(default_factory=list)

    @property
    def children(self) -> List[UUID]:
        return self.child_ids

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Collection":
        """Create from API response dict."""
        data = require_object(data, "collection")
        return cls(
            id=parse_uuid(data["id"]),
            workspace_id=parse_uuid(data["workspaceId"]),
            url=parse_str(data["url"], "url"),
            title=parse_str(data["title"], "title"),
            created_at=parse_str(data["createdAt"], "createdAt"),
            created_user_id=parse_uuid(data["createdUserId"]),
            last_updated_at=parse_str(data["lastUpdatedAt"], "lastUpdatedAt"),
            last_updated_user_id=parse_uuid(data["lastUpdatedUserId"]),
            child_ids=parse_uuid_list(data["childIds"]),
        )


@dataclass(frozen=True)
class Page:
    """A Nuclino page: exactly one of an Item or a Collection.

    Example:
        >>> page = Page.from_dict(raw)
        >>> if page.is_item:
        ...     print(page.item.content)
        ... else:
        ...     print(len(page.collection.children))
    """
    variant: Union[Item, Collection]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Page":
        """Decode a page, dispatching on its `object` discriminator.

        Raises:
            ValueError: If the discriminator is missing or not a known page kind
        """
        data = require_object(data, "page")
        tag = data.get("object")
        if tag == PageKind.ITEM.value:
            return cls(Item.from_dict(data))
        if tag == PageKind.COLLECTION.value:
            return cls(Collection.from_dict(data))
        raise ValueError(f"unknown page kind: {tag!r}")

    def _active(self) -> Union[Item, Collection]:
        if isinstance(self.variant, (Item, Collection)):
            return self.variant
        raise ProgrammerError(f"page holds a {type(self.variant).__name__}")

    @property
    def kind(self) -> PageKind:
        if isinstance(self._active(), Item):
            return PageKind.ITEM
        return PageKind.COLLECTION

    @property
    def is_item(self) -> bool:
        return self.kind is PageKind.ITEM

    @property
    def is_collection(self) -> bool:
        return self.kind is PageKind.COLLECTION

    @property
    def item(self) -> Optional[Item]:
        """The Item variant, or None if this page is a collection."""
        return self.variant if isinstance(self.variant, Item) else None

    @property
    def collection(self) -> Optional[Collection]:
        """The Collection variant, or None if this page is an item."""
        return self.variant if isinstance(self.variant, Collection) else None

    @property
    def id(self) -> UUID:
        return self._active().id

    @property
    def workspace(self) -> UUID:
        """ID of the workspace this page belongs to."""
        return self._active().workspace_id

    @property
    def url(self) -> str:
        return self._active().url

    @property
    def title(self) -> str:
        return self._active().title

    @property
    def created(self) -> str:
        """Creation timestamp as an ISO-8601 string."""
        return self._active().created_at

    @property
    def created_by(self) -> UUID:
        return self._active().created_user_id

    @property
    def modified(self) -> str:
        """Last-modified timestamp as an ISO-8601 string."""
        return self._active().last_updated_at

    @property
    def modified_by(self) -> UUID:
        return self._active().last_updated_user_id
