"""Outbound request bodies for creating and updating pages.

The same endpoint creates both items and collections, based on the data posted
to it. NewPageBuilder keeps the constraints Nuclino puts on each kind: a page
is created either at the top level of a workspace or under a parent, never
both, and only items may carry content.

Example:
    >>> new_page = (
    ...     NewPageBuilder.item()
    ...     .title("Meeting notes")
    ...     .content("Some *markdown*")
    ...     .workspace(workspace_id)
    ...     .build()
    ... )
    >>> new_page.to_dict()
    {'workspaceId': '...', 'title': 'Meeting notes', 'object': 'item', 'content': 'Some *markdown*'}
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from uuid import UUID

from src.models.page import PageKind

IdLike = Union[UUID, str]


def _without_absent(body: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None; absent fields are never sent as null."""
    return {k: v for k, v in body.items() if v is not None}


@dataclass(frozen=True)
class NewPage:
    """A page to be created. Build one with NewPageBuilder rather than directly.

    Attributes:
        object: Whether an item or a collection is being created
        workspace_id: Workspace to create the page in (exclusive with parent_id)
        parent_id: Collection to create the page in (exclusive with workspace_id)
        title: Optional page title
        index: Zero-based position among the parent's children; None appends
        content: Markdown content, items only
    """
    object: PageKind
    workspace_id: Optional[UUID] = None
    parent_id: Optional[UUID] = None
    title: Optional[str] = None
    index: Optional[int] = None
    content: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON body expected by POST /v0/items."""
        return _without_absent({
            "workspaceId": str(self.workspace_id) if self.workspace_id else None,
            "parentId": str(self.parent_id) if self.parent_id else None,
            "title": self.title,
            "index": self.index,
            "object": self.object.value,
            "content": self.content,
        })


class NewPageBuilder:
    """Staging object for a NewPage.

    Start with item() or collection(), chain the setters, then call build().
    build() does not check that one of workspace() or parent() was called;
    the service rejects the request if neither was.
    """

    def __init__(self, kind: PageKind):
        self._kind = kind
        self._workspace_id: Optional[UUID] = None
        self._parent_id: Optional[UUID] = None
        self._title: Optional[str] = None
        self._index: Optional[int] = None
        self._content: Optional[str] = None

    @classmethod
    def item(cls) -> "NewPageBuilder":
        """Start building a new item page."""
        return cls(PageKind.ITEM)

    @classmethod
    def collection(cls) -> "NewPageBuilder":
        """Start building a new collection page."""
        return cls(PageKind.COLLECTION)

    def title(self, title: str) -> "NewPageBuilder":
        self._title = title
        return self

    def index(self, index: int) -> "NewPageBuilder":
        """Choose where among the parent's existing children to insert the page."""
        if index < 0:
            raise ValueError(f"index must be zero or greater, got {index}")
        self._index = index
        return self

    def workspace(self, workspace_id: IdLike) -> "NewPageBuilder":
        """Create the page at the top level of a workspace. Clears any parent."""
        self._workspace_id = _as_uuid(workspace_id)
        self._parent_id = None
        return self

    def parent(self, parent_id: IdLike) -> "NewPageBuilder":
        """Create the page as a child of a collection. Clears any workspace."""
        self._parent_id = _as_uuid(parent_id)
        self._workspace_id = None
        return self

    def content(self, content: str) -> "NewPageBuilder":
        """Set Markdown content. Ignored for collections, which the service
        would reject if they carried content."""
        self._content = content
        return self

    def build(self) -> NewPage:
        content = self._content if self._kind is PageKind.ITEM else None
        return NewPage(
            object=self._kind,
            workspace_id=self._workspace_id,
            parent_id=self._parent_id,
            title=self._title,
            index=self._index,
            content=content,
        )


@dataclass(frozen=True)
class ModifyItem:
    """Partial update for an item or collection.

    Only the fields that are set are sent, so the service leaves the others
    untouched.
    """
    title: Optional[str] = None
    content: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON body expected by PUT /v0/items/{id}."""
        return _without_absent({
            "title": self.title,
            "content": self.content,
        })


def _as_uuid(value: IdLike) -> UUID:
    if isinstance(value, UUID):
        return value
    return UUID(str(value))
