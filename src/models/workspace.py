"""Workspace and field metadata models.

Fields at the workspace level describe what metadata a single page in the
workspace can carry. Each field has a type tag and, for some types, a
configuration object. The configuration is decoded by its shape rather than by
the type tag, because the service does not always keep the two consistent.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from src.models.base import (
    parse_str,
    parse_uuid,
    parse_uuid_list,
    require_object,
)


class FieldType(str, Enum):
    """The kinds of field a workspace can define."""
    DATE = "date"
    TEXT = "text"
    NUMBER = "number"
    CURRENCY = "currency"
    SELECT = "select"
    MULTI_SELECT = "multiSelect"
    MULTI_COLLABORATOR = "multiCollaborator"
    CREATED_BY = "createdBy"
    LAST_UPDATED_BY = "lastUpdatedBy"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    @property
    def has_config(self) -> bool:
        """Whether fields of this type declare a configuration."""
        return self in _CONFIGURED_TYPES


_CONFIGURED_TYPES = frozenset({
    FieldType.NUMBER,
    FieldType.CURRENCY,
    FieldType.SELECT,
    FieldType.MULTI_SELECT,
    FieldType.CREATED_AT,
    FieldType.UPDATED_AT,
})


@dataclass(frozen=True)
class Selection:
    """A single option of a select or multi-select field."""
    id: UUID
    name: str


@dataclass(frozen=True)
class NumberConfig:
    """Configuration for number fields."""
    fraction_digits: Optional[int] = None


@dataclass(frozen=True)
class CurrencyConfig:
    """Configuration for currency fields."""
    currency: str
    fraction_digits: Optional[int] = None


@dataclass(frozen=True)
class SelectionsConfig:
    """Configuration shared by select and multi-select fields."""
    options: List[Selection] = field(default_factory=list)


@dataclass(frozen=True)
class TimestampConfig:
    """Configuration shared by the createdAt and updatedAt field types."""
    include_time: bool


FieldConfig = Union[NumberConfig, CurrencyConfig, SelectionsConfig, TimestampConfig]


def _optional_int(value: Any, name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer for '{name}', got {type(value).__name__}")
    return value


def parse_field_config(raw: Any) -> Optional[FieldConfig]:
    """Decode a field configuration by matching its shape.

    The most specific shapes are tried first. An absent, empty or unrecognized
    configuration object decodes to None.

    Args:
        raw: The `config` value from a field object, or None

    Returns:
        The matching config variant, or None when no configuration applies
    """
    if raw is None:
        return None
    raw = require_object(raw, "field config")

    if "currency" in raw:
        return CurrencyConfig(
            currency=parse_str(raw["currency"], "currency"),
            fraction_digits=_optional_int(raw.get("fractionDigits"), "fractionDigits"),
        )
    if "options" in raw:
        options = raw["options"]
        if not isinstance(options, list):
            raise TypeError("expected a list for 'options'")
        return SelectionsConfig(options=[
            Selection(
                id=parse_uuid(require_object(opt, "selection")["id"]),
                name=parse_str(opt["name"], "name"),
            )
            for opt in options
        ])
    if "includeTime" in raw:
        include_time = raw["includeTime"]
        if not isinstance(include_time, bool):
            raise TypeError("expected a boolean for 'includeTime'")
        return TimestampConfig(include_time=include_time)
    if "fractionDigits" in raw:
        return NumberConfig(
            fraction_digits=_optional_int(raw["fractionDigits"], "fractionDigits"),
        )
    return None


@dataclass(frozen=True)
class Field:
    """Metadata describing a per-page attribute within a workspace.

    Attributes:
        id: Unique identifier for the field
        name: Display name; also the key used in an item's field values
        field_type: What kind of field this is
        config: Type-dependent configuration, or None
    """
    id: UUID
    name: str
    field_type: FieldType
    config: Optional[FieldConfig] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Field":
        """Create from API response dict."""
        data = require_object(data, "field")
        return cls(
            id=parse_uuid(data["id"]),
            name=parse_str(data["name"], "name"),
            field_type=FieldType(data["type"]),
            config=parse_field_config(data.get("config")),
        )


@dataclass(frozen=True)
class Workspace:
    """A top-level container owning pages and field definitions.

    Attributes:
        id: Unique identifier for the workspace
        team_id: ID of the owning team
        name: Workspace name
        created_at: Creation timestamp as an ISO-8601 string
        created_user_id: ID of the user who created the workspace
        fields: Field definitions for pages in this workspace, in server order
        child_ids: IDs of the top-level pages, in server order
    """
    id: UUID
    team_id: UUID
    name: str
    created_at: str
    created_user_id: UUID
    fields: List[Field] = field(default_factory=list)
    child_ids: List[UUID] = field(default_factory=list)

    @property
    def children(self) -> List[UUID]:
        return self.child_ids

    @property
    def created(self) -> str:
        return self.created_at

    @property
    def created_by(self) -> UUID:
        return self.created_user_id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Workspace":
        """Create from API response dict."""
        data = require_object(data, "workspace")
        raw_fields = data["fields"]
        if not isinstance(raw_fields, list):
            raise TypeError("expected a list for 'fields'")
        return cls(
            id=parse_uuid(data["id"]),
            team_id=parse_uuid(data["teamId"]),
            name=parse_str(data["name"], "name"),
            created_at=parse_str(data["createdAt"], "createdAt"),
            created_user_id=parse_uuid(data["createdUserId"]),
            fields=[Field.from_dict(f) for f in raw_fields],
            child_ids=parse_uuid_list(data["childIds"]),
        )
