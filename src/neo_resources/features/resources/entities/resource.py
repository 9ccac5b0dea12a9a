"""Resource domain entity.

A resource is a named, typed unit (a file or a UDF jar) owned by exactly one
user. Aliases are display names and are only expected to be unique per owner.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Optional, Union

from ....core.exceptions import InvalidArgumentError
from ....core.value_objects import ResourceId, UserId


class ResourceType(IntEnum):
    """Closed set of resource types. Values are the persisted codes."""

    FILE = 0
    UDF = 1

    @classmethod
    def parse(cls, value: Union[int, str, "ResourceType"]) -> "ResourceType":
        """Accept a member, its code or its name."""
        try:
            if isinstance(value, str):
                return cls[value.upper()]
            return cls(value)
        except (KeyError, ValueError) as e:
            raise InvalidArgumentError(f"Unknown resource type: {value!r}", field="resource_type") from e


@dataclass
class Resource:
    """Resource domain entity."""

    alias: str
    resource_type: ResourceType
    user_id: UserId
    id: Optional[ResourceId] = None

    description: Optional[str] = None
    file_name: Optional[str] = None
    size: int = 0

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_owned_by(self, user_id: UserId) -> bool:
        """Check whether ``user_id`` is the owner of this resource."""
        return self.user_id == user_id


# Attributes callers may change through update operations
UPDATABLE_FIELDS = frozenset({
    "alias",
    "resource_type",
    "user_id",
    "description",
    "file_name",
    "size",
})
