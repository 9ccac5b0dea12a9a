"""Filter criteria for resource scans.

Every criterion left as ``None`` is not applied. Repositories translate a
filter to SQL; the in-memory store evaluates ``matches`` directly, so both
must agree on these semantics.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional

from ....core.value_objects import ResourceId, UserId
from .resource import Resource, ResourceType


@dataclass(frozen=True)
class ResourceFilter:
    """Conjunction of resource predicates.

    ``owner_id`` combined with ``or_resource_ids`` means "owned by the user OR
    one of these ids"; ``or_resource_ids`` without ``owner_id`` is ignored.
    ``resource_ids`` restricts to the given ids unconditionally.
    """

    resource_type: Optional[ResourceType] = None
    alias_contains: Optional[str] = None
    aliases: Optional[FrozenSet[str]] = None
    owner_id: Optional[UserId] = None
    excluded_owner_id: Optional[UserId] = None
    resource_ids: Optional[FrozenSet[ResourceId]] = None
    or_resource_ids: Optional[FrozenSet[ResourceId]] = None

    def matches(self, resource: Resource) -> bool:
        """Evaluate the filter against a single resource."""
        if self.resource_type is not None and resource.resource_type != self.resource_type:
            return False
        if self.alias_contains and self.alias_contains not in resource.alias:
            return False
        if self.aliases is not None and resource.alias not in self.aliases:
            return False
        if self.excluded_owner_id is not None and resource.user_id == self.excluded_owner_id:
            return False
        if self.resource_ids is not None and resource.id not in self.resource_ids:
            return False
        if self.owner_id is not None:
            owned = resource.user_id == self.owner_id
            extra = bool(self.or_resource_ids) and resource.id in self.or_resource_ids
            if not (owned or extra):
                return False
        return True
