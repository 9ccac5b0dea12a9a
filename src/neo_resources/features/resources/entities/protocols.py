"""Resource repository protocol."""

from typing import Any, Dict, List, Optional, Protocol, Tuple, runtime_checkable

from ....core.value_objects import ResourceId
from .resource import Resource
from .resource_filter import ResourceFilter


@runtime_checkable
class ResourceRepository(Protocol):
    """Storage contract for resources.

    Scans return resources in creation order (ascending id).
    """

    async def insert(self, resource: Resource) -> Resource:
        """Persist a new resource and return it with its assigned id."""
        ...

    async def update(self, resource_id: ResourceId, changes: Dict[str, Any]) -> int:
        """Apply column changes. Returns the affected row count (0 or 1)."""
        ...

    async def delete(self, resource_id: ResourceId) -> int:
        """Delete a resource. Returns the affected row count (0 or 1)."""
        ...

    async def get_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Get a resource, or None if it does not exist."""
        ...

    async def find(self, resource_filter: ResourceFilter) -> List[Resource]:
        """All resources matching the filter."""
        ...

    async def find_page(
        self, resource_filter: ResourceFilter, limit: int, offset: int
    ) -> Tuple[List[Resource], int]:
        """One page of matches plus the total match count, read consistently."""
        ...
