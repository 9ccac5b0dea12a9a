"""Grant repository protocol."""

from typing import Optional, Protocol, Set, runtime_checkable

from ....core.value_objects import GrantId, ResourceId, UserId
from .grant import Grant


@runtime_checkable
class GrantRepository(Protocol):
    """Storage contract for grants."""

    async def insert(self, grant: Grant) -> Grant:
        """Persist a grant and return it with its assigned id."""
        ...

    async def delete(self, grant_id: GrantId) -> int:
        """Delete a grant. Returns the affected row count."""
        ...

    async def get_by_id(self, grant_id: GrantId) -> Optional[Grant]:
        ...

    async def exists(self, resource_id: ResourceId, user_id: UserId) -> bool:
        """Whether at least one grant row exists for the pair."""
        ...

    async def find_resource_ids_by_user(self, user_id: UserId) -> Set[ResourceId]:
        """Distinct resource ids granted to the user, dangling ones included."""
        ...

    async def find_granted_aliases(self, user_id: UserId, aliases: Set[str]) -> Set[str]:
        """Aliases among ``aliases`` of live resources granted to the user."""
        ...
