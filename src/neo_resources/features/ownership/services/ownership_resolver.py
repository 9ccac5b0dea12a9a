"""Ownership resolution: resource -> owning user -> tenant."""

import logging
from typing import Optional

from ....core.exceptions import NotFoundError
from ....core.value_objects import ResourceId, TenantId, UserId
from ...resources.entities.protocols import ResourceRepository
from ...resources.entities.resource import Resource
from ...users.entities.protocols import UserRepository
from .ownership_cache import OwnershipCache

logger = logging.getLogger(__name__)


class OwnershipResolver:
    """Pure ownership lookups with an optional read-through cache."""

    def __init__(
        self,
        resource_repository: ResourceRepository,
        user_repository: UserRepository,
        cache: Optional[OwnershipCache] = None,
    ):
        self._resources = resource_repository
        self._users = user_repository
        self._cache = cache
        # Bumped by every invalidation; a read that straddles one is not cached
        self._invalidations = 0

    @staticmethod
    def is_owner(resource: Resource, user_id: UserId) -> bool:
        """Ownership predicate. Kept separate from grant checks on purpose."""
        return resource.is_owned_by(user_id)

    async def owner_of(self, resource_id: ResourceId) -> UserId:
        """Return the owning user of a resource.

        Raises:
            NotFoundError: if the resource does not exist
        """
        if self._cache is not None:
            cached = await self._cache.get_owner(resource_id)
            if cached is not None:
                return cached

        seen = self._invalidations
        resource = await self._resources.get_by_id(resource_id)
        if resource is None:
            raise NotFoundError("Resource", resource_id)

        if self._cache is not None and seen == self._invalidations:
            await self._cache.set_owner(resource_id, resource.user_id)
        return resource.user_id

    async def tenant_of(self, user_id: UserId) -> TenantId:
        """Return the tenant a user belongs to.

        Raises:
            NotFoundError: if the user does not exist
        """
        user = await self._users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user.tenant_id

    async def invalidate(self, resource_id: ResourceId) -> None:
        """Forget any cached owner for the resource."""
        self._invalidations += 1
        if self._cache is not None:
            await self._cache.invalidate(resource_id)
            logger.debug(f"Invalidated cached owner of resource {resource_id}")
