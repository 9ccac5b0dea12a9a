"""Authorization query engine.

Ownership and grants are independent sources of access. "Can access" checks
take their union (``is_owner or has_grant``); "shared with me" listings take
grants minus ownership (``has_grant and not is_owner``) so a user's own
resources never come back as shared.
"""

import logging
from typing import Iterable, List, Optional, Set

from ....core.exceptions import InvalidArgumentError, NotFoundError, StoreUnavailableError
from ....core.value_objects import ResourceId, UserId
from ...grants.services.grant_index import GrantIndex
from ...ownership.services.ownership_resolver import OwnershipResolver
from ...pagination.entities.requests import DEFAULT_MAX_PAGE_SIZE, OffsetPaginationRequest
from ...pagination.entities.responses import OffsetPaginationResponse
from ...resources.entities.protocols import ResourceRepository
from ...resources.entities.resource import Resource, ResourceType
from ...resources.entities.resource_filter import ResourceFilter
from ..entities.query_mode import ResourceQueryMode

logger = logging.getLogger(__name__)


class AuthorizationQueryEngine:
    """Computes the resources visible to a principal."""

    def __init__(
        self,
        resource_repository: ResourceRepository,
        grant_index: GrantIndex,
        ownership_resolver: OwnershipResolver,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ):
        self._resources = resource_repository
        self._grants = grant_index
        self._ownership = ownership_resolver
        self._max_page_size = max_page_size

    async def query_resource_list(
        self,
        alias_filter: Optional[str],
        user_id: UserId,
        resource_type: ResourceType,
    ) -> List[Resource]:
        """Resources owned by ``user_id`` of the given type.

        A non-empty ``alias_filter`` keeps only aliases containing it.
        """
        resources = await self._resources.find(
            ResourceFilter(
                resource_type=ResourceType.parse(resource_type),
                alias_contains=alias_filter or None,
                owner_id=user_id,
            )
        )
        return [r for r in resources if self._ownership.is_owner(r, user_id)]

    async def query_resource_paging(
        self,
        page: int,
        page_size: int,
        mode: ResourceQueryMode,
        user_id: UserId,
        resource_type: ResourceType,
        alias_filter: Optional[str] = None,
    ) -> OffsetPaginationResponse[Resource]:
        """One page of resources selected by ``mode`` plus the full match count."""
        request = OffsetPaginationRequest(
            page=page, per_page=page_size, max_per_page=self._max_page_size
        )
        resource_filter = await self._paging_filter(
            ResourceQueryMode.parse(mode), user_id, ResourceType.parse(resource_type), alias_filter or None
        )

        items, total = await self._resources.find_page(
            resource_filter, limit=request.limit, offset=request.offset
        )
        logger.debug(
            f"Paged {mode} query for user {user_id}: page {page}, "
            f"{len(items)} item(s) of {total}"
        )
        return OffsetPaginationResponse(items=items, total=total, page=page, per_page=page_size)

    async def query_authorized_resource_list(self, user_id: UserId) -> List[Resource]:
        """Resources shared with ``user_id`` by other owners.

        Only grants count here; owning a resource never lists it, even when a
        grant row to oneself exists. Grants on deleted resources are skipped.
        """
        granted_ids = await self._grants.granted_resource_ids(user_id)
        if not granted_ids:
            return []

        candidates = await self._resources.find(ResourceFilter(resource_ids=frozenset(granted_ids)))
        return [
            r for r in candidates
            if self._has_grant(r, granted_ids) and not self._ownership.is_owner(r, user_id)
        ]

    async def query_resource_except_user_id(self, user_id: UserId) -> List[Resource]:
        """Every resource not owned by ``user_id``, granted or not."""
        resources = await self._resources.find(ResourceFilter(excluded_owner_id=user_id))
        return [r for r in resources if not self._ownership.is_owner(r, user_id)]

    async def list_authorized_resource(
        self, user_id: UserId, candidate_aliases: Iterable[str]
    ) -> List[Resource]:
        """Resources named in ``candidate_aliases`` that ``user_id`` may access.

        Access means owning the resource or holding a grant on that exact
        resource; a grant on a same-named resource of another owner does not
        carry over.
        """
        if isinstance(candidate_aliases, str):
            raise InvalidArgumentError(
                "candidate_aliases must be a collection of aliases, not a single string",
                field="candidate_aliases",
            )
        aliases = frozenset(candidate_aliases)
        if not aliases:
            return []

        candidates = await self._resources.find(ResourceFilter(aliases=aliases))
        if not candidates:
            return []

        granted_ids = await self._grants.granted_resource_ids(user_id)
        authorized = [
            r for r in candidates
            if self._ownership.is_owner(r, user_id) or self._has_grant(r, granted_ids)
        ]
        logger.debug(
            f"User {user_id} authorized for {len(authorized)} of {len(candidates)} candidate resource(s)"
        )
        return authorized

    async def can_access(self, user_id: UserId, resource_id: ResourceId) -> bool:
        """Single-resource gate. Fails closed."""
        try:
            owner_id = await self._ownership.owner_of(resource_id)
            if owner_id == user_id:
                return True
            return await self._grants.has_grant(resource_id, user_id)
        except NotFoundError:
            logger.warning(f"Access denied: resource {resource_id} not found (user {user_id})")
            return False
        except StoreUnavailableError as e:
            logger.warning(f"Access denied for user {user_id} on resource {resource_id}: {e}")
            return False

    @staticmethod
    def _has_grant(resource: Resource, granted_ids: Set[ResourceId]) -> bool:
        return resource.id in granted_ids

    async def _paging_filter(
        self,
        mode: ResourceQueryMode,
        user_id: UserId,
        resource_type: ResourceType,
        alias_filter: Optional[str],
    ) -> ResourceFilter:
        if mode is ResourceQueryMode.OWNED_BY_USER:
            return ResourceFilter(
                resource_type=resource_type, alias_contains=alias_filter, owner_id=user_id
            )
        if mode is ResourceQueryMode.EXCLUDE_USER:
            return ResourceFilter(
                resource_type=resource_type, alias_contains=alias_filter, excluded_owner_id=user_id
            )
        if mode is ResourceQueryMode.AUTHORIZED:
            granted_ids = await self._grants.granted_resource_ids(user_id)
            return ResourceFilter(
                resource_type=resource_type,
                alias_contains=alias_filter,
                owner_id=user_id,
                or_resource_ids=frozenset(granted_ids),
            )
        raise InvalidArgumentError(f"Unsupported query mode: {mode}", field="mode")
