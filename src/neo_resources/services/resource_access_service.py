"""Resource access service.

Single entry point for hosts: resource and grant writes, the authorization
queries and tenant-code resolution, wired over one entity store.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ..adapters.protocols import EntityStore
from ..config.settings import ResourceAclSettings, get_settings
from ..core.exceptions import InvalidArgumentError, NotFoundError
from ..core.value_objects import GrantId, ResourceId, TenantId, UserId
from ..features.authorization.entities.query_mode import ResourceQueryMode
from ..features.authorization.services.query_engine import AuthorizationQueryEngine
from ..features.grants.entities.grant import Grant
from ..features.grants.services.grant_index import GrantIndex
from ..features.ownership.services.ownership_cache import (
    MemoryOwnershipCache,
    OwnershipCache,
    RedisOwnershipCache,
)
from ..features.ownership.services.ownership_resolver import OwnershipResolver
from ..features.pagination.entities.responses import OffsetPaginationResponse
from ..features.resources.entities.resource import UPDATABLE_FIELDS, Resource, ResourceType
from ..features.tenants.entities.tenant import Tenant
from ..features.tenants.services.tenant_code_resolver import TenantCodeResolver
from ..features.users.entities.user import User, UserType

logger = logging.getLogger(__name__)

IdLike = Union[int, ResourceId, UserId, TenantId, GrantId]


class ResourceAccessService:
    """Ownership, sharing and authorization queries over an entity store.

    Identifier arguments accept either the typed id or the raw integer key.
    """

    def __init__(
        self,
        store: EntityStore,
        settings: Optional[ResourceAclSettings] = None,
        ownership_cache: Optional[OwnershipCache] = None,
    ):
        self.settings = settings or get_settings()
        self._store = store
        self.ownership = OwnershipResolver(store.resources, store.users, cache=ownership_cache)
        self.grant_index = GrantIndex(store.grants)
        self.query_engine = AuthorizationQueryEngine(
            store.resources,
            self.grant_index,
            self.ownership,
            max_page_size=self.settings.max_page_size,
        )
        self.tenant_codes = TenantCodeResolver(store.resources, store.tenants, self.ownership)

    # Tenants and users

    async def insert_tenant(
        self, tenant_name: str, tenant_code: str, description: Optional[str] = None
    ) -> TenantId:
        if not tenant_code or not tenant_code.strip():
            raise InvalidArgumentError("Tenant code must not be empty", field="tenant_code")
        tenant = await self._store.tenants.insert(
            Tenant(tenant_name=tenant_name, tenant_code=tenant_code, description=description)
        )
        return tenant.id

    async def delete_tenant(self, tenant_id: IdLike) -> int:
        return await self._store.tenants.delete(_coerce_id(TenantId, tenant_id, "tenant_id"))

    async def insert_user(
        self,
        user_name: str,
        tenant_id: IdLike,
        user_type: UserType = UserType.GENERAL_USER,
        email: Optional[str] = None,
    ) -> UserId:
        """Register a principal. The tenant must exist."""
        if not user_name or not user_name.strip():
            raise InvalidArgumentError("User name must not be empty", field="user_name")
        tenant_id = _coerce_id(TenantId, tenant_id, "tenant_id")
        if await self._store.tenants.get_by_id(tenant_id) is None:
            raise NotFoundError("Tenant", tenant_id)
        user = await self._store.users.insert(
            User(
                user_name=user_name,
                tenant_id=tenant_id,
                user_type=_coerce_user_type(user_type),
                email=email,
            )
        )
        return user.id

    async def delete_user(self, user_id: IdLike) -> int:
        return await self._store.users.delete(_coerce_id(UserId, user_id, "user_id"))

    # Resources

    async def insert_resource(
        self,
        alias: str,
        resource_type: ResourceType,
        owner_id: IdLike,
        description: Optional[str] = None,
        file_name: Optional[str] = None,
        size: int = 0,
    ) -> ResourceId:
        _require_alias(alias)
        resource = await self._store.resources.insert(
            Resource(
                alias=alias,
                resource_type=ResourceType.parse(resource_type),
                user_id=_coerce_id(UserId, owner_id, "owner_id"),
                description=description,
                file_name=file_name,
                size=size,
            )
        )
        return resource.id

    async def get_resource(self, resource_id: IdLike) -> Resource:
        resource_id = _coerce_id(ResourceId, resource_id, "resource_id")
        resource = await self._store.resources.get_by_id(resource_id)
        if resource is None:
            raise NotFoundError("Resource", resource_id)
        return resource

    async def update_resource(self, resource_id: IdLike, **fields: Any) -> int:
        """Update resource attributes. Returns the affected row count (0 or 1)."""
        resource_id = _coerce_id(ResourceId, resource_id, "resource_id")
        changes = self._normalize_changes(fields)

        updated = await self._store.resources.update(resource_id, changes)
        if "user_id" in changes:
            await self.ownership.invalidate(resource_id)
        return updated

    async def delete_resource(self, resource_id: IdLike) -> int:
        """Delete a resource. Its grants are left to dangle."""
        resource_id = _coerce_id(ResourceId, resource_id, "resource_id")
        deleted = await self._store.resources.delete(resource_id)
        await self.ownership.invalidate(resource_id)
        return deleted

    # Grants

    async def insert_grant(self, resource_id: IdLike, grantee_id: IdLike) -> GrantId:
        """Share a resource with a user. Both must exist."""
        resource_id = _coerce_id(ResourceId, resource_id, "resource_id")
        grantee_id = _coerce_id(UserId, grantee_id, "grantee_id")
        if await self._store.resources.get_by_id(resource_id) is None:
            raise NotFoundError("Resource", resource_id)
        if await self._store.users.get_by_id(grantee_id) is None:
            raise NotFoundError("User", grantee_id)
        grant = await self._store.grants.insert(Grant(resource_id=resource_id, user_id=grantee_id))
        return grant.id

    async def delete_grant(self, grant_id: IdLike) -> int:
        return await self._store.grants.delete(_coerce_id(GrantId, grant_id, "grant_id"))

    # Authorization queries

    async def query_resource_list(
        self, alias_filter: Optional[str], user_id: IdLike, resource_type: ResourceType
    ) -> List[Resource]:
        return await self.query_engine.query_resource_list(
            alias_filter, _coerce_id(UserId, user_id, "user_id"), resource_type
        )

    async def query_resource_paging(
        self,
        page: int,
        page_size: Optional[int],
        mode: ResourceQueryMode,
        user_id: IdLike,
        resource_type: ResourceType,
        alias_filter: Optional[str] = None,
    ) -> OffsetPaginationResponse[Resource]:
        if page_size is None:
            page_size = self.settings.default_page_size
        return await self.query_engine.query_resource_paging(
            page, page_size, mode, _coerce_id(UserId, user_id, "user_id"), resource_type, alias_filter
        )

    async def query_authorized_resource_list(self, user_id: IdLike) -> List[Resource]:
        user_id = _coerce_id(UserId, user_id, "user_id")
        return await self.query_engine.query_authorized_resource_list(user_id)

    async def query_resource_except_user_id(self, user_id: IdLike) -> List[Resource]:
        user_id = _coerce_id(UserId, user_id, "user_id")
        return await self.query_engine.query_resource_except_user_id(user_id)

    async def list_authorized_resource(
        self, user_id: IdLike, candidate_aliases: Iterable[str]
    ) -> List[Resource]:
        user_id = _coerce_id(UserId, user_id, "user_id")
        return await self.query_engine.list_authorized_resource(user_id, candidate_aliases)

    async def can_access(self, user_id: IdLike, resource_id: IdLike) -> bool:
        return await self.query_engine.can_access(
            _coerce_id(UserId, user_id, "user_id"),
            _coerce_id(ResourceId, resource_id, "resource_id"),
        )

    async def tenant_code_by_resource_name(self, alias: str, resource_type: ResourceType) -> str:
        return await self.tenant_codes.tenant_code_by_resource_name(alias, resource_type)

    def _normalize_changes(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise InvalidArgumentError(
                f"Cannot update resource field(s): {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )

        changes = dict(fields)
        if "alias" in changes:
            _require_alias(changes["alias"])
        if "resource_type" in changes:
            changes["resource_type"] = ResourceType.parse(changes["resource_type"])
        if "user_id" in changes:
            changes["user_id"] = _coerce_id(UserId, changes["user_id"], "user_id")
        if "size" in changes and (changes["size"] is None or changes["size"] < 0):
            raise InvalidArgumentError("Resource size must be >= 0", field="size")
        return changes


def _require_alias(alias: Optional[str]) -> None:
    if not alias or not alias.strip():
        raise InvalidArgumentError("Resource alias must not be empty", field="alias")


def _coerce_id(id_type, value: IdLike, field: str):
    """Wrap a raw key in ``id_type``, reporting bad keys as ``InvalidArgumentError``."""
    try:
        return id_type.of(value)
    except ValueError as e:
        raise InvalidArgumentError(str(e), field=field) from e


def _coerce_user_type(value: Union[int, UserType]) -> UserType:
    try:
        return UserType(value)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown user type: {value!r}", field="user_type") from e


def create_ownership_cache(settings: ResourceAclSettings) -> Optional[OwnershipCache]:
    """Build the ownership cache the settings ask for, if any."""
    if not settings.is_cache_enabled:
        return None
    if settings.redis_url:
        logger.info("Using Redis ownership cache")
        return RedisOwnershipCache.from_url(
            settings.redis_url,
            ttl=settings.ownership_cache_ttl,
            key_prefix=settings.cache_key_prefix,
        )
    logger.info("Using in-process ownership cache")
    return MemoryOwnershipCache(ttl=settings.ownership_cache_ttl)


def create_resource_access_service(
    store: EntityStore,
    settings: Optional[ResourceAclSettings] = None,
    ownership_cache: Optional[OwnershipCache] = None,
) -> ResourceAccessService:
    """Create a resource access service over ``store``."""
    settings = settings or get_settings()
    if ownership_cache is None:
        ownership_cache = create_ownership_cache(settings)
    return ResourceAccessService(store, settings=settings, ownership_cache=ownership_cache)
