"""In-process entity store.

Implements the four repository protocols over plain dictionaries with the
same semantics as the PostgreSQL repositories: store-assigned ascending ids,
creation-ordered scans, no cascading deletes. Every operation completes
without awaiting, so each call is atomic with respect to the event loop.
Entities are copied on the way in and out; callers never hold live rows.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, List, Optional, Set, Tuple

from ..core.exceptions import ConflictError
from ..core.value_objects import GrantId, ResourceId, TenantId, UserId
from ..features.grants.entities.grant import Grant
from ..features.resources.entities.resource import Resource
from ..features.resources.entities.resource_filter import ResourceFilter
from ..features.tenants.entities.tenant import Tenant
from ..features.users.entities.user import User

logger = logging.getLogger(__name__)


class _Tables:
    """Shared row storage so grants can be joined with resources."""

    def __init__(self):
        self.resources: Dict[ResourceId, Resource] = {}
        self.grants: Dict[GrantId, Grant] = {}
        self.users: Dict[UserId, User] = {}
        self.tenants: Dict[TenantId, Tenant] = {}
        self.sequences = {name: count(1) for name in ("resources", "grants", "users", "tenants")}

    def next_id(self, table: str) -> int:
        return next(self.sequences[table])


class MemoryResourceRepository:
    def __init__(self, tables: _Tables):
        self._tables = tables

    async def insert(self, resource: Resource) -> Resource:
        resource.id = ResourceId(self._tables.next_id("resources"))
        self._tables.resources[resource.id] = replace(resource)
        return resource

    async def update(self, resource_id: ResourceId, changes: Dict[str, Any]) -> int:
        row = self._tables.resources.get(resource_id)
        if row is None:
            return 0
        for attribute, value in changes.items():
            setattr(row, attribute, value)
        row.updated_at = datetime.now(timezone.utc)
        return 1

    async def delete(self, resource_id: ResourceId) -> int:
        return 1 if self._tables.resources.pop(resource_id, None) is not None else 0

    async def get_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        row = self._tables.resources.get(resource_id)
        return replace(row) if row is not None else None

    async def find(self, resource_filter: ResourceFilter) -> List[Resource]:
        return self._scan(resource_filter)

    async def find_page(
        self, resource_filter: ResourceFilter, limit: int, offset: int
    ) -> Tuple[List[Resource], int]:
        matches = self._scan(resource_filter)
        return matches[offset:offset + limit], len(matches)

    def _scan(self, resource_filter: ResourceFilter) -> List[Resource]:
        rows = sorted(self._tables.resources.values(), key=lambda r: r.id)
        return [replace(r) for r in rows if resource_filter.matches(r)]


class MemoryGrantRepository:
    def __init__(self, tables: _Tables):
        self._tables = tables

    async def insert(self, grant: Grant) -> Grant:
        grant.id = GrantId(self._tables.next_id("grants"))
        self._tables.grants[grant.id] = replace(grant)
        return grant

    async def delete(self, grant_id: GrantId) -> int:
        return 1 if self._tables.grants.pop(grant_id, None) is not None else 0

    async def get_by_id(self, grant_id: GrantId) -> Optional[Grant]:
        row = self._tables.grants.get(grant_id)
        return replace(row) if row is not None else None

    async def exists(self, resource_id: ResourceId, user_id: UserId) -> bool:
        return any(
            g.resource_id == resource_id and g.user_id == user_id
            for g in self._tables.grants.values()
        )

    async def find_resource_ids_by_user(self, user_id: UserId) -> Set[ResourceId]:
        return {g.resource_id for g in self._tables.grants.values() if g.user_id == user_id}

    async def find_granted_aliases(self, user_id: UserId, aliases: Set[str]) -> Set[str]:
        granted = await self.find_resource_ids_by_user(user_id)
        return {
            resource.alias
            for resource_id, resource in self._tables.resources.items()
            if resource_id in granted and resource.alias in aliases
        }


class MemoryUserRepository:
    def __init__(self, tables: _Tables):
        self._tables = tables

    async def insert(self, user: User) -> User:
        if any(u.user_name == user.user_name for u in self._tables.users.values()):
            raise ConflictError("User", user.user_name)
        user.id = UserId(self._tables.next_id("users"))
        self._tables.users[user.id] = replace(user)
        return user

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        row = self._tables.users.get(user_id)
        return replace(row) if row is not None else None

    async def delete(self, user_id: UserId) -> int:
        return 1 if self._tables.users.pop(user_id, None) is not None else 0


class MemoryTenantRepository:
    def __init__(self, tables: _Tables):
        self._tables = tables

    async def insert(self, tenant: Tenant) -> Tenant:
        if any(t.tenant_code == tenant.tenant_code for t in self._tables.tenants.values()):
            raise ConflictError("Tenant", tenant.tenant_code)
        tenant.id = TenantId(self._tables.next_id("tenants"))
        self._tables.tenants[tenant.id] = replace(tenant)
        return tenant

    async def get_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        row = self._tables.tenants.get(tenant_id)
        return replace(row) if row is not None else None

    async def delete(self, tenant_id: TenantId) -> int:
        return 1 if self._tables.tenants.pop(tenant_id, None) is not None else 0


class MemoryEntityStore:
    """All four repositories over one set of in-process tables."""

    def __init__(self):
        self._tables = _Tables()
        self.resources = MemoryResourceRepository(self._tables)
        self.grants = MemoryGrantRepository(self._tables)
        self.users = MemoryUserRepository(self._tables)
        self.tenants = MemoryTenantRepository(self._tables)
        logger.debug("Created in-memory entity store")
