"""Tenant repository protocol."""

from typing import Optional, Protocol, runtime_checkable

from ....core.value_objects import TenantId
from .tenant import Tenant


@runtime_checkable
class TenantRepository(Protocol):
    """Storage contract for tenants."""

    async def insert(self, tenant: Tenant) -> Tenant:
        """Persist a tenant. Raises ConflictError on a duplicate tenant code."""
        ...

    async def get_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        ...

    async def delete(self, tenant_id: TenantId) -> int:
        ...
