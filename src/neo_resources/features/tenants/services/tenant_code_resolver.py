"""Resolve the tenant code that scopes a named resource.

Walks resource -> owning user -> tenant -> code so callers can build
tenant-scoped storage paths without knowing who owns the resource.
"""

import logging
from typing import Dict, Optional

from ....core.exceptions import InvalidArgumentError, NotFoundError
from ...ownership.services.ownership_resolver import OwnershipResolver
from ...resources.entities.protocols import ResourceRepository
from ...resources.entities.resource import ResourceType
from ...resources.entities.resource_filter import ResourceFilter
from ..entities.protocols import TenantRepository

logger = logging.getLogger(__name__)


class TenantCodeResolver:
    """Tenant code lookup by resource alias and type."""

    def __init__(
        self,
        resource_repository: ResourceRepository,
        tenant_repository: TenantRepository,
        ownership_resolver: OwnershipResolver,
    ):
        self._resources = resource_repository
        self._tenants = tenant_repository
        self._ownership = ownership_resolver

    async def tenant_code_by_resource_name(self, alias: str, resource_type: ResourceType) -> str:
        """Return the tenant code of the owner of the resource named ``alias``.

        Raises:
            InvalidArgumentError: empty alias, or same-named resources that
                belong to different tenants
            NotFoundError: no such resource, or none of the same-named
                resources still has an owner and tenant; the first broken
                link is reported
        """
        if not alias or not alias.strip():
            raise InvalidArgumentError("Resource alias must not be empty", field="alias")

        resource_type = ResourceType.parse(resource_type)
        resources = await self._resources.find(
            ResourceFilter(resource_type=resource_type, aliases=frozenset({alias}))
        )
        if not resources:
            raise NotFoundError("Resource", f"{alias} ({resource_type.name})")

        # code -> first resource id that resolved to it
        codes: Dict[str, str] = {}
        first_broken: Optional[NotFoundError] = None
        for resource in resources:
            try:
                tenant_id = await self._ownership.tenant_of(resource.user_id)
                tenant = await self._tenants.get_by_id(tenant_id)
                if tenant is None:
                    raise NotFoundError("Tenant", tenant_id)
            except NotFoundError as e:
                # Broken chains are skipped; they only matter if nothing resolves
                logger.debug(f"Skipping resource {resource.id} for tenant lookup: {e}")
                first_broken = first_broken or e
                continue
            codes.setdefault(tenant.tenant_code, str(resource.id))

        if not codes:
            raise first_broken

        if len(codes) > 1:
            raise InvalidArgumentError(
                f"Resource alias '{alias}' is ambiguous across tenants {sorted(codes)}",
                field="alias",
            )

        tenant_code = next(iter(codes))
        logger.debug(f"Resource '{alias}' resolves to tenant code '{tenant_code}'")
        return tenant_code
