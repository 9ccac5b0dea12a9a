"""Tenant repository backed by PostgreSQL through asyncpg."""

import logging
from typing import Any, Mapping, Optional

import asyncpg

from ....core.exceptions import ConflictError
from ....core.value_objects import TenantId
from ....database.connection import DatabaseManager, affected_rows
from ....database.error_handling import store_error_handler
from ..entities.tenant import Tenant
from .queries import TENANT_DELETE, TENANT_GET_BY_ID, TENANT_INSERT

logger = logging.getLogger(__name__)


class TenantDatabaseRepository:
    """Database repository for tenant operations."""

    def __init__(self, database: DatabaseManager, schema: Optional[str] = None):
        if not database:
            raise ValueError("Database manager is required")
        self._db = database
        self._schema = schema or database.schema

    @store_error_handler("insert tenant")
    async def insert(self, tenant: Tenant) -> Tenant:
        try:
            new_id = await self._db.fetchval(
                TENANT_INSERT.format(schema=self._schema),
                tenant.tenant_name,
                tenant.tenant_code,
                tenant.description,
                tenant.created_at,
                tenant.updated_at,
            )
        except asyncpg.UniqueViolationError as e:
            raise ConflictError("Tenant", tenant.tenant_code) from e
        tenant.id = TenantId(new_id)
        logger.info(f"Created tenant {tenant.id} with code '{tenant.tenant_code}'")
        return tenant

    @store_error_handler("get tenant")
    async def get_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        row = await self._db.fetchrow(TENANT_GET_BY_ID.format(schema=self._schema), tenant_id.value)
        return self._map_row_to_tenant(row) if row else None

    @store_error_handler("delete tenant")
    async def delete(self, tenant_id: TenantId) -> int:
        status = await self._db.execute(TENANT_DELETE.format(schema=self._schema), tenant_id.value)
        return affected_rows(status)

    def _map_row_to_tenant(self, row: Mapping[str, Any]) -> Tenant:
        return Tenant(
            id=TenantId(row["id"]),
            tenant_name=row["tenant_name"],
            tenant_code=row["tenant_code"],
            description=row.get("description"),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
