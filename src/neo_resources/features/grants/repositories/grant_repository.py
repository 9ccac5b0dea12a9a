"""Grant repository backed by PostgreSQL through asyncpg."""

import logging
from typing import Any, Mapping, Optional, Set

from ....core.value_objects import GrantId, ResourceId, UserId
from ....database.connection import DatabaseManager, affected_rows
from ....database.error_handling import store_error_handler
from ..entities.grant import Grant
from .queries import (
    GRANT_ALIASES_BY_USER,
    GRANT_DELETE,
    GRANT_EXISTS,
    GRANT_GET_BY_ID,
    GRANT_INSERT,
    GRANT_RESOURCE_IDS_BY_USER,
)

logger = logging.getLogger(__name__)


class GrantDatabaseRepository:
    """Database repository for grant operations."""

    def __init__(self, database: DatabaseManager, schema: Optional[str] = None):
        if not database:
            raise ValueError("Database manager is required")
        self._db = database
        self._schema = schema or database.schema

    @store_error_handler("insert grant")
    async def insert(self, grant: Grant) -> Grant:
        new_id = await self._db.fetchval(
            GRANT_INSERT.format(schema=self._schema),
            grant.resource_id.value,
            grant.user_id.value,
            grant.created_at,
            grant.updated_at,
        )
        grant.id = GrantId(new_id)
        logger.info(f"Granted resource {grant.resource_id} to user {grant.user_id} (grant {grant.id})")
        return grant

    @store_error_handler("delete grant")
    async def delete(self, grant_id: GrantId) -> int:
        status = await self._db.execute(GRANT_DELETE.format(schema=self._schema), grant_id.value)
        count = affected_rows(status)
        logger.info(f"Deleted grant {grant_id}: {count} row(s)")
        return count

    @store_error_handler("get grant")
    async def get_by_id(self, grant_id: GrantId) -> Optional[Grant]:
        row = await self._db.fetchrow(GRANT_GET_BY_ID.format(schema=self._schema), grant_id.value)
        return self._map_row_to_grant(row) if row else None

    @store_error_handler("check grant")
    async def exists(self, resource_id: ResourceId, user_id: UserId) -> bool:
        result = await self._db.fetchval(
            GRANT_EXISTS.format(schema=self._schema), resource_id.value, user_id.value
        )
        return bool(result)

    @store_error_handler("list granted resources")
    async def find_resource_ids_by_user(self, user_id: UserId) -> Set[ResourceId]:
        rows = await self._db.fetch(
            GRANT_RESOURCE_IDS_BY_USER.format(schema=self._schema), user_id.value
        )
        return {ResourceId(row["resources_id"]) for row in rows}

    @store_error_handler("list granted aliases")
    async def find_granted_aliases(self, user_id: UserId, aliases: Set[str]) -> Set[str]:
        if not aliases:
            return set()
        rows = await self._db.fetch(
            GRANT_ALIASES_BY_USER.format(schema=self._schema), user_id.value, sorted(aliases)
        )
        return {row["alias"] for row in rows}

    def _map_row_to_grant(self, row: Mapping[str, Any]) -> Grant:
        return Grant(
            id=GrantId(row["id"]),
            resource_id=ResourceId(row["resources_id"]),
            user_id=UserId(row["user_id"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
