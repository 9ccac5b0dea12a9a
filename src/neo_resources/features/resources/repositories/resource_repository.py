"""Resource repository backed by PostgreSQL through asyncpg."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ....core.value_objects import ResourceId, UserId
from ....database.connection import DatabaseManager, affected_rows
from ....database.error_handling import store_error_handler
from ..entities.resource import Resource, ResourceType
from ..entities.resource_filter import ResourceFilter
from .queries import (
    RESOURCE_COUNT,
    RESOURCE_DELETE,
    RESOURCE_FIND,
    RESOURCE_FIND_PAGE,
    RESOURCE_GET_BY_ID,
    RESOURCE_INSERT,
    RESOURCE_UPDATE,
)

logger = logging.getLogger(__name__)

# Entity attribute -> column
UPDATABLE_COLUMNS = {
    "alias": "alias",
    "resource_type": "type",
    "user_id": "user_id",
    "description": "description",
    "file_name": "file_name",
    "size": "size",
}


def build_resource_where(resource_filter: ResourceFilter) -> Tuple[str, List[Any]]:
    """Translate a filter into a WHERE clause and its positional parameters."""
    clauses: List[str] = []
    params: List[Any] = []

    def bind(value: Any) -> str:
        params.append(value)
        return f"${len(params)}"

    if resource_filter.resource_type is not None:
        clauses.append(f"type = {bind(int(resource_filter.resource_type))}")
    if resource_filter.alias_contains:
        # strpos keeps % and _ in user input literal
        clauses.append(f"strpos(alias, {bind(resource_filter.alias_contains)}) > 0")
    if resource_filter.aliases is not None:
        clauses.append(f"alias = ANY({bind(sorted(resource_filter.aliases))}::varchar[])")
    if resource_filter.excluded_owner_id is not None:
        clauses.append(f"user_id <> {bind(resource_filter.excluded_owner_id.value)}")
    if resource_filter.resource_ids is not None:
        ids = sorted(rid.value for rid in resource_filter.resource_ids)
        clauses.append(f"id = ANY({bind(ids)}::bigint[])")
    if resource_filter.owner_id is not None:
        owner = bind(resource_filter.owner_id.value)
        if resource_filter.or_resource_ids:
            ids = sorted(rid.value for rid in resource_filter.or_resource_ids)
            clauses.append(f"(user_id = {owner} OR id = ANY({bind(ids)}::bigint[]))")
        else:
            clauses.append(f"user_id = {owner}")

    return (" AND ".join(clauses) or "TRUE"), params


def map_row_to_resource(row: Mapping[str, Any]) -> Resource:
    """Map database row to Resource entity."""
    return Resource(
        id=ResourceId(row["id"]),
        alias=row["alias"],
        resource_type=ResourceType(row["type"]),
        user_id=UserId(row["user_id"]),
        description=row.get("description"),
        file_name=row.get("file_name"),
        size=row.get("size") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class ResourceDatabaseRepository:
    """Database repository for resource operations."""

    def __init__(self, database: DatabaseManager, schema: Optional[str] = None):
        """Initialize with a database manager.

        Args:
            database: Pool owner used for every statement
            schema: Schema name (defaults to the manager's schema)
        """
        if not database:
            raise ValueError("Database manager is required")
        self._db = database
        self._schema = schema or database.schema

    @store_error_handler("insert resource")
    async def insert(self, resource: Resource) -> Resource:
        query = RESOURCE_INSERT.format(schema=self._schema)
        new_id = await self._db.fetchval(
            query,
            resource.alias,
            int(resource.resource_type),
            resource.user_id.value,
            resource.description,
            resource.file_name,
            resource.size,
            resource.created_at,
            resource.updated_at,
        )
        resource.id = ResourceId(new_id)
        logger.info(f"Created resource {resource.id} '{resource.alias}' for user {resource.user_id}")
        return resource

    @store_error_handler("update resource")
    async def update(self, resource_id: ResourceId, changes: Dict[str, Any]) -> int:
        if not changes:
            return 0 if await self.get_by_id(resource_id) is None else 1

        assignments = []
        params: List[Any] = [resource_id.value]
        for attribute, value in changes.items():
            params.append(_to_column_value(value))
            assignments.append(f"{UPDATABLE_COLUMNS[attribute]} = ${len(params)}")

        query = RESOURCE_UPDATE.format(schema=self._schema, assignments=", ".join(assignments))
        status = await self._db.execute(query, *params)
        count = affected_rows(status)
        logger.info(f"Updated resource {resource_id} ({', '.join(changes)}): {count} row(s)")
        return count

    @store_error_handler("delete resource")
    async def delete(self, resource_id: ResourceId) -> int:
        status = await self._db.execute(RESOURCE_DELETE.format(schema=self._schema), resource_id.value)
        count = affected_rows(status)
        logger.info(f"Deleted resource {resource_id}: {count} row(s)")
        return count

    @store_error_handler("get resource")
    async def get_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        row = await self._db.fetchrow(RESOURCE_GET_BY_ID.format(schema=self._schema), resource_id.value)
        return map_row_to_resource(row) if row else None

    @store_error_handler("find resources")
    async def find(self, resource_filter: ResourceFilter) -> List[Resource]:
        where, params = build_resource_where(resource_filter)
        query = RESOURCE_FIND.format(schema=self._schema, where=where)
        rows = await self._db.fetch(query, *params)
        logger.debug(f"Resource scan matched {len(rows)} row(s): {resource_filter}")
        return [map_row_to_resource(row) for row in rows]

    @store_error_handler("page resources")
    async def find_page(
        self, resource_filter: ResourceFilter, limit: int, offset: int
    ) -> Tuple[List[Resource], int]:
        where, params = build_resource_where(resource_filter)
        page_query = RESOURCE_FIND_PAGE.format(
            schema=self._schema,
            where=where,
            limit=len(params) + 1,
            offset=len(params) + 2,
        )
        count_query = RESOURCE_COUNT.format(schema=self._schema, where=where)

        # One snapshot for both statements so the total matches the page
        async with self._db.transaction(isolation="repeatable_read", readonly=True) as conn:
            rows = await conn.fetch(page_query, *params, limit, offset)
            total = await conn.fetchval(count_query, *params)

        return [map_row_to_resource(row) for row in rows], int(total or 0)


def _to_column_value(value: Any) -> Any:
    if isinstance(value, ResourceType):
        return int(value)
    if isinstance(value, UserId):
        return value.value
    return value
