"""User repository backed by PostgreSQL through asyncpg."""

import logging
from typing import Any, Mapping, Optional

import asyncpg

from ....core.exceptions import ConflictError
from ....core.value_objects import TenantId, UserId
from ....database.connection import DatabaseManager, affected_rows
from ....database.error_handling import store_error_handler
from ..entities.user import User, UserType
from .queries import USER_DELETE, USER_GET_BY_ID, USER_INSERT

logger = logging.getLogger(__name__)


class UserDatabaseRepository:
    """Database repository for the user fields the core needs."""

    def __init__(self, database: DatabaseManager, schema: Optional[str] = None):
        if not database:
            raise ValueError("Database manager is required")
        self._db = database
        self._schema = schema or database.schema

    @store_error_handler("insert user")
    async def insert(self, user: User) -> User:
        try:
            new_id = await self._db.fetchval(
                USER_INSERT.format(schema=self._schema),
                user.user_name,
                user.tenant_id.value,
                int(user.user_type),
                user.email,
                user.created_at,
                user.updated_at,
            )
        except asyncpg.UniqueViolationError as e:
            raise ConflictError("User", user.user_name) from e
        user.id = UserId(new_id)
        logger.info(f"Created user {user.id} '{user.user_name}' in tenant {user.tenant_id}")
        return user

    @store_error_handler("get user")
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        row = await self._db.fetchrow(USER_GET_BY_ID.format(schema=self._schema), user_id.value)
        return self._map_row_to_user(row) if row else None

    @store_error_handler("delete user")
    async def delete(self, user_id: UserId) -> int:
        status = await self._db.execute(USER_DELETE.format(schema=self._schema), user_id.value)
        return affected_rows(status)

    def _map_row_to_user(self, row: Mapping[str, Any]) -> User:
        return User(
            id=UserId(row["id"]),
            user_name=row["user_name"],
            tenant_id=TenantId(row["tenant_id"]),
            user_type=UserType(row["user_type"]),
            email=row.get("email"),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
