"""Database connection management using asyncpg."""

import logging
from contextlib import asynccontextmanager
from importlib import resources as package_resources
from typing import Any, List, Optional

import asyncpg
from asyncpg import Pool, Record

from ..config.settings import ResourceAclSettings, get_settings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the asyncpg pool shared by the repositories."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        schema: Optional[str] = None,
        settings: Optional[ResourceAclSettings] = None,
        **pool_config,
    ):
        """Initialize DatabaseManager.

        Args:
            database_url: Database URL (defaults to settings.database_url)
            schema: Schema holding the tables (defaults to settings.db_schema)
            settings: Settings instance (defaults to get_settings())
            **pool_config: Additional pool configuration options
        """
        self.settings = settings or get_settings()
        self.pool: Optional[Pool] = None
        self.dsn = (database_url or self.settings.database_url).replace("+asyncpg", "")
        self.schema = schema or self.settings.db_schema

        self.pool_config = {
            "min_size": self.settings.db_pool_min_size,
            "max_size": self.settings.db_pool_max_size,
            "max_inactive_connection_lifetime": 300,
            "command_timeout": self.settings.db_command_timeout,
            **pool_config,
        }

    async def create_pool(self) -> Pool:
        """Create and return a connection pool."""
        if self.pool is None:
            logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
            self.pool = await asyncpg.create_pool(
                self.dsn,
                server_settings={"application_name": self.settings.app_name},
                **self.pool_config,
            )
            logger.info("Database pool created successfully")
        return self.pool

    async def close_pool(self) -> None:
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")

    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection from the pool."""
        if not self.pool:
            await self.create_pool()

        async with self.pool.acquire() as connection:
            yield connection

    @asynccontextmanager
    async def transaction(self, isolation: Optional[str] = None, readonly: bool = False):
        """Create a transaction context.

        ``isolation`` is passed through to asyncpg (``"read_committed"``,
        ``"repeatable_read"`` or ``"serializable"``).
        """
        async with self.acquire() as connection:
            async with connection.transaction(isolation=isolation, readonly=readonly):
                yield connection

    async def execute(self, query: str, *args, timeout: Optional[float] = None) -> str:
        """Execute a query without returning results."""
        async with self.acquire() as connection:
            return await connection.execute(query, *args, timeout=timeout)

    async def fetch(self, query: str, *args, timeout: Optional[float] = None) -> List[Record]:
        """Fetch multiple rows."""
        async with self.acquire() as connection:
            return await connection.fetch(query, *args, timeout=timeout)

    async def fetchrow(self, query: str, *args, timeout: Optional[float] = None) -> Optional[Record]:
        """Fetch a single row."""
        async with self.acquire() as connection:
            return await connection.fetchrow(query, *args, timeout=timeout)

    async def fetchval(self, query: str, *args, column: int = 0, timeout: Optional[float] = None) -> Any:
        """Fetch a single value."""
        async with self.acquire() as connection:
            return await connection.fetchval(query, *args, column=column, timeout=timeout)

    async def apply_schema(self) -> None:
        """Create the schema and tables if they do not exist."""
        ddl = (
            package_resources.files("neo_resources.database")
            .joinpath("schema.sql")
            .read_text(encoding="utf-8")
            .replace("{schema}", self.schema)
        )
        async with self.transaction() as connection:
            await connection.execute(ddl)
        logger.info(f"Applied neo-resources schema to '{self.schema}'")

    async def health_check(self) -> bool:
        """Check database health."""
        try:
            async with self.acquire() as connection:
                result = await connection.fetchval("SELECT 1")
                return result == 1
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error(f"Database health check failed: {e}")
            return False


def affected_rows(status: str) -> int:
    """Parse the row count from an asyncpg command status such as ``DELETE 1``."""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0
