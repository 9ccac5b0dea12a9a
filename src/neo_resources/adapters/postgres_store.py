"""PostgreSQL entity store: the asyncpg repositories sharing one pool."""

from typing import Optional

from ..database.connection import DatabaseManager
from ..features.grants.repositories.grant_repository import GrantDatabaseRepository
from ..features.resources.repositories.resource_repository import ResourceDatabaseRepository
from ..features.tenants.repositories.tenant_repository import TenantDatabaseRepository
from ..features.users.repositories.user_repository import UserDatabaseRepository


class PostgresEntityStore:
    """Bundle of database repositories over one ``DatabaseManager``."""

    def __init__(self, database: DatabaseManager, schema: Optional[str] = None):
        self.database = database
        self.resources = ResourceDatabaseRepository(database, schema)
        self.grants = GrantDatabaseRepository(database, schema)
        self.users = UserDatabaseRepository(database, schema)
        self.tenants = TenantDatabaseRepository(database, schema)
