"""neo-resources: ownership, sharing and authorization queries for
multi-tenant resources.

Logging is not configured on import; call ``setup_logging()`` at startup.
"""

from .__version__ import __version__
from .adapters import EntityStore, MemoryEntityStore, PostgresEntityStore
from .config import ResourceAclSettings, get_settings, setup_logging
from .core.exceptions import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ResourceAclError,
    StoreUnavailableError,
    create_error_response,
)
from .core.value_objects import GrantId, ResourceId, TenantId, UserId
from .database import DatabaseManager
from .features.authorization import AuthorizationQueryEngine, ResourceQueryMode
from .features.grants import Grant, GrantIndex
from .features.ownership import MemoryOwnershipCache, OwnershipResolver, RedisOwnershipCache
from .features.pagination import OffsetPaginationResponse
from .features.resources import Resource, ResourceType
from .features.tenants import Tenant
from .features.tenants.services import TenantCodeResolver
from .features.users import User, UserType
from .services import ResourceAccessService, create_resource_access_service

__all__ = [
    "__version__",
    # Stores
    "EntityStore",
    "MemoryEntityStore",
    "PostgresEntityStore",
    "DatabaseManager",
    # Configuration
    "ResourceAclSettings",
    "get_settings",
    "setup_logging",
    # Exceptions
    "ResourceAclError",
    "NotFoundError",
    "InvalidArgumentError",
    "ConflictError",
    "StoreUnavailableError",
    "create_error_response",
    # Identifiers
    "ResourceId",
    "UserId",
    "TenantId",
    "GrantId",
    # Entities
    "Resource",
    "ResourceType",
    "Grant",
    "User",
    "UserType",
    "Tenant",
    "OffsetPaginationResponse",
    # Services
    "AuthorizationQueryEngine",
    "ResourceQueryMode",
    "GrantIndex",
    "OwnershipResolver",
    "MemoryOwnershipCache",
    "RedisOwnershipCache",
    "TenantCodeResolver",
    "ResourceAccessService",
    "create_resource_access_service",
]
