"""Application services."""

from .resource_access_service import (
    ResourceAccessService,
    create_ownership_cache,
    create_resource_access_service,
)

__all__ = [
    "ResourceAccessService",
    "create_ownership_cache",
    "create_resource_access_service",
]
