"""Core exceptions and value objects shared by every feature."""

from .exceptions import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ResourceAclError,
    StoreUnavailableError,
    create_error_response,
)
from .value_objects import GrantId, ResourceId, TenantId, UserId

__all__ = [
    "ResourceAclError",
    "NotFoundError",
    "InvalidArgumentError",
    "ConflictError",
    "StoreUnavailableError",
    "create_error_response",
    "ResourceId",
    "UserId",
    "TenantId",
    "GrantId",
]
