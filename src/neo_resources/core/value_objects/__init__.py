"""Value objects for neo-resources."""

from .identifiers import GrantId, ResourceId, TenantId, UserId

__all__ = [
    "ResourceId",
    "UserId",
    "TenantId",
    "GrantId",
]
