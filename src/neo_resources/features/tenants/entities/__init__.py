"""Tenant entities and contracts."""

from .protocols import TenantRepository
from .tenant import Tenant

__all__ = [
    "Tenant",
    "TenantRepository",
]
