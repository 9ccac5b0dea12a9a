"""Tenants and tenant-code resolution."""

from .entities import Tenant, TenantRepository
from .repositories import TenantDatabaseRepository

__all__ = [
    "Tenant",
    "TenantRepository",
    "TenantDatabaseRepository",
]
