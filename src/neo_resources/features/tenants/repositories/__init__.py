"""Tenant persistence."""

from .tenant_repository import TenantDatabaseRepository

__all__ = ["TenantDatabaseRepository"]
