"""Tenant services."""

from .tenant_code_resolver import TenantCodeResolver

__all__ = ["TenantCodeResolver"]
