"""Tenant domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ....core.value_objects import TenantId


@dataclass
class Tenant:
    """Organizational grouping of users.

    ``tenant_code`` is the external-facing identifier, unique across tenants,
    and is what storage paths are scoped by.
    """

    tenant_name: str
    tenant_code: str
    id: Optional[TenantId] = None
    description: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
