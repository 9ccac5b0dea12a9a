"""Entity store contract: one object exposing the four repositories."""

from typing import Protocol, runtime_checkable

from ..features.grants.entities.protocols import GrantRepository
from ..features.resources.entities.protocols import ResourceRepository
from ..features.tenants.entities.protocols import TenantRepository
from ..features.users.entities.protocols import UserRepository


@runtime_checkable
class EntityStore(Protocol):
    """Durable storage for resources, grants, users and tenants."""

    resources: ResourceRepository
    grants: GrantRepository
    users: UserRepository
    tenants: TenantRepository
