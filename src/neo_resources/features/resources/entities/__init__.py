"""Resource entities and contracts."""

from .protocols import ResourceRepository
from .resource import UPDATABLE_FIELDS, Resource, ResourceType
from .resource_filter import ResourceFilter

__all__ = [
    "UPDATABLE_FIELDS",
    "Resource",
    "ResourceType",
    "ResourceFilter",
    "ResourceRepository",
]
