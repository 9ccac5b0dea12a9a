"""Resources: entities, filters and persistence."""

from .entities import Resource, ResourceFilter, ResourceRepository, ResourceType
from .repositories import ResourceDatabaseRepository

__all__ = [
    "Resource",
    "ResourceType",
    "ResourceFilter",
    "ResourceRepository",
    "ResourceDatabaseRepository",
]
