"""Resource persistence."""

from .resource_repository import (
    UPDATABLE_COLUMNS,
    ResourceDatabaseRepository,
    build_resource_where,
    map_row_to_resource,
)

__all__ = [
    "UPDATABLE_COLUMNS",
    "ResourceDatabaseRepository",
    "build_resource_where",
    "map_row_to_resource",
]
