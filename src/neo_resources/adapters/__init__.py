"""Entity store adapters."""

from .memory_store import MemoryEntityStore
from .postgres_store import PostgresEntityStore
from .protocols import EntityStore

__all__ = [
    "EntityStore",
    "MemoryEntityStore",
    "PostgresEntityStore",
]
