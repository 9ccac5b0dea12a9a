"""Ownership services."""

from .ownership_cache import MemoryOwnershipCache, OwnershipCache, RedisOwnershipCache
from .ownership_resolver import OwnershipResolver

__all__ = [
    "OwnershipCache",
    "MemoryOwnershipCache",
    "RedisOwnershipCache",
    "OwnershipResolver",
]
