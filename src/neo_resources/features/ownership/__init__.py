"""Ownership of resources and tenancy of users."""

from .services import MemoryOwnershipCache, OwnershipCache, OwnershipResolver, RedisOwnershipCache

__all__ = [
    "OwnershipCache",
    "MemoryOwnershipCache",
    "RedisOwnershipCache",
    "OwnershipResolver",
]
