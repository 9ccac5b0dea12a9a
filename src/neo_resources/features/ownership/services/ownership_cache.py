"""Ownership caches keyed by resource id.

A cache only ever answers "who owned this resource when it was cached". Any
write that changes or removes the owner must call ``invalidate``.
"""

import logging
import time
from typing import Dict, Optional, Protocol, Tuple, runtime_checkable

from redis.asyncio import Redis
from redis.exceptions import RedisError

from ....core.value_objects import ResourceId, UserId

logger = logging.getLogger(__name__)


@runtime_checkable
class OwnershipCache(Protocol):
    """Cache contract used by the ownership resolver."""

    async def get_owner(self, resource_id: ResourceId) -> Optional[UserId]:
        ...

    async def set_owner(self, resource_id: ResourceId, owner_id: UserId) -> None:
        ...

    async def invalidate(self, resource_id: ResourceId) -> None:
        ...


class MemoryOwnershipCache:
    """Process-local cache with per-entry TTL."""

    def __init__(self, ttl: int = 300):
        self._ttl = ttl
        self._entries: Dict[ResourceId, Tuple[UserId, float]] = {}

    async def get_owner(self, resource_id: ResourceId) -> Optional[UserId]:
        entry = self._entries.get(resource_id)
        if entry is None:
            return None
        owner_id, expires_at = entry
        if time.monotonic() >= expires_at:
            self._entries.pop(resource_id, None)
            return None
        return owner_id

    async def set_owner(self, resource_id: ResourceId, owner_id: UserId) -> None:
        self._entries[resource_id] = (owner_id, time.monotonic() + self._ttl)

    async def invalidate(self, resource_id: ResourceId) -> None:
        self._entries.pop(resource_id, None)

    def __len__(self) -> int:
        return len(self._entries)


class RedisOwnershipCache:
    """Redis-backed cache shared between processes.

    Redis failures degrade to cache misses. A failed invalidation is logged
    at error level since the entry may then outlive the ownership change
    until its TTL expires.
    """

    def __init__(self, redis_client: Redis, ttl: int = 300, key_prefix: str = "neo:resources:"):
        self._redis = redis_client
        self._ttl = ttl
        self._key_prefix = key_prefix

    @classmethod
    def from_url(cls, redis_url: str, ttl: int = 300, key_prefix: str = "neo:resources:") -> "RedisOwnershipCache":
        """Create a cache with its own connection pool."""
        client = Redis.from_url(redis_url, decode_responses=True, health_check_interval=30)
        return cls(client, ttl=ttl, key_prefix=key_prefix)

    def _make_key(self, resource_id: ResourceId) -> str:
        return f"{self._key_prefix}owner:{resource_id.value}"

    async def get_owner(self, resource_id: ResourceId) -> Optional[UserId]:
        try:
            value = await self._redis.get(self._make_key(resource_id))
        except (RedisError, OSError) as e:
            logger.warning(f"Ownership cache read failed for resource {resource_id}: {e}")
            return None
        return UserId(int(value)) if value is not None else None

    async def set_owner(self, resource_id: ResourceId, owner_id: UserId) -> None:
        try:
            await self._redis.set(self._make_key(resource_id), str(owner_id.value), ex=self._ttl)
        except (RedisError, OSError) as e:
            logger.warning(f"Ownership cache write failed for resource {resource_id}: {e}")

    async def invalidate(self, resource_id: ResourceId) -> None:
        try:
            await self._redis.delete(self._make_key(resource_id))
        except (RedisError, OSError) as e:
            logger.error(f"Ownership cache invalidation failed for resource {resource_id}: {e}")

    async def close(self) -> None:
        await self._redis.aclose()
