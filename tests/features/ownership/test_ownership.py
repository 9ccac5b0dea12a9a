"""Tests for ownership resolution and the ownership caches."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from neo_resources.core.exceptions import NotFoundError
from neo_resources.core.value_objects import ResourceId, UserId
from neo_resources.features.ownership import (
    MemoryOwnershipCache,
    OwnershipCache,
    OwnershipResolver,
    RedisOwnershipCache,
)
from neo_resources.features.resources.entities import Resource, ResourceType
from neo_resources.services import ResourceAccessService


class TestOwnershipResolver:

    @pytest.fixture
    def resolver(self, store):
        return OwnershipResolver(store.resources, store.users)

    @pytest.mark.asyncio
    async def test_owner_of(self, resolver, store):
        resource = await store.resources.insert(
            Resource(alias="x", resource_type=ResourceType.FILE, user_id=UserId(5))
        )
        assert await resolver.owner_of(resource.id) == UserId(5)

    @pytest.mark.asyncio
    async def test_owner_of_missing_resource(self, resolver):
        with pytest.raises(NotFoundError) as exc_info:
            await resolver.owner_of(ResourceId(1))
        assert exc_info.value.entity_type == "Resource"

    @pytest.mark.asyncio
    async def test_tenant_of(self, service):
        tenant_id = await service.insert_tenant("Acme Corp", "ACME")
        user_id = await service.insert_user("alice", tenant_id)

        assert await service.ownership.tenant_of(user_id) == tenant_id
        with pytest.raises(NotFoundError):
            await service.ownership.tenant_of(UserId(99))

    def test_is_owner(self):
        resource = Resource(alias="x", resource_type=ResourceType.FILE, user_id=UserId(5))
        assert OwnershipResolver.is_owner(resource, UserId(5))
        assert not OwnershipResolver.is_owner(resource, UserId(6))


class TestOwnershipCacheInvalidation:

    @pytest.fixture
    def cache(self):
        return MemoryOwnershipCache(ttl=60)

    @pytest.fixture
    def cached_service(self, store, settings, cache):
        return ResourceAccessService(store, settings=settings, ownership_cache=cache)

    @pytest.mark.asyncio
    async def test_owner_change_invalidates(self, cached_service, cache):
        tenant_id = await cached_service.insert_tenant("Acme Corp", "ACME")
        alice = await cached_service.insert_user("alice", tenant_id)
        bob = await cached_service.insert_user("bob", tenant_id)
        x = await cached_service.insert_resource("x", ResourceType.FILE, alice)

        assert await cached_service.can_access(alice, x)
        assert len(cache) == 1

        assert await cached_service.update_resource(x, user_id=bob) == 1

        assert len(cache) == 0
        assert not await cached_service.can_access(alice, x)
        assert await cached_service.can_access(bob, x)

    @pytest.mark.asyncio
    async def test_delete_invalidates(self, cached_service, cache):
        tenant_id = await cached_service.insert_tenant("Acme Corp", "ACME")
        alice = await cached_service.insert_user("alice", tenant_id)
        x = await cached_service.insert_resource("x", ResourceType.FILE, alice)
        await cached_service.can_access(alice, x)

        await cached_service.delete_resource(x)

        assert not await cached_service.can_access(alice, x)

    @pytest.mark.asyncio
    async def test_other_updates_keep_entry(self, cached_service, cache):
        tenant_id = await cached_service.insert_tenant("Acme Corp", "ACME")
        alice = await cached_service.insert_user("alice", tenant_id)
        x = await cached_service.insert_resource("x", ResourceType.FILE, alice)
        await cached_service.can_access(alice, x)

        await cached_service.update_resource(x, description="renamed")

        assert len(cache) == 1


class TestOwnershipCacheRace:

    @pytest.mark.asyncio
    async def test_read_straddling_invalidation_is_not_cached(self, store):
        cache = MemoryOwnershipCache(ttl=60)
        resolver = OwnershipResolver(store.resources, store.users, cache=cache)
        resource = await store.resources.insert(
            Resource(alias="x", resource_type=ResourceType.FILE, user_id=UserId(5))
        )
        load = store.resources.get_by_id

        async def load_then_transfer(resource_id):
            # the row is read, then the owner changes before the read returns
            row = await load(resource_id)
            await store.resources.update(resource_id, {"user_id": UserId(9)})
            await resolver.invalidate(resource_id)
            return row

        store.resources.get_by_id = load_then_transfer
        assert await resolver.owner_of(resource.id) == UserId(5)
        assert len(cache) == 0

        store.resources.get_by_id = load
        assert await resolver.owner_of(resource.id) == UserId(9)
        assert len(cache) == 1


class TestMemoryOwnershipCache:

    def test_satisfies_protocol(self):
        assert isinstance(MemoryOwnershipCache(), OwnershipCache)

    @pytest.mark.asyncio
    async def test_entries_expire(self):
        cache = MemoryOwnershipCache(ttl=0)
        await cache.set_owner(ResourceId(1), UserId(2))

        assert await cache.get_owner(ResourceId(1)) is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_live_entries_are_returned(self):
        cache = MemoryOwnershipCache(ttl=60)
        await cache.set_owner(ResourceId(1), UserId(2))

        assert await cache.get_owner(ResourceId(1)) == UserId(2)
        await cache.invalidate(ResourceId(1))
        assert await cache.get_owner(ResourceId(1)) is None


class TestRedisOwnershipCache:

    @pytest.fixture
    def redis_client(self):
        client = AsyncMock()
        client.get = AsyncMock(return_value=None)
        return client

    @pytest.fixture
    def cache(self, redis_client):
        return RedisOwnershipCache(redis_client, ttl=120, key_prefix="test:")

    def test_satisfies_protocol(self, cache):
        assert isinstance(cache, OwnershipCache)

    @pytest.mark.asyncio
    async def test_set_and_get(self, cache, redis_client):
        await cache.set_owner(ResourceId(7), UserId(3))
        redis_client.set.assert_called_once_with("test:owner:7", "3", ex=120)

        redis_client.get.return_value = "3"
        assert await cache.get_owner(ResourceId(7)) == UserId(3)
        redis_client.get.assert_called_with("test:owner:7")

    @pytest.mark.asyncio
    async def test_miss(self, cache):
        assert await cache.get_owner(ResourceId(7)) is None

    @pytest.mark.asyncio
    async def test_invalidate(self, cache, redis_client):
        await cache.invalidate(ResourceId(7))
        redis_client.delete.assert_called_once_with("test:owner:7")

    @pytest.mark.asyncio
    async def test_redis_failures_degrade_to_miss(self, cache, redis_client):
        redis_client.get.side_effect = RedisConnectionError("down")
        redis_client.set.side_effect = RedisConnectionError("down")
        redis_client.delete.side_effect = RedisConnectionError("down")

        assert await cache.get_owner(ResourceId(7)) is None
        await cache.set_owner(ResourceId(7), UserId(3))
        await cache.invalidate(ResourceId(7))

    @pytest.mark.asyncio
    async def test_resolver_reads_through(self, store, redis_client):
        resource = await store.resources.insert(
            Resource(alias="x", resource_type=ResourceType.FILE, user_id=UserId(5))
        )
        resolver = OwnershipResolver(
            store.resources, store.users, cache=RedisOwnershipCache(redis_client, key_prefix="t:")
        )

        assert await resolver.owner_of(resource.id) == UserId(5)
        redis_client.set.assert_called_once_with(f"t:owner:{resource.id.value}", "5", ex=300)

    @pytest.mark.asyncio
    async def test_close(self, cache, redis_client):
        await cache.close()
        redis_client.aclose.assert_awaited_once()
