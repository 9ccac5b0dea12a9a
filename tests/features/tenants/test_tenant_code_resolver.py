"""Tests for tenant code resolution by resource name."""

import pytest

from neo_resources.core.exceptions import InvalidArgumentError, NotFoundError
from neo_resources.features.resources.entities import ResourceType


class TestTenantCodeByResourceName:

    @pytest.mark.asyncio
    async def test_resolves_owner_tenant_code(self, service):
        acme = await service.insert_tenant("Acme Corp", "ACME")
        alice = await service.insert_user("alice", acme)
        await service.insert_resource("report.csv", ResourceType.FILE, alice)

        assert await service.tenant_code_by_resource_name("report.csv", ResourceType.FILE) == "ACME"

    @pytest.mark.asyncio
    async def test_type_is_part_of_the_lookup(self, service):
        acme = await service.insert_tenant("Acme Corp", "ACME")
        alice = await service.insert_user("alice", acme)
        await service.insert_resource("lib.jar", ResourceType.UDF, alice)

        with pytest.raises(NotFoundError) as exc_info:
            await service.tenant_code_by_resource_name("lib.jar", ResourceType.FILE)
        assert exc_info.value.entity_type == "Resource"

    @pytest.mark.asyncio
    async def test_missing_resource(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            await service.tenant_code_by_resource_name("nope", ResourceType.FILE)
        assert exc_info.value.entity_type == "Resource"

    @pytest.mark.asyncio
    async def test_missing_owner(self, service):
        acme = await service.insert_tenant("Acme Corp", "ACME")
        alice = await service.insert_user("alice", acme)
        await service.insert_resource("orphan.csv", ResourceType.FILE, alice)
        await service.delete_user(alice)

        with pytest.raises(NotFoundError) as exc_info:
            await service.tenant_code_by_resource_name("orphan.csv", ResourceType.FILE)
        assert exc_info.value.entity_type == "User"

    @pytest.mark.asyncio
    async def test_dangling_same_named_resource_is_skipped(self, service):
        acme = await service.insert_tenant("Acme Corp", "ACME")
        ghost = await service.insert_user("ghost", acme)
        alice = await service.insert_user("alice", acme)
        await service.insert_resource("report.csv", ResourceType.FILE, ghost)
        await service.insert_resource("report.csv", ResourceType.FILE, alice)
        await service.delete_user(ghost)

        assert await service.tenant_code_by_resource_name("report.csv", ResourceType.FILE) == "ACME"

    @pytest.mark.asyncio
    async def test_first_broken_link_reported_when_nothing_resolves(self, service):
        acme = await service.insert_tenant("Acme Corp", "ACME")
        ghost = await service.insert_user("ghost", acme)
        globex = await service.insert_tenant("Globex", "GLOBEX")
        orphan = await service.insert_user("orphan", globex)
        await service.insert_resource("report.csv", ResourceType.FILE, ghost)
        await service.insert_resource("report.csv", ResourceType.FILE, orphan)
        await service.delete_user(ghost)
        await service.delete_tenant(globex)

        with pytest.raises(NotFoundError) as exc_info:
            await service.tenant_code_by_resource_name("report.csv", ResourceType.FILE)
        assert exc_info.value.entity_type == "User"
        assert exc_info.value.identifier == ghost

    @pytest.mark.asyncio
    async def test_dangling_chain_does_not_count_towards_ambiguity(self, service):
        alice = await service.insert_user("alice", await service.insert_tenant("Acme Corp", "ACME"))
        globex = await service.insert_tenant("Globex", "GLOBEX")
        carol = await service.insert_user("carol", globex)
        await service.insert_resource("dup.csv", ResourceType.FILE, alice)
        await service.insert_resource("dup.csv", ResourceType.FILE, carol)
        await service.delete_tenant(globex)

        assert await service.tenant_code_by_resource_name("dup.csv", ResourceType.FILE) == "ACME"

    @pytest.mark.asyncio
    async def test_missing_tenant(self, service):
        acme = await service.insert_tenant("Acme Corp", "ACME")
        alice = await service.insert_user("alice", acme)
        await service.insert_resource("report.csv", ResourceType.FILE, alice)
        await service.delete_tenant(acme)

        with pytest.raises(NotFoundError) as exc_info:
            await service.tenant_code_by_resource_name("report.csv", ResourceType.FILE)
        assert exc_info.value.entity_type == "Tenant"

    @pytest.mark.asyncio
    async def test_same_alias_in_one_tenant_resolves(self, service):
        acme = await service.insert_tenant("Acme Corp", "ACME")
        alice = await service.insert_user("alice", acme)
        bob = await service.insert_user("bob", acme)
        await service.insert_resource("shared.csv", ResourceType.FILE, alice)
        await service.insert_resource("shared.csv", ResourceType.FILE, bob)

        assert await service.tenant_code_by_resource_name("shared.csv", ResourceType.FILE) == "ACME"

    @pytest.mark.asyncio
    async def test_same_alias_across_tenants_is_ambiguous(self, service):
        alice = await service.insert_user("alice", await service.insert_tenant("Acme Corp", "ACME"))
        carol = await service.insert_user("carol", await service.insert_tenant("Globex", "GLOBEX"))
        await service.insert_resource("dup.csv", ResourceType.FILE, alice)
        await service.insert_resource("dup.csv", ResourceType.FILE, carol)

        with pytest.raises(InvalidArgumentError) as exc_info:
            await service.tenant_code_by_resource_name("dup.csv", ResourceType.FILE)
        assert exc_info.value.field == "alias"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("alias", ["", "   ", None])
    async def test_empty_alias(self, service, alias):
        with pytest.raises(InvalidArgumentError):
            await service.tenant_code_by_resource_name(alias, ResourceType.FILE)
