"""Unit tests for IP block repository."""

from __future__ import annotations

import pytest

from baremetal_db.core.database.entities.ip_blocks import (
    IPBlockProtocolVersion,
    IPBlockRoutingType,
    IPBlockStatus,
)
from baremetal_db.core.database.errors import InvalidParamsError
from baremetal_db.core.database.repositories.ip_blocks import IPBlockRepository
from baremetal_db.core.database.schemas.ip_blocks import IPBlockCreateInput, IPBlockFilterInput, IPBlockUpdateInput


class TestIPBlockRepository:
    """Tests for IPBlockRepository operations."""

    @pytest.fixture
    def repository(self, in_memory_session):
        return IPBlockRepository(in_memory_session)

    @pytest.fixture
    def make_block(self, repository, provider, site):
        async def _make(name: str, prefix: str, prefix_length: int, **kwargs):
            return await repository.create(
                IPBlockCreateInput(
                    name=name,
                    site_id=site.id,
                    infrastructure_provider_id=provider.id,
                    routing_type=IPBlockRoutingType.PUBLIC,
                    prefix=prefix,
                    prefix_length=prefix_length,
                    protocol_version=IPBlockProtocolVersion.IPV4,
                    **kwargs,
                )
            )

        return _make

    async def test_create(self, make_block):
        block = await make_block("public", "192.0.2.0", 24)

        assert block.cidr == "192.0.2.0/24"
        assert block.routing_type == "Public"
        assert block.protocol_version == "IPv4"
        assert block.tenant_id is None

    async def test_exclude_derived(self, repository, make_block, tenant):
        original = await make_block("public", "192.0.2.0", 24)
        await make_block("public-tenant", "192.0.2.0", 28, tenant_id=tenant.id)

        blocks, total = await repository.get_all(IPBlockFilterInput(exclude_derived=True))

        assert total == 1
        assert blocks[0].id == original.id

    async def test_filter_by_tenant(self, repository, make_block, tenant):
        await make_block("public", "192.0.2.0", 24)
        derived = await make_block("public-tenant", "192.0.2.16", 28, tenant_id=tenant.id)

        blocks, total = await repository.get_all(IPBlockFilterInput(tenant_ids=[tenant.id]))

        assert total == 1
        assert blocks[0].id == derived.id

    async def test_tenant_ids_with_exclude_derived(self, repository):
        with pytest.raises(InvalidParamsError):
            await repository.get_all(IPBlockFilterInput(tenant_ids=[], exclude_derived=True))

    async def test_filter_by_prefix_length(self, repository, make_block):
        await make_block("a", "192.0.2.0", 24)
        await make_block("b", "198.51.100.0", 26)

        blocks, total = await repository.get_all(IPBlockFilterInput(prefix_lengths=[26, 27]))

        assert total == 1
        assert blocks[0].name == "b"

    async def test_update_and_count_by_status(self, repository, make_block, provider):
        block = await make_block("a", "192.0.2.0", 24)
        await make_block("b", "198.51.100.0", 26)

        updated = await repository.update(IPBlockUpdateInput(id=block.id, status=IPBlockStatus.READY))
        assert updated.status == "Ready"

        counts = await repository.get_count_by_status(infrastructure_provider_id=provider.id)
        assert counts["total"] == 2
        assert counts["Ready"] == 1
        assert counts["Pending"] == 1
