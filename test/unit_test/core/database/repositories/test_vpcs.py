"""Unit tests for VPC repository."""

from __future__ import annotations

import pytest

from baremetal_db.core.database.entities.vpcs import NetworkVirtualizationType, VpcStatus
from baremetal_db.core.database.repositories.vpcs import VpcRepository
from baremetal_db.core.database.schemas.vpcs import VpcClearInput, VpcCreateInput, VpcFilterInput, VpcUpdateInput


class TestVpcRepository:
    """Tests for VpcRepository operations."""

    @pytest.fixture
    def repository(self, in_memory_session):
        return VpcRepository(in_memory_session)

    @pytest.fixture
    def make_vpc(self, repository, provider, tenant, site):
        async def _make(name: str, **kwargs):
            return await repository.create(
                VpcCreateInput(
                    name=name,
                    org=tenant.org,
                    infrastructure_provider_id=provider.id,
                    tenant_id=tenant.id,
                    site_id=site.id,
                    **kwargs,
                )
            )

        return _make

    async def test_create_defaults(self, make_vpc):
        vpc = await make_vpc("vpc-a", network_virtualization_type=NetworkVirtualizationType.FNN)

        assert vpc.status == VpcStatus.PENDING.value
        assert vpc.network_virtualization_type == "FNN"
        assert vpc.is_missing_on_site is False

    async def test_get_all_with_relations(self, repository, make_vpc, site, tenant):
        await make_vpc("vpc-a")

        vpcs, total = await repository.get_all(
            VpcFilterInput(site_ids=[site.id], tenant_ids=[tenant.id]), include_relations=["site", "tenant"]
        )

        assert total == 1
        assert vpcs[0].site.name == site.name
        assert vpcs[0].tenant.org == tenant.org

    async def test_get_all_by_status(self, repository, make_vpc):
        await make_vpc("vpc-a")
        ready = await make_vpc("vpc-b", status=VpcStatus.READY)

        vpcs, total = await repository.get_all(VpcFilterInput(statuses=[VpcStatus.READY, VpcStatus.ERROR]))

        assert total == 1
        assert vpcs[0].id == ready.id

    async def test_update_and_clear_labels(self, repository, make_vpc):
        vpc = await make_vpc("vpc-a", labels={"env": "prod"})

        updated = await repository.update(VpcUpdateInput(id=vpc.id, labels={"env": "dev"}, is_missing_on_site=True))
        assert updated.labels == {"env": "dev"}
        assert updated.is_missing_on_site is True

        cleared = await repository.clear(VpcClearInput(id=vpc.id, labels=True))
        assert cleared.labels is None

    async def test_clear_nothing_flagged(self, repository, make_vpc):
        vpc = await make_vpc("vpc-a", description="keep")

        unchanged = await repository.clear(VpcClearInput(id=vpc.id))

        assert unchanged.description == "keep"

    async def test_count_by_status(self, repository, make_vpc, site):
        await make_vpc("vpc-a")
        await make_vpc("vpc-b", status=VpcStatus.READY)
        deleted = await make_vpc("vpc-c", status=VpcStatus.READY)
        await repository.delete_by_id(deleted.id)

        counts = await repository.get_count_by_status(site_id=site.id)

        assert counts["total"] == 2
        assert counts[VpcStatus.PENDING.value] == 1
        assert counts[VpcStatus.READY.value] == 1
        assert counts[VpcStatus.DELETING.value] == 0
