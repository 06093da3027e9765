"""Unit tests for the InfiniBand partition repository."""

from __future__ import annotations

import pytest

from baremetal_db.core.database.entities.infiniband_partitions import InfiniBandPartitionStatus
from baremetal_db.core.database.repositories.infiniband_partitions import InfiniBandPartitionRepository
from baremetal_db.core.database.schemas.infiniband_partitions import (
    InfiniBandPartitionClearInput,
    InfiniBandPartitionCreateInput,
    InfiniBandPartitionFilterInput,
    InfiniBandPartitionUpdateInput,
)


class TestInfiniBandPartitionRepository:
    """Tests for InfiniBandPartitionRepository operations."""

    @pytest.fixture
    def repository(self, in_memory_session):
        return InfiniBandPartitionRepository(in_memory_session)

    @pytest.fixture
    def make_partition(self, repository, tenant, site):
        async def _make(name: str, **kwargs):
            return await repository.create(
                InfiniBandPartitionCreateInput(name=name, org=tenant.org, site_id=site.id, tenant_id=tenant.id, **kwargs)
            )

        return _make

    async def test_filter_by_tenant_org_and_sharp(self, repository, make_partition, tenant):
        sharp = await make_partition("ib-a", enable_sharp=True, partition_key="0x1")
        await make_partition("ib-b", enable_sharp=False)

        rows, total = await repository.get_all(
            InfiniBandPartitionFilterInput(tenant_orgs=[tenant.org], sharp_enabled=True)
        )

        assert total == 1
        assert rows[0].id == sharp.id

        _, total = await repository.get_all(InfiniBandPartitionFilterInput(tenant_orgs=["someone-else"]))
        assert total == 0

    async def test_update_and_clear(self, repository, make_partition):
        partition = await make_partition("ib-a", mtu=4096, service_level=1)

        updated = await repository.update(
            InfiniBandPartitionUpdateInput(id=partition.id, status=InfiniBandPartitionStatus.READY, mtu=2048)
        )
        assert updated.mtu == 2048
        assert updated.status == InfiniBandPartitionStatus.READY.value

        cleared = await repository.clear(InfiniBandPartitionClearInput(id=partition.id, mtu=True))
        assert cleared.mtu is None
        assert cleared.service_level == 1
