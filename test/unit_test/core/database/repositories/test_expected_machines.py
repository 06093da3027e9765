"""Unit tests for expected machine repository.

Expected machines are hard-deleted and support bulk create and update, so
these tests check both the single-row and the bulk paths.
"""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.dialects import postgresql

from baremetal_db.core.database.errors import DoesNotExistError, RecordCountMismatchError
from baremetal_db.core.database.paginator import OrderBy, PageInput
from baremetal_db.core.database.repositories.expected_machines import ExpectedMachineRepository
from baremetal_db.core.database.schemas.expected_machines import (
    ExpectedMachineClearInput,
    ExpectedMachineCreateInput,
    ExpectedMachineFilterInput,
    ExpectedMachineUpdateInput,
)


def _machine(site_id: uuid.UUID, index: int, **kwargs) -> ExpectedMachineCreateInput:
    return ExpectedMachineCreateInput(
        site_id=site_id,
        bmc_mac_address=f"00:11:22:33:44:{index:02x}",
        chassis_serial_number=f"CHS-{index:04d}",
        **kwargs,
    )


class TestExpectedMachineRepository:
    """Tests for ExpectedMachineRepository operations."""

    @pytest.fixture
    def repository(self, in_memory_session):
        return ExpectedMachineRepository(in_memory_session)

    async def test_create(self, repository, site):
        machine = await repository.create(
            _machine(site.id, 1, sku_id="gb200", fallback_dpu_serial_numbers=["DPU-1", "DPU-2"], labels={"rack": "r1"})
        )

        assert machine.sku_id == "gb200"
        assert machine.fallback_dpu_serial_numbers == ["DPU-1", "DPU-2"]
        assert machine.labels == {"rack": "r1"}

    async def test_create_multiple_keeps_order(self, repository, site):
        inputs = [_machine(site.id, index) for index in (3, 1, 2)]

        machines = await repository.create_multiple(inputs)

        assert [machine.chassis_serial_number for machine in machines] == ["CHS-0003", "CHS-0001", "CHS-0002"]
        _, total = await repository.get_all()
        assert total == 3

    async def test_create_multiple_empty(self, repository):
        assert await repository.create_multiple([]) == []

    async def test_update_multiple(self, repository, site):
        first, second = await repository.create_multiple([_machine(site.id, 1), _machine(site.id, 2, sku_id="old")])

        updated = await repository.update_multiple(
            [
                ExpectedMachineUpdateInput(id=second.id, sku_id="new"),
                ExpectedMachineUpdateInput(id=first.id, machine_id="machine-1", labels={"rack": "r2"}),
            ]
        )

        assert [machine.id for machine in updated] == [second.id, first.id]
        assert updated[0].sku_id == "new"
        assert updated[1].machine_id == "machine-1"
        assert updated[1].labels == {"rack": "r2"}
        assert updated[1].sku_id is None

    async def test_update_multiple_missing_id(self, repository, site):
        machine = await repository.create(_machine(site.id, 1))

        with pytest.raises(RecordCountMismatchError) as exc_info:
            await repository.update_multiple(
                [
                    ExpectedMachineUpdateInput(id=machine.id, sku_id="new"),
                    ExpectedMachineUpdateInput(id=uuid.uuid4(), sku_id="new"),
                ]
            )

        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    async def test_clear(self, repository, site):
        machine = await repository.create(_machine(site.id, 1, sku_id="gb200", machine_id="m-1"))

        cleared = await repository.clear(ExpectedMachineClearInput(id=machine.id, sku_id=True))

        assert cleared.sku_id is None
        assert cleared.machine_id == "m-1"

    async def test_delete_is_permanent(self, repository, site):
        machine = await repository.create(_machine(site.id, 1))

        await repository.delete_by_id(machine.id)

        with pytest.raises(DoesNotExistError):
            await repository.get_by_id(machine.id)
        _, total = await repository.get_all()
        assert total == 0

    async def test_filters(self, repository, site):
        await repository.create_multiple([_machine(site.id, 1), _machine(site.id, 2, sku_id="gb200")])

        machines, total = await repository.get_all(
            ExpectedMachineFilterInput(site_ids=[site.id], sku_ids=["gb200"]),
            page=PageInput(order_by=OrderBy(field="bmc_mac_address", order="DESC")),
        )

        assert total == 1
        assert machines[0].chassis_serial_number == "CHS-0002"

    async def test_empty_ids_short_circuits(self, mock_session):
        repository = ExpectedMachineRepository(mock_session)

        assert await repository.get_all(ExpectedMachineFilterInput(expected_machine_ids=[])) == ([], 0)
        mock_session.execute.assert_not_called()


class TestExpectedMachineRepositoryStatements:
    """Tests for statements that only differ on Postgres."""

    @pytest.fixture
    def repository(self, mock_session):
        return ExpectedMachineRepository(mock_session)

    async def test_get_for_update(self, repository, mock_session):
        mock_session.result.scalar_one_or_none.return_value = object()

        await repository.get_by_id(uuid.uuid4(), for_update=True)

        sql = str(mock_session.execute.await_args.args[0].compile(dialect=postgresql.dialect()))
        assert sql.endswith("FOR UPDATE")
        assert "deleted" not in sql

    async def test_search_casts_ids(self, repository, mock_session):
        await repository.get_all(ExpectedMachineFilterInput(search_query="chs"))

        sql = str(mock_session.execute.await_args.args[0].compile(dialect=postgresql.dialect()))
        assert "CAST(expected_machine.id AS TEXT) ILIKE" in sql
        assert "CAST(expected_machine.site_id AS TEXT) ILIKE" in sql

    async def test_search_covers_serials_and_labels(self, repository, mock_session):
        await repository.get_all(ExpectedMachineFilterInput(search_query="DPU-7"))

        sql = str(mock_session.execute.await_args.args[0].compile(dialect=postgresql.dialect()))
        where = sql.split("WHERE", 1)[1]
        assert "CAST(expected_machine.fallback_dpu_serial_numbers AS TEXT) ILIKE" in where
        assert "CAST(expected_machine.labels AS TEXT) ILIKE" in where
        assert "to_tsvector" in where and "expected_machine.fallback_dpu_serial_numbers" in where
