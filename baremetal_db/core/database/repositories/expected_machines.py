"""
Expected machine repository implementation.

Expected machines are the inventory a site is supposed to report, usually
imported in bulk. Unlike the other tables they are deleted for real rather
than soft-deleted.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from baremetal_db.core.logging_config import get_logger

from ..base import utc_now
from ..entities.expected_machines import EXPECTED_MACHINE_ORDER_BY_FIELDS, EXPECTED_MACHINE_RELATIONS, ExpectedMachine
from ..errors import RecordCountMismatchError
from ..paginator import PageInput
from ..schemas.expected_machines import (
    ExpectedMachineClearInput,
    ExpectedMachineCreateInput,
    ExpectedMachineFilterInput,
    ExpectedMachineUpdateInput,
)
from .base import BaseRepository, QueryBuilder

logger = get_logger(__name__)


class ExpectedMachineRepository(BaseRepository[ExpectedMachine]):
    """Repository for expected machine data access operations using SQLModel."""

    order_by_fields = EXPECTED_MACHINE_ORDER_BY_FIELDS
    relations = EXPECTED_MACHINE_RELATIONS
    soft_delete = False

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, ExpectedMachine, auto_commit=auto_commit)

    async def create(self, data: ExpectedMachineCreateInput) -> ExpectedMachine:
        return await self._create(data.set_fields(exclude=()))

    async def create_multiple(self, inputs: Sequence[ExpectedMachineCreateInput]) -> List[ExpectedMachine]:
        """Insert several expected machines at once.

        Args:
            inputs: Create inputs

        Returns:
            Created ExpectedMachine instances, in the order of ``inputs``

        Raises:
            RecordCountMismatchError: If fewer rows are read back than were inserted
        """
        if not inputs:
            return []

        machines = [ExpectedMachine(**self._row_values(data.set_fields(exclude=()))) for data in inputs]
        self.session.add_all(machines)
        await self._commit()
        logger.info(f"Created {len(machines)} ExpectedMachine records")
        return await self._get_many_in_order([machine.id for machine in machines])

    async def get_by_id(
        self,
        entity_id: uuid.UUID,
        include_relations: Optional[Sequence[str]] = None,
        for_update: bool = False,
    ) -> ExpectedMachine:
        """Get an expected machine by ID.

        Args:
            entity_id: Expected machine ID
            include_relations: Relationship names to eager load
            for_update: Lock the row with SELECT ... FOR UPDATE until the transaction ends

        Returns:
            ExpectedMachine instance

        Raises:
            DoesNotExistError: If the expected machine does not exist
        """
        return await self._get(entity_id, include_relations, for_update=for_update)

    async def get_all(
        self,
        filter_input: Optional[ExpectedMachineFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[ExpectedMachine], int]:
        """List expected machines matching a filter.

        An empty ``expected_machine_ids`` list returns ``([], 0)`` without querying.
        """
        if filter_input is not None and filter_input.expected_machine_ids is not None:
            if not filter_input.expected_machine_ids:
                logger.debug("Empty expected_machine_ids filter, skipping query")
                return [], 0

        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_in(stmt, ExpectedMachine.id, filter_input.expected_machine_ids)
            stmt = QueryBuilder.apply_in(stmt, ExpectedMachine.site_id, filter_input.site_ids)
            stmt = QueryBuilder.apply_in(stmt, ExpectedMachine.bmc_mac_address, filter_input.bmc_mac_addresses)
            stmt = QueryBuilder.apply_in(
                stmt, ExpectedMachine.chassis_serial_number, filter_input.chassis_serial_numbers
            )
            stmt = QueryBuilder.apply_in(stmt, ExpectedMachine.sku_id, filter_input.sku_ids)
            stmt = QueryBuilder.apply_in(stmt, ExpectedMachine.machine_id, filter_input.machine_ids)
            stmt = QueryBuilder.apply_search(
                stmt,
                filter_input.search_query,
                [
                    ExpectedMachine.bmc_mac_address,
                    ExpectedMachine.chassis_serial_number,
                    ExpectedMachine.sku_id,
                    ExpectedMachine.machine_id,
                ],
                cast_columns=[
                    ExpectedMachine.id,
                    ExpectedMachine.site_id,
                    ExpectedMachine.fallback_dpu_serial_numbers,
                    ExpectedMachine.labels,
                ],
            )
        return await self._paginate(stmt, page, include_relations)

    async def update(self, data: ExpectedMachineUpdateInput) -> ExpectedMachine:
        return await self._update(data.id, data.set_fields())

    async def update_multiple(self, inputs: Sequence[ExpectedMachineUpdateInput]) -> List[ExpectedMachine]:
        """Update several expected machines in one transaction.

        Each input only writes the fields it sets.

        Returns:
            Updated ExpectedMachine instances, in the order of ``inputs``

        Raises:
            RecordCountMismatchError: If an input references a missing machine
        """
        if not inputs:
            return []

        ids = [data.id for data in inputs]
        await self._get_many_in_order(ids)

        now = utc_now()
        rows = [{**self._row_values(data.set_fields()), "id": data.id, "updated": now} for data in inputs]
        await self.session.execute(update(ExpectedMachine), rows)
        await self._commit()
        logger.info(f"Updated {len(rows)} ExpectedMachine records")
        return await self._get_many_in_order(ids)

    async def clear(self, data: ExpectedMachineClearInput) -> ExpectedMachine:
        return await self._clear(data.id, data.flagged_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        """Delete an expected machine permanently. A missing ID is a no-op."""
        await self.session.execute(delete(ExpectedMachine).where(ExpectedMachine.id == entity_id))
        await self._commit()
        logger.info(f"Deleted ExpectedMachine: id={entity_id}")

    async def _get_many_in_order(self, ids: List[uuid.UUID]) -> List[ExpectedMachine]:
        stmt = (
            select(ExpectedMachine)
            .where(ExpectedMachine.id.in_(ids))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        by_id = {machine.id: machine for machine in result.scalars().all()}
        if len(by_id) != len(set(ids)):
            raise RecordCountMismatchError(len(set(ids)), len(by_id))
        return [by_id[entity_id] for entity_id in ids]
