"""
Operating system repository implementation.

Operating systems can be restricted to sites through
``operating_system_site_association`` rows. An operating system without
any association is available everywhere, so filtering by ``site_ids``
keeps those too.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from baremetal_db.core.logging_config import get_logger

from ..entities.operating_system_site_associations import OperatingSystemSiteAssociation
from ..entities.operating_systems import OPERATING_SYSTEM_ORDER_BY_FIELDS, OPERATING_SYSTEM_RELATIONS, OperatingSystem
from ..paginator import PageInput
from ..schemas.operating_systems import (
    OperatingSystemClearInput,
    OperatingSystemCreateInput,
    OperatingSystemFilterInput,
    OperatingSystemUpdateInput,
)
from .base import BaseRepository, QueryBuilder

logger = get_logger(__name__)


class OperatingSystemRepository(BaseRepository[OperatingSystem]):
    """Repository for operating system data access operations using SQLModel."""

    order_by_fields = OPERATING_SYSTEM_ORDER_BY_FIELDS
    relations = OPERATING_SYSTEM_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, OperatingSystem, auto_commit=auto_commit)

    async def create(self, data: OperatingSystemCreateInput) -> OperatingSystem:
        """Create a new operating system. It starts out active."""
        values = data.set_fields(exclude=())
        values["is_active"] = True
        return await self._create(values)

    async def get_by_id(
        self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None
    ) -> OperatingSystem:
        return await self._get(entity_id, include_relations)

    async def get_all(
        self,
        filter_input: Optional[OperatingSystemFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[OperatingSystem], int]:
        """List operating systems matching a filter.

        Args:
            filter_input: Filter values, every live operating system when None
            page: Pagination and ordering
            include_relations: Relationship names to eager load

        Returns:
            Page of OperatingSystem instances and the total number of matches.
            An empty ``operating_system_ids`` list returns ``([], 0)`` without
            querying.
        """
        if filter_input is not None and filter_input.operating_system_ids is not None:
            if not filter_input.operating_system_ids:
                logger.debug("Empty operating_system_ids filter, skipping query")
                return [], 0

        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_in(stmt, OperatingSystem.id, filter_input.operating_system_ids)
            stmt = QueryBuilder.apply_equal(
                stmt, OperatingSystem.infrastructure_provider_id, filter_input.infrastructure_provider_id
            )
            stmt = QueryBuilder.apply_in(stmt, OperatingSystem.tenant_id, filter_input.tenant_ids)
            stmt = QueryBuilder.apply_in(stmt, OperatingSystem.name, filter_input.names)
            stmt = QueryBuilder.apply_in(stmt, OperatingSystem.org, filter_input.orgs)
            stmt = QueryBuilder.apply_in(stmt, OperatingSystem.type, filter_input.os_types)
            stmt = QueryBuilder.apply_in(stmt, OperatingSystem.status, filter_input.statuses)
            stmt = QueryBuilder.apply_equal(stmt, OperatingSystem.is_active, filter_input.is_active)
            if filter_input.site_ids is not None:
                stmt = self._apply_site_filter(stmt, filter_input.site_ids)
            stmt = QueryBuilder.apply_search(
                stmt,
                filter_input.search_query,
                [OperatingSystem.name, OperatingSystem.description, OperatingSystem.status],
            )
        return await self._paginate(stmt, page, include_relations)

    @staticmethod
    def _apply_site_filter(stmt, site_ids: Sequence[uuid.UUID]):
        association = OperatingSystemSiteAssociation
        return (
            stmt.outerjoin(
                association,
                and_(association.operating_system_id == OperatingSystem.id, association.deleted.is_(None)),
            )
            .where(or_(association.site_id.is_(None), association.site_id.in_(list(site_ids))))
            .distinct()
        )

    async def update(self, data: OperatingSystemUpdateInput) -> OperatingSystem:
        return await self._update(data.id, data.set_fields())

    async def clear(self, data: OperatingSystemClearInput) -> OperatingSystem:
        return await self._clear(data.id, data.flagged_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
