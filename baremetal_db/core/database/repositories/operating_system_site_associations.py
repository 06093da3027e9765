"""
Operating system site association repository implementation.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.operating_system_site_associations import (
    OPERATING_SYSTEM_SITE_ASSOCIATION_ORDER_BY_FIELDS,
    OPERATING_SYSTEM_SITE_ASSOCIATION_RELATIONS,
    OperatingSystemSiteAssociation,
)
from ..paginator import PageInput
from ..schemas.operating_system_site_associations import (
    OperatingSystemSiteAssociationCreateInput,
    OperatingSystemSiteAssociationFilterInput,
    OperatingSystemSiteAssociationUpdateInput,
)
from .base import BaseRepository, QueryBuilder


class OperatingSystemSiteAssociationRepository(BaseRepository[OperatingSystemSiteAssociation]):
    """Repository for operating system site association data access operations."""

    order_by_fields = OPERATING_SYSTEM_SITE_ASSOCIATION_ORDER_BY_FIELDS
    relations = OPERATING_SYSTEM_SITE_ASSOCIATION_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, OperatingSystemSiteAssociation, auto_commit=auto_commit)

    async def create(self, data: OperatingSystemSiteAssociationCreateInput) -> OperatingSystemSiteAssociation:
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(
        self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None
    ) -> OperatingSystemSiteAssociation:
        return await self._get(entity_id, include_relations)

    async def get_all(
        self,
        filter_input: Optional[OperatingSystemSiteAssociationFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[OperatingSystemSiteAssociation], int]:
        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_in(
                stmt, OperatingSystemSiteAssociation.operating_system_id, filter_input.operating_system_ids
            )
            stmt = QueryBuilder.apply_in(stmt, OperatingSystemSiteAssociation.site_id, filter_input.site_ids)
            stmt = QueryBuilder.apply_in(stmt, OperatingSystemSiteAssociation.status, filter_input.statuses)
        return await self._paginate(stmt, page, include_relations)

    async def update(self, data: OperatingSystemSiteAssociationUpdateInput) -> OperatingSystemSiteAssociation:
        return await self._update(data.id, data.set_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
