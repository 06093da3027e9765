"""
Tenant site repository implementation.

A tenant site grants a tenant access to a site and carries the per-tenant
settings for it.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from baremetal_db.core.logging_config import get_logger

from ..entities.tenant_sites import TENANT_SITE_ORDER_BY_FIELDS, TENANT_SITE_RELATIONS, TenantSite
from ..errors import DoesNotExistError
from ..paginator import PageInput
from ..schemas.tenant_sites import TenantSiteCreateInput, TenantSiteFilterInput, TenantSiteUpdateInput
from .base import BaseRepository, QueryBuilder

logger = get_logger(__name__)


class TenantSiteRepository(BaseRepository[TenantSite]):
    """Repository for tenant site data access operations using SQLModel."""

    order_by_fields = TENANT_SITE_ORDER_BY_FIELDS
    relations = TENANT_SITE_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, TenantSite, auto_commit=auto_commit)

    async def create(self, data: TenantSiteCreateInput) -> TenantSite:
        """Create a tenant site with the serial console disabled."""
        values = data.set_fields(exclude=())
        values["enable_serial_console"] = False
        values.setdefault("config", {})
        return await self._create(values)

    async def get_by_id(self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None) -> TenantSite:
        return await self._get(entity_id, include_relations)

    async def get_by_tenant_id_and_site_id(
        self,
        tenant_id: uuid.UUID,
        site_id: uuid.UUID,
        include_relations: Optional[Sequence[str]] = None,
    ) -> TenantSite:
        """Get the tenant site linking a tenant and a site.

        Args:
            tenant_id: Tenant ID
            site_id: Site ID
            include_relations: Relationship names to eager load

        Returns:
            TenantSite instance

        Raises:
            DoesNotExistError: If the tenant has no access to the site
        """
        options = self._relation_options(include_relations)
        stmt = (
            self._select()
            .where(TenantSite.tenant_id == tenant_id, TenantSite.site_id == site_id)
            .options(*options)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        tenant_site = result.scalars().first()
        if tenant_site is None:
            raise DoesNotExistError(self.entity_name, f"tenant_id={tenant_id}, site_id={site_id}")
        logger.debug(f"Fetched TenantSite: tenant_id={tenant_id}, site_id={site_id}")
        return tenant_site

    async def get_all(
        self,
        filter_input: Optional[TenantSiteFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[TenantSite], int]:
        """List tenant sites matching a filter.

        The config filter only applies when both ``config_key`` and
        ``config_value`` are given.
        """
        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_in(stmt, TenantSite.tenant_id, filter_input.tenant_ids)
            stmt = QueryBuilder.apply_in(stmt, TenantSite.tenant_org, filter_input.tenant_orgs)
            stmt = QueryBuilder.apply_in(stmt, TenantSite.site_id, filter_input.site_ids)
            if filter_input.config_key is not None and filter_input.config_value is not None:
                stmt = stmt.where(TenantSite.config[filter_input.config_key].as_string() == filter_input.config_value)
        return await self._paginate(stmt, page, include_relations)

    async def update(self, data: TenantSiteUpdateInput) -> TenantSite:
        return await self._update(data.id, data.set_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
