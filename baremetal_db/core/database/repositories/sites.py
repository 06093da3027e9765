"""
Site repository implementation.

This module provides data access operations for sites, including
JSON-aware filtering and ordering:

- ``config`` filter flags compare against keys of the stored config document
- ``location`` and ``contact`` order on the city and the email respectively
- updating ``config`` merges the given keys into the stored document
"""

from __future__ import annotations

import uuid
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.sites import SITE_ORDER_BY_FIELDS, SITE_RELATIONS, Site
from ..paginator import PageInput
from ..schemas.sites import (
    SiteClearInput,
    SiteConfigFilterInput,
    SiteCreateInput,
    SiteFilterInput,
    SiteUpdateInput,
)
from .base import BaseRepository, QueryBuilder


class SiteRepository(BaseRepository[Site]):
    """Repository for site data access operations using SQLModel."""

    order_by_fields = SITE_ORDER_BY_FIELDS
    relations = SITE_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, Site, auto_commit=auto_commit)

    def _order_by_columns(self) -> Mapping[str, Any]:
        columns = dict(super()._order_by_columns())
        columns["location"] = Site.location["city"].as_string()
        columns["contact"] = Site.contact["email"].as_string()
        return columns

    def _filtered(self, filter_input: Optional[SiteFilterInput]):
        stmt = self._select()
        if filter_input is None:
            return stmt

        stmt = QueryBuilder.apply_equal(stmt, Site.name, filter_input.name)
        stmt = QueryBuilder.apply_equal(stmt, Site.org, filter_input.org)
        stmt = QueryBuilder.apply_equal(stmt, Site.infrastructure_provider_id, filter_input.infrastructure_provider_id)
        stmt = QueryBuilder.apply_in(stmt, Site.id, filter_input.site_ids)
        stmt = QueryBuilder.apply_in(stmt, Site.status, filter_input.statuses)
        if filter_input.config is not None:
            stmt = self._apply_config_filter(stmt, filter_input.config)
        stmt = QueryBuilder.apply_search(
            stmt,
            filter_input.search_query,
            [Site.name, Site.display_name, Site.description, Site.status],
            cast_columns=[Site.location, Site.contact],
        )
        return stmt

    @staticmethod
    def _apply_config_filter(stmt, config: SiteConfigFilterInput):
        for key, value in config.set_fields(exclude=()).items():
            if isinstance(value, bool):
                stmt = stmt.where(Site.config[key].as_boolean() == value)
            else:
                stmt = stmt.where(Site.config[key].as_integer() == value)
        return stmt

    async def create(self, data: SiteCreateInput) -> Site:
        """Create a new site.

        Args:
            data: Site fields; ``config`` defaults to every feature disabled

        Returns:
            Persisted Site
        """
        return await self._create(data.set_fields(exclude=()))

    async def get_by_id(
        self,
        entity_id: uuid.UUID,
        include_relations: Optional[Sequence[str]] = None,
        include_deleted: bool = False,
    ) -> Site:
        """Get a site by ID.

        Args:
            entity_id: Site ID
            include_relations: Relationship names to eager load
            include_deleted: Also return a soft-deleted site

        Returns:
            Site instance

        Raises:
            DoesNotExistError: If the site does not exist
        """
        return await self._get(entity_id, include_relations, include_deleted=include_deleted)

    async def get_all(
        self,
        filter_input: Optional[SiteFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[Site], int]:
        """List sites matching a filter.

        Args:
            filter_input: Filter values, every live site when None
            page: Pagination and ordering
            include_relations: Relationship names to eager load

        Returns:
            Page of Site instances and the total number of matches
        """
        return await self._paginate(self._filtered(filter_input), page, include_relations)

    async def get_count(self, filter_input: Optional[SiteFilterInput] = None) -> int:
        """Count sites matching a filter."""
        return await self._count(self._filtered(filter_input))

    async def update(self, data: SiteUpdateInput) -> Site:
        """Update a site.

        ``config`` only overwrites the keys it sets. ``location`` and
        ``contact`` replace the stored documents.

        Raises:
            DoesNotExistError: If the site does not exist
        """
        values = data.set_fields(exclude=("id", "config"))
        if data.config is not None:
            site = await self._get(data.id)
            merged = dict(site.config or {})
            merged.update(data.config.set_fields(exclude=()))
            values["config"] = merged
        return await self._update(data.id, values)

    async def clear(self, data: SiteClearInput) -> Site:
        return await self._clear(data.id, data.flagged_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)

