"""
Allocation constraint repository implementation.

A constraint reserves an amount of one resource (an instance type or an IP
block) for an allocation. ``resource_type`` and ``constraint_type`` are
validated here rather than by the input schema so callers get the data
layer's own errors.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.allocation_constraints import (
    ALLOCATION_CONSTRAINT_ORDER_BY_FIELDS,
    ALLOCATION_CONSTRAINT_RELATIONS,
    AllocationConstraint,
    AllocationConstraintType,
    AllocationResourceType,
)
from ..errors import InvalidParamsError, InvalidValueError
from ..paginator import PageInput
from ..schemas.allocation_constraints import (
    AllocationConstraintClearInput,
    AllocationConstraintCreateInput,
    AllocationConstraintFilterInput,
    AllocationConstraintUpdateInput,
)
from .base import BaseRepository, QueryBuilder

_ALLOWED_VALUES = {
    "resource_type": {member.value for member in AllocationResourceType},
    "constraint_type": {member.value for member in AllocationConstraintType},
}


def _validate_types(values: Dict[str, Any]) -> None:
    """Reject blank or unknown resource and constraint types.

    Raises:
        InvalidParamsError: If a given type is empty or whitespace
        InvalidValueError: If a given type is not a known value
    """
    for field, allowed in _ALLOWED_VALUES.items():
        if field not in values:
            continue
        value = values[field]
        if not value.strip():
            raise InvalidParamsError(f"{field} must not be empty")
        if value not in allowed:
            raise InvalidValueError(field, value)


class AllocationConstraintRepository(BaseRepository[AllocationConstraint]):
    """Repository for allocation constraint data access operations."""

    order_by_fields = ALLOCATION_CONSTRAINT_ORDER_BY_FIELDS
    relations = ALLOCATION_CONSTRAINT_RELATIONS

    def __init__(self, session: AsyncSession, auto_commit: bool = True) -> None:
        super().__init__(session, AllocationConstraint, auto_commit=auto_commit)

    async def create(self, data: AllocationConstraintCreateInput) -> AllocationConstraint:
        values = data.set_fields(exclude=())
        _validate_types(values)
        return await self._create(values)

    async def get_by_id(
        self, entity_id: uuid.UUID, include_relations: Optional[Sequence[str]] = None
    ) -> AllocationConstraint:
        return await self._get(entity_id, include_relations)

    async def get_all(
        self,
        filter_input: Optional[AllocationConstraintFilterInput] = None,
        page: Optional[PageInput] = None,
        include_relations: Optional[Sequence[str]] = None,
    ) -> Tuple[List[AllocationConstraint], int]:
        stmt = self._select()
        if filter_input is not None:
            stmt = QueryBuilder.apply_in(stmt, AllocationConstraint.allocation_id, filter_input.allocation_ids)
            stmt = QueryBuilder.apply_equal(stmt, AllocationConstraint.resource_type, filter_input.resource_type)
            stmt = QueryBuilder.apply_in(stmt, AllocationConstraint.resource_type_id, filter_input.resource_type_ids)
            stmt = QueryBuilder.apply_equal(stmt, AllocationConstraint.constraint_type, filter_input.constraint_type)
            stmt = QueryBuilder.apply_equal(
                stmt, AllocationConstraint.derived_resource_id, filter_input.derived_resource_id
            )
        return await self._paginate(stmt, page, include_relations)

    async def update(self, data: AllocationConstraintUpdateInput) -> AllocationConstraint:
        values = data.set_fields()
        _validate_types(values)
        return await self._update(data.id, values)

    async def clear(self, data: AllocationConstraintClearInput) -> AllocationConstraint:
        return await self._clear(data.id, data.flagged_fields())

    async def delete_by_id(self, entity_id: uuid.UUID) -> None:
        await self._soft_delete(entity_id)
