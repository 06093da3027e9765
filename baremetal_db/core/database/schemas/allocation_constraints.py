"""
Input schemas for allocation constraint repository operations.

``resource_type`` and ``constraint_type`` are plain strings here: blank
values are rejected by the repository with ``InvalidParamsError``.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import Field

from .base import ClearInputBase, InputBase


class AllocationConstraintCreateInput(InputBase):
    """Schema for creating an allocation constraint."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    allocation_id: uuid.UUID
    resource_type: str
    resource_type_id: uuid.UUID
    constraint_type: str
    constraint_value: int
    derived_resource_id: Optional[uuid.UUID] = None
    created_by: Optional[uuid.UUID] = None


class AllocationConstraintUpdateInput(InputBase):
    """Schema for updating an allocation constraint."""

    id: uuid.UUID
    allocation_id: Optional[uuid.UUID] = None
    resource_type: Optional[str] = None
    resource_type_id: Optional[uuid.UUID] = None
    constraint_type: Optional[str] = None
    constraint_value: Optional[int] = None
    derived_resource_id: Optional[uuid.UUID] = None


class AllocationConstraintClearInput(ClearInputBase):
    """Schema for setting nullable allocation constraint columns to NULL."""

    id: uuid.UUID
    derived_resource_id: bool = False


class AllocationConstraintFilterInput(InputBase):
    """Filter for listing allocation constraints."""

    allocation_ids: Optional[List[uuid.UUID]] = None
    resource_type: Optional[str] = None
    resource_type_ids: Optional[List[uuid.UUID]] = None
    constraint_type: Optional[str] = None
    derived_resource_id: Optional[uuid.UUID] = None
