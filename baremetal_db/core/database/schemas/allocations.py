"""
Input schemas for allocation repository operations.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import Field

from ..entities.allocations import AllocationStatus
from .base import InputBase


class AllocationCreateInput(InputBase):
    """Schema for creating an allocation."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    description: Optional[str] = None
    infrastructure_provider_id: uuid.UUID
    tenant_id: uuid.UUID
    site_id: uuid.UUID
    status: AllocationStatus = AllocationStatus.PENDING
    created_by: Optional[uuid.UUID] = None


class AllocationUpdateInput(InputBase):
    """Schema for updating an allocation."""

    id: uuid.UUID
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[AllocationStatus] = None


class AllocationFilterInput(InputBase):
    """Filter for listing allocations."""

    allocation_ids: Optional[List[uuid.UUID]] = None
    infrastructure_provider_id: Optional[uuid.UUID] = None
    tenant_ids: Optional[List[uuid.UUID]] = None
    site_ids: Optional[List[uuid.UUID]] = None
    statuses: Optional[List[AllocationStatus]] = None
    search_query: Optional[str] = None
