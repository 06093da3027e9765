"""
Input schemas for instance type repository operations.
"""

from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from pydantic import Field

from ..entities.instance_types import InstanceTypeStatus
from .base import ClearInputBase, InputBase


class InstanceTypeCreateInput(InputBase):
    """Schema for creating an instance type."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    controller_machine_type: Optional[str] = None
    infrastructure_provider_id: uuid.UUID
    site_id: Optional[uuid.UUID] = None
    labels: Optional[Dict[str, str]] = None
    status: InstanceTypeStatus = InstanceTypeStatus.PENDING
    created_by: Optional[uuid.UUID] = None


class InstanceTypeUpdateInput(InputBase):
    """Schema for updating an instance type."""

    id: uuid.UUID
    name: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    controller_machine_type: Optional[str] = None
    site_id: Optional[uuid.UUID] = None
    labels: Optional[Dict[str, str]] = None
    status: Optional[InstanceTypeStatus] = None


class InstanceTypeClearInput(ClearInputBase):
    """Schema for setting nullable instance type columns to NULL."""

    id: uuid.UUID
    display_name: bool = False
    description: bool = False
    controller_machine_type: bool = False
    site_id: bool = False
    labels: bool = False


class InstanceTypeFilterInput(InputBase):
    """Filter for listing instance types."""

    instance_type_ids: Optional[List[uuid.UUID]] = None
    names: Optional[List[str]] = None
    infrastructure_provider_id: Optional[uuid.UUID] = None
    site_ids: Optional[List[uuid.UUID]] = None
    statuses: Optional[List[InstanceTypeStatus]] = None
    search_query: Optional[str] = None
