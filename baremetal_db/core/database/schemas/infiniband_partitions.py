"""
Input schemas for InfiniBand partition repository operations.
"""

from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from pydantic import Field

from ..entities.infiniband_partitions import InfiniBandPartitionStatus
from .base import ClearInputBase, InputBase


class InfiniBandPartitionCreateInput(InputBase):
    """Schema for creating an InfiniBand partition."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    description: Optional[str] = None
    org: str
    site_id: uuid.UUID
    tenant_id: uuid.UUID
    controller_ib_partition_id: Optional[uuid.UUID] = None
    partition_key: Optional[str] = None
    partition_name: Optional[str] = None
    service_level: Optional[int] = None
    rate_limit: Optional[float] = None
    mtu: Optional[int] = None
    enable_sharp: Optional[bool] = None
    labels: Optional[Dict[str, str]] = None
    status: InfiniBandPartitionStatus = InfiniBandPartitionStatus.PENDING
    created_by: Optional[uuid.UUID] = None


class InfiniBandPartitionUpdateInput(InputBase):
    """Schema for updating an InfiniBand partition."""

    id: uuid.UUID
    name: Optional[str] = None
    description: Optional[str] = None
    controller_ib_partition_id: Optional[uuid.UUID] = None
    partition_key: Optional[str] = None
    partition_name: Optional[str] = None
    service_level: Optional[int] = None
    rate_limit: Optional[float] = None
    mtu: Optional[int] = None
    enable_sharp: Optional[bool] = None
    labels: Optional[Dict[str, str]] = None
    status: Optional[InfiniBandPartitionStatus] = None
    is_missing_on_site: Optional[bool] = None


class InfiniBandPartitionClearInput(ClearInputBase):
    """Schema for setting nullable InfiniBand partition columns to NULL."""

    id: uuid.UUID
    description: bool = False
    controller_ib_partition_id: bool = False
    partition_key: bool = False
    partition_name: bool = False
    service_level: bool = False
    rate_limit: bool = False
    mtu: bool = False
    enable_sharp: bool = False
    labels: bool = False


class InfiniBandPartitionFilterInput(InputBase):
    """Filter for listing InfiniBand partitions."""

    infiniband_partition_ids: Optional[List[uuid.UUID]] = None
    names: Optional[List[str]] = None
    site_ids: Optional[List[uuid.UUID]] = None
    tenant_orgs: Optional[List[str]] = None
    tenant_ids: Optional[List[uuid.UUID]] = None
    statuses: Optional[List[InfiniBandPartitionStatus]] = None
    partition_names: Optional[List[str]] = None
    partition_keys: Optional[List[str]] = None
    sharp_enabled: Optional[bool] = None
    search_query: Optional[str] = None
