"""
Input schemas for VPC repository operations.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..entities.vpcs import NetworkVirtualizationType, VpcStatus
from .base import ClearInputBase, InputBase


class VpcCreateInput(InputBase):
    """Schema for creating a VPC."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    description: Optional[str] = None
    org: str
    infrastructure_provider_id: uuid.UUID
    tenant_id: uuid.UUID
    site_id: uuid.UUID
    nvlink_logical_partition_id: Optional[uuid.UUID] = None
    network_virtualization_type: Optional[NetworkVirtualizationType] = None
    controller_vpc_id: Optional[uuid.UUID] = None
    network_security_group_id: Optional[str] = None
    network_security_group_propagation_details: Optional[Dict[str, Any]] = None
    labels: Optional[Dict[str, str]] = None
    status: VpcStatus = VpcStatus.PENDING
    created_by: Optional[uuid.UUID] = None


class VpcUpdateInput(InputBase):
    """Schema for updating a VPC."""

    id: uuid.UUID
    name: Optional[str] = None
    description: Optional[str] = None
    nvlink_logical_partition_id: Optional[uuid.UUID] = None
    network_virtualization_type: Optional[NetworkVirtualizationType] = None
    controller_vpc_id: Optional[uuid.UUID] = None
    network_security_group_id: Optional[str] = None
    network_security_group_propagation_details: Optional[Dict[str, Any]] = None
    labels: Optional[Dict[str, str]] = None
    status: Optional[VpcStatus] = None
    is_missing_on_site: Optional[bool] = None


class VpcClearInput(ClearInputBase):
    """Schema for setting nullable VPC columns to NULL."""

    id: uuid.UUID
    description: bool = False
    controller_vpc_id: bool = False
    nvlink_logical_partition_id: bool = False
    network_security_group_id: bool = False
    network_security_group_propagation_details: bool = False
    labels: bool = False


class VpcFilterInput(InputBase):
    """Filter for listing VPCs."""

    name: Optional[str] = None
    org: Optional[str] = None
    vpc_ids: Optional[List[uuid.UUID]] = None
    infrastructure_provider_id: Optional[uuid.UUID] = None
    tenant_ids: Optional[List[uuid.UUID]] = None
    site_ids: Optional[List[uuid.UUID]] = None
    nvlink_logical_partition_ids: Optional[List[uuid.UUID]] = None
    network_security_group_ids: Optional[List[str]] = None
    network_virtualization_type: Optional[NetworkVirtualizationType] = None
    statuses: Optional[List[VpcStatus]] = None
    search_query: Optional[str] = None
