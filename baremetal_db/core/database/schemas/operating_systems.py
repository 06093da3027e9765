"""
Input schemas for operating system repository operations.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import Field

from ..entities.operating_systems import OperatingSystemAuthType, OperatingSystemStatus, OperatingSystemType
from .base import ClearInputBase, InputBase


class OperatingSystemCreateInput(InputBase):
    """Schema for creating an operating system. New operating systems are always active."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    description: Optional[str] = None
    org: str
    infrastructure_provider_id: Optional[uuid.UUID] = None
    tenant_id: Optional[uuid.UUID] = None
    controller_operating_system_id: Optional[uuid.UUID] = None
    version: Optional[str] = None
    type: OperatingSystemType
    image_url: Optional[str] = None
    image_sha: Optional[str] = None
    image_auth_type: Optional[OperatingSystemAuthType] = None
    image_auth_token: Optional[str] = None
    image_disk: Optional[str] = None
    root_fs_id: Optional[str] = None
    root_fs_label: Optional[str] = None
    ipxe_script: Optional[str] = None
    user_data: Optional[str] = None
    is_cloud_init: bool = False
    allow_override: bool = False
    enable_block_storage: bool = False
    phone_home_enabled: bool = False
    status: OperatingSystemStatus = OperatingSystemStatus.PENDING
    created_by: Optional[uuid.UUID] = None


class OperatingSystemUpdateInput(InputBase):
    """Schema for updating an operating system."""

    id: uuid.UUID
    name: Optional[str] = None
    description: Optional[str] = None
    controller_operating_system_id: Optional[uuid.UUID] = None
    version: Optional[str] = None
    type: Optional[OperatingSystemType] = None
    image_url: Optional[str] = None
    image_sha: Optional[str] = None
    image_auth_type: Optional[OperatingSystemAuthType] = None
    image_auth_token: Optional[str] = None
    image_disk: Optional[str] = None
    root_fs_id: Optional[str] = None
    root_fs_label: Optional[str] = None
    ipxe_script: Optional[str] = None
    user_data: Optional[str] = None
    is_cloud_init: Optional[bool] = None
    allow_override: Optional[bool] = None
    enable_block_storage: Optional[bool] = None
    phone_home_enabled: Optional[bool] = None
    is_active: Optional[bool] = None
    deactivation_note: Optional[str] = None
    status: Optional[OperatingSystemStatus] = None


class OperatingSystemClearInput(ClearInputBase):
    """Schema for setting nullable operating system columns to NULL."""

    id: uuid.UUID
    description: bool = False
    infrastructure_provider_id: bool = False
    tenant_id: bool = False
    controller_operating_system_id: bool = False
    version: bool = False
    image_url: bool = False
    image_sha: bool = False
    image_auth_type: bool = False
    image_auth_token: bool = False
    image_disk: bool = False
    root_fs_id: bool = False
    root_fs_label: bool = False
    ipxe_script: bool = False
    user_data: bool = False
    deactivation_note: bool = False


class OperatingSystemFilterInput(InputBase):
    """Filter for listing operating systems.

    ``site_ids`` matches operating systems associated with any of the sites as
    well as those not associated with any site at all.
    """

    operating_system_ids: Optional[List[uuid.UUID]] = None
    infrastructure_provider_id: Optional[uuid.UUID] = None
    tenant_ids: Optional[List[uuid.UUID]] = None
    site_ids: Optional[List[uuid.UUID]] = None
    names: Optional[List[str]] = None
    orgs: Optional[List[str]] = None
    os_types: Optional[List[OperatingSystemType]] = None
    statuses: Optional[List[OperatingSystemStatus]] = None
    is_active: Optional[bool] = None
    search_query: Optional[str] = None
