"""
Input schemas for site repository operations.

The site config is updated field by field: ``SiteConfigUpdateInput`` only
overwrites the keys it sets and keeps the rest of the stored document.
Location and contact are replaced as a whole.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..entities.sites import SiteConfig, SiteContact, SiteLocation, SiteStatus
from .base import ClearInputBase, InputBase


class SiteCreateInput(InputBase):
    """Schema for creating a site."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    org: str
    infrastructure_provider_id: uuid.UUID
    site_controller_version: Optional[str] = None
    site_agent_version: Optional[str] = None
    registration_token: Optional[str] = None
    registration_token_expiration: Optional[datetime] = None
    is_infinity_enabled: bool = False
    serial_console_hostname: Optional[str] = None
    is_serial_console_enabled: bool = False
    serial_console_idle_timeout: Optional[int] = None
    serial_console_max_session_length: Optional[int] = None
    status: SiteStatus = SiteStatus.PENDING
    config: SiteConfig = Field(default_factory=SiteConfig)
    location: Optional[SiteLocation] = None
    contact: Optional[SiteContact] = None
    created_by: Optional[uuid.UUID] = None


class SiteConfigUpdateInput(InputBase):
    """Partial update of the site feature configuration."""

    native_networking: Optional[bool] = None
    network_security_group: Optional[bool] = None
    nvlink_partition: Optional[bool] = None
    max_network_security_group_rule_count: Optional[int] = None


class SiteUpdateInput(InputBase):
    """Schema for updating a site."""

    id: uuid.UUID
    name: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    site_controller_version: Optional[str] = None
    site_agent_version: Optional[str] = None
    registration_token: Optional[str] = None
    registration_token_expiration: Optional[datetime] = None
    is_infinity_enabled: Optional[bool] = None
    serial_console_hostname: Optional[str] = None
    is_serial_console_enabled: Optional[bool] = None
    serial_console_idle_timeout: Optional[int] = None
    serial_console_max_session_length: Optional[int] = None
    status: Optional[SiteStatus] = None
    config: Optional[SiteConfigUpdateInput] = None
    location: Optional[SiteLocation] = None
    contact: Optional[SiteContact] = None


class SiteClearInput(ClearInputBase):
    """Schema for setting nullable site columns to NULL."""

    id: uuid.UUID
    display_name: bool = False
    description: bool = False
    site_controller_version: bool = False
    site_agent_version: bool = False
    registration_token: bool = False
    registration_token_expiration: bool = False
    serial_console_hostname: bool = False
    serial_console_idle_timeout: bool = False
    serial_console_max_session_length: bool = False
    location: bool = False
    contact: bool = False


class SiteConfigFilterInput(InputBase):
    """Match sites on their feature configuration."""

    native_networking: Optional[bool] = None
    network_security_group: Optional[bool] = None
    nvlink_partition: Optional[bool] = None
    max_network_security_group_rule_count: Optional[int] = None


class SiteFilterInput(InputBase):
    """Filter for listing and counting sites."""

    name: Optional[str] = None
    org: Optional[str] = None
    infrastructure_provider_id: Optional[uuid.UUID] = None
    site_ids: Optional[List[uuid.UUID]] = None
    statuses: Optional[List[SiteStatus]] = None
    search_query: Optional[str] = None
    config: Optional[SiteConfigFilterInput] = None
