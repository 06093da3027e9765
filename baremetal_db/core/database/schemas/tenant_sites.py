"""
Input schemas for tenant site repository operations.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import InputBase


class TenantSiteCreateInput(InputBase):
    """Schema for giving a tenant access to a site. Serial console starts disabled."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    tenant_id: uuid.UUID
    tenant_org: str
    site_id: uuid.UUID
    config: Optional[Dict[str, Any]] = None
    created_by: Optional[uuid.UUID] = None


class TenantSiteUpdateInput(InputBase):
    """Schema for updating a tenant site. ``config`` replaces the stored map."""

    id: uuid.UUID
    enable_serial_console: Optional[bool] = None
    config: Optional[Dict[str, Any]] = None


class TenantSiteFilterInput(InputBase):
    """Filter for listing tenant sites.

    ``config_key`` and ``config_value`` only apply together and match rows
    whose config maps the key to exactly that string value.
    """

    tenant_ids: Optional[List[uuid.UUID]] = None
    tenant_orgs: Optional[List[str]] = None
    site_ids: Optional[List[uuid.UUID]] = None
    config_key: Optional[str] = None
    config_value: Optional[str] = None
