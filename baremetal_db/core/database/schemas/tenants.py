"""
Input schemas for tenant repository operations.
"""

from __future__ import annotations

import uuid
from typing import Optional

from pydantic import Field

from ..entities.tenants import TenantConfig
from .base import InputBase


class TenantCreateInput(InputBase):
    """Schema for creating a tenant."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    display_name: Optional[str] = None
    org: str
    org_display_name: Optional[str] = None
    config: Optional[TenantConfig] = None
    created_by: Optional[uuid.UUID] = None


class TenantUpdateInput(InputBase):
    """Schema for updating a tenant. ``config`` replaces the stored one."""

    id: uuid.UUID
    name: Optional[str] = None
    display_name: Optional[str] = None
    org_display_name: Optional[str] = None
    config: Optional[TenantConfig] = None
