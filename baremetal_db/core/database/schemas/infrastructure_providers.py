"""
Input schemas for infrastructure provider repository operations.
"""

from __future__ import annotations

import uuid
from typing import Optional

from pydantic import Field

from .base import InputBase


class InfrastructureProviderCreateInput(InputBase):
    """Schema for creating an infrastructure provider."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    display_name: Optional[str] = None
    org: str
    org_display_name: Optional[str] = None
    created_by: Optional[uuid.UUID] = None


class InfrastructureProviderUpdateInput(InputBase):
    """Schema for updating an infrastructure provider."""

    id: uuid.UUID
    name: Optional[str] = None
    display_name: Optional[str] = None
    org_display_name: Optional[str] = None
