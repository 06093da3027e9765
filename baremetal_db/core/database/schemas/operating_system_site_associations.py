"""
Input schemas for operating system site association repository operations.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import Field

from ..entities.operating_system_site_associations import OperatingSystemSiteAssociationStatus
from .base import InputBase


class OperatingSystemSiteAssociationCreateInput(InputBase):
    """Schema for associating an operating system with a site."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    operating_system_id: uuid.UUID
    site_id: uuid.UUID
    version: Optional[str] = None
    status: OperatingSystemSiteAssociationStatus = OperatingSystemSiteAssociationStatus.SYNCING
    created_by: Optional[uuid.UUID] = None


class OperatingSystemSiteAssociationUpdateInput(InputBase):
    """Schema for updating an operating system site association."""

    id: uuid.UUID
    version: Optional[str] = None
    status: Optional[OperatingSystemSiteAssociationStatus] = None
    is_missing_on_site: Optional[bool] = None


class OperatingSystemSiteAssociationFilterInput(InputBase):
    """Filter for listing operating system site associations."""

    operating_system_ids: Optional[List[uuid.UUID]] = None
    site_ids: Optional[List[uuid.UUID]] = None
    statuses: Optional[List[OperatingSystemSiteAssociationStatus]] = None
