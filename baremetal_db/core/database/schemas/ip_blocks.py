"""
Input schemas for IP block repository operations.
"""

from __future__ import annotations

import uuid
from typing import List, Optional

from pydantic import Field

from ..entities.ip_blocks import IPBlockProtocolVersion, IPBlockRoutingType, IPBlockStatus
from .base import ClearInputBase, InputBase


class IPBlockCreateInput(InputBase):
    """Schema for creating an IP block."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    name: str
    description: Optional[str] = None
    site_id: uuid.UUID
    infrastructure_provider_id: uuid.UUID
    tenant_id: Optional[uuid.UUID] = None
    routing_type: IPBlockRoutingType
    prefix: str
    prefix_length: int = Field(ge=0, le=128)
    protocol_version: IPBlockProtocolVersion
    full_grant: bool = False
    status: IPBlockStatus = IPBlockStatus.PENDING
    created_by: Optional[uuid.UUID] = None


class IPBlockUpdateInput(InputBase):
    """Schema for updating an IP block."""

    id: uuid.UUID
    name: Optional[str] = None
    description: Optional[str] = None
    tenant_id: Optional[uuid.UUID] = None
    routing_type: Optional[IPBlockRoutingType] = None
    prefix: Optional[str] = None
    prefix_length: Optional[int] = Field(default=None, ge=0, le=128)
    protocol_version: Optional[IPBlockProtocolVersion] = None
    full_grant: Optional[bool] = None
    status: Optional[IPBlockStatus] = None


class IPBlockClearInput(ClearInputBase):
    """Schema for setting nullable IP block columns to NULL."""

    id: uuid.UUID
    description: bool = False
    tenant_id: bool = False


class IPBlockFilterInput(InputBase):
    """Filter for listing IP blocks.

    ``exclude_derived`` keeps only provider-owned blocks (no tenant) and
    cannot be combined with ``tenant_ids``.
    """

    ip_block_ids: Optional[List[uuid.UUID]] = None
    names: Optional[List[str]] = None
    site_ids: Optional[List[uuid.UUID]] = None
    infrastructure_provider_ids: Optional[List[uuid.UUID]] = None
    tenant_ids: Optional[List[uuid.UUID]] = None
    routing_types: Optional[List[IPBlockRoutingType]] = None
    prefixes: Optional[List[str]] = None
    prefix_lengths: Optional[List[int]] = None
    protocol_versions: Optional[List[IPBlockProtocolVersion]] = None
    full_grant: Optional[bool] = None
    statuses: Optional[List[IPBlockStatus]] = None
    exclude_derived: bool = False
    search_query: Optional[str] = None
