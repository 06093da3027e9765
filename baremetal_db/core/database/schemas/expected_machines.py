"""
Input schemas for expected machine repository operations.
"""

from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from pydantic import Field

from .base import ClearInputBase, InputBase


class ExpectedMachineCreateInput(InputBase):
    """Schema for creating an expected machine."""

    id: Optional[uuid.UUID] = Field(default=None, description="Explicit ID, generated when unset")
    site_id: uuid.UUID
    bmc_mac_address: str
    chassis_serial_number: str
    sku_id: Optional[str] = None
    machine_id: Optional[str] = None
    fallback_dpu_serial_numbers: Optional[List[str]] = None
    labels: Optional[Dict[str, str]] = None
    created_by: Optional[uuid.UUID] = None


class ExpectedMachineUpdateInput(InputBase):
    """Schema for updating an expected machine."""

    id: uuid.UUID
    bmc_mac_address: Optional[str] = None
    chassis_serial_number: Optional[str] = None
    sku_id: Optional[str] = None
    machine_id: Optional[str] = None
    fallback_dpu_serial_numbers: Optional[List[str]] = None
    labels: Optional[Dict[str, str]] = None


class ExpectedMachineClearInput(ClearInputBase):
    """Schema for setting nullable expected machine columns to NULL."""

    id: uuid.UUID
    sku_id: bool = False
    machine_id: bool = False
    fallback_dpu_serial_numbers: bool = False
    labels: bool = False


class ExpectedMachineFilterInput(InputBase):
    """Filter for listing expected machines."""

    expected_machine_ids: Optional[List[uuid.UUID]] = None
    site_ids: Optional[List[uuid.UUID]] = None
    bmc_mac_addresses: Optional[List[str]] = None
    chassis_serial_numbers: Optional[List[str]] = None
    sku_ids: Optional[List[str]] = None
    machine_ids: Optional[List[str]] = None
    search_query: Optional[str] = None
