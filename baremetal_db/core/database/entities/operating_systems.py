"""
Operating system entity models.

An operating system is either an iPXE script or a disk image that can be
installed on machines. It is owned by an infrastructure provider (shared
with every tenant) or by a single tenant, and is made available on sites
through ``OperatingSystemSiteAssociation`` rows.
"""

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from ..base import Base, SoftDeleteColumns

if TYPE_CHECKING:
    from .infrastructure_providers import InfrastructureProvider
    from .tenants import Tenant


class OperatingSystemStatus(str, Enum):
    """Lifecycle state of an operating system."""

    PENDING = "Pending"
    PROVISIONING = "Provisioning"
    READY = "Ready"
    ERROR = "Error"
    DELETING = "Deleting"
    SYNCING = "Syncing"
    DEACTIVATED = "Deactivated"


class OperatingSystemType(str, Enum):
    """How the operating system is installed."""

    IPXE = "iPXE"
    IMAGE = "Image"


class OperatingSystemAuthType(str, Enum):
    """Authentication scheme used to download an image."""

    BASIC = "Basic"
    BEARER = "Bearer"


class OperatingSystemBase(Base):
    """Base fields for operating system."""

    name: str = Field(index=True)
    description: Optional[str] = Field(default=None)
    org: str = Field(index=True)
    infrastructure_provider_id: Optional[uuid.UUID] = Field(
        default=None, foreign_key="infrastructure_provider.id", index=True
    )
    tenant_id: Optional[uuid.UUID] = Field(default=None, foreign_key="tenant.id", index=True)
    controller_operating_system_id: Optional[uuid.UUID] = Field(default=None)
    version: Optional[str] = Field(default=None)
    type: str = Field(description="iPXE or Image")

    # Image based installs
    image_url: Optional[str] = Field(default=None)
    image_sha: Optional[str] = Field(default=None)
    image_auth_type: Optional[str] = Field(default=None)
    image_auth_token: Optional[str] = Field(default=None)
    image_disk: Optional[str] = Field(default=None)
    root_fs_id: Optional[str] = Field(default=None)
    root_fs_label: Optional[str] = Field(default=None)

    # iPXE based installs
    ipxe_script: Optional[str] = Field(default=None)

    user_data: Optional[str] = Field(default=None)
    is_cloud_init: bool = Field(default=False)
    allow_override: bool = Field(default=False)
    enable_block_storage: bool = Field(default=False)
    phone_home_enabled: bool = Field(default=False)
    is_active: bool = Field(default=True)
    deactivation_note: Optional[str] = Field(default=None)
    status: str = Field(default=OperatingSystemStatus.PENDING.value, index=True)


class OperatingSystem(OperatingSystemBase, SoftDeleteColumns, table=True):
    """Persistent operating system.

    Table: operating_system
    """

    __tablename__ = "operating_system"
    __table_args__ = ({"extend_existing": True},)

    infrastructure_provider: Optional["InfrastructureProvider"] = Relationship(
        sa_relationship_kwargs={"lazy": "raise"}
    )
    tenant: Optional["Tenant"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return f"OperatingSystem(id={self.id}, name={self.name}, type={self.type}, status={self.status})"


OPERATING_SYSTEM_ORDER_BY_FIELDS = ("name", "version", "status", "is_cloud_init", "created", "updated")
OPERATING_SYSTEM_RELATIONS = ("infrastructure_provider", "tenant")
