"""
Site entity models.

A site is a datacenter location run by an infrastructure provider. Every
networking and machine resource is scoped to a site. Besides its
registration and serial console details, a site carries three JSON
documents: feature configuration, location and contact.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from sqlmodel import Field, Relationship

from ..base import Base, JSONType, SoftDeleteColumns, TimestampType

if TYPE_CHECKING:
    from .infrastructure_providers import InfrastructureProvider


class SiteStatus(str, Enum):
    """Registration state of a site."""

    PENDING = "Pending"
    REGISTERED = "Registered"
    ERROR = "Error"


class SiteConfig(Base):
    """Feature switches stored in ``site.config``."""

    native_networking: bool = Field(default=False, description="Site manages networking natively")
    network_security_group: bool = Field(default=False, description="Network security groups are supported")
    nvlink_partition: bool = Field(default=False, description="NVLink partitioning is supported")
    max_network_security_group_rule_count: Optional[int] = Field(
        default=None, description="Upper bound of rules per network security group"
    )


class SiteLocation(Base):
    """Physical location stored in ``site.location``."""

    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class SiteContact(Base):
    """Point of contact stored in ``site.contact``."""

    email: Optional[str] = None


class SiteBase(Base):
    """Base fields for site."""

    name: str = Field(index=True, description="Site name")
    display_name: Optional[str] = Field(default=None, description="Human-readable site name")
    description: Optional[str] = Field(default=None, description="Site description")
    org: str = Field(index=True, description="Organization of the owning provider")
    infrastructure_provider_id: uuid.UUID = Field(foreign_key="infrastructure_provider.id", index=True)

    # Site controller / agent
    site_controller_version: Optional[str] = Field(default=None)
    site_agent_version: Optional[str] = Field(default=None)
    registration_token: Optional[str] = Field(default=None)
    registration_token_expiration: Optional[datetime] = Field(default=None, sa_type=TimestampType)
    is_infinity_enabled: bool = Field(default=False)

    # Serial console
    serial_console_hostname: Optional[str] = Field(default=None)
    is_serial_console_enabled: bool = Field(default=False)
    serial_console_idle_timeout: Optional[int] = Field(default=None, description="Idle timeout in seconds")
    serial_console_max_session_length: Optional[int] = Field(
        default=None, description="Maximum session length in seconds"
    )

    status: str = Field(default=SiteStatus.PENDING.value, index=True)

    # JSON documents
    config: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSONType)
    location: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSONType)
    contact: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSONType)


class Site(SiteBase, SoftDeleteColumns, table=True):
    """Persistent site.

    Table: site
    """

    __tablename__ = "site"
    __table_args__ = ({"extend_existing": True},)

    infrastructure_provider: Optional["InfrastructureProvider"] = Relationship(
        sa_relationship_kwargs={"lazy": "raise"}
    )

    def get_config(self) -> SiteConfig:
        """Get the feature configuration, defaults when unset."""
        return SiteConfig.model_validate(self.config or {})

    def get_location(self) -> Optional[SiteLocation]:
        """Get the location document, if any."""
        return SiteLocation.model_validate(self.location) if self.location is not None else None

    def get_contact(self) -> Optional[SiteContact]:
        """Get the contact document, if any."""
        return SiteContact.model_validate(self.contact) if self.contact is not None else None

    def __repr__(self) -> str:
        return f"Site(id={self.id}, name={self.name}, status={self.status})"


SITE_ORDER_BY_FIELDS = ("name", "display_name", "status", "created", "updated", "location", "contact")
SITE_RELATIONS = ("infrastructure_provider",)
