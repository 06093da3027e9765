"""
Tenant / site association entity models.

A tenant site row means the tenant has access to the site, together with
per-site options such as serial console access and a free-form config map.
"""

import uuid
from typing import TYPE_CHECKING, Any, Dict, Optional

from sqlmodel import Field, Relationship

from ..base import Base, JSONType, SoftDeleteColumns

if TYPE_CHECKING:
    from .sites import Site
    from .tenants import Tenant


class TenantSiteBase(Base):
    """Base fields for tenant site."""

    tenant_id: uuid.UUID = Field(foreign_key="tenant.id", index=True)
    tenant_org: str = Field(index=True)
    site_id: uuid.UUID = Field(foreign_key="site.id", index=True)
    enable_serial_console: bool = Field(default=False)
    config: Dict[str, Any] = Field(default_factory=dict, sa_type=JSONType)


class TenantSite(TenantSiteBase, SoftDeleteColumns, table=True):
    """Persistent tenant site association.

    Table: tenant_site
    """

    __tablename__ = "tenant_site"
    __table_args__ = ({"extend_existing": True},)

    tenant: Optional["Tenant"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})
    site: Optional["Site"] = Relationship(sa_relationship_kwargs={"lazy": "raise"})

    def __repr__(self) -> str:
        return f"TenantSite(id={self.id}, tenant_id={self.tenant_id}, site_id={self.site_id})"


TENANT_SITE_ORDER_BY_FIELDS = ("created", "updated")
TENANT_SITE_RELATIONS = ("tenant", "site")
