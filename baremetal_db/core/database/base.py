"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel:

- ``Base``: root of every entity and schema model
- ``AuditColumns``: ``id``, ``created``, ``updated`` and ``created_by``
- ``SoftDeleteColumns``: ``AuditColumns`` plus the ``deleted`` marker
- column types that map to native Postgres types (JSONB, TEXT[]) and fall
  back to plain JSON on SQLite so the same models work in unit tests
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlmodel import Field, SQLModel

# JSONB on Postgres, JSON elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")

# TEXT[] on Postgres, JSON list elsewhere
StringArrayType = JSON().with_variant(ARRAY(String()), "postgresql")

TimestampType = DateTime(timezone=True)


def utc_now() -> datetime:
    """Get current UTC datetime as an aware datetime."""
    return datetime.now(timezone.utc)


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


class AuditColumns(Base):
    """Columns shared by every table."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created: datetime = Field(default_factory=utc_now, sa_type=TimestampType, nullable=False)
    updated: datetime = Field(default_factory=utc_now, sa_type=TimestampType, nullable=False)
    created_by: Optional[uuid.UUID] = Field(default=None, description="User that created the record")


class SoftDeleteColumns(AuditColumns):
    """Audit columns plus the soft-delete marker.

    Rows with ``deleted`` set are invisible to every repository read.
    """

    deleted: Optional[datetime] = Field(default=None, sa_type=TimestampType, nullable=True, index=True)
