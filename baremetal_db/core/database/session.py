"""
Global database session and engine management.

This module manages the process-wide AsyncEngine and async_sessionmaker
instances used by applications embedding the data access layer. Both are
created on first use from ``Settings`` so importing the package never opens
a connection pool.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from baremetal_db.core.config import settings
from baremetal_db.core.logging_config import get_logger

from .utils import create_engine, create_sessionmaker

logger = get_logger(__name__)

_engine: Optional[AsyncEngine] = None
_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """Return the global engine, creating it from settings on first use."""
    global _engine
    if _engine is None:
        _engine = create_engine(settings.resolved_database_url, echo=settings.database_echo)
        logger.info(f"Database engine created: dialect={_engine.dialect.name}")
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Return the global session factory bound to the global engine."""
    global _session_maker
    if _session_maker is None:
        _session_maker = create_sessionmaker(get_engine())
    return _session_maker


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with get_session_maker()() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose the global engine and forget the session factory."""
    global _engine, _session_maker
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_maker = None
