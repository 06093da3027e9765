"""
Explicit transactions and Postgres transaction-level advisory locks.

Repositories commit after every mutation by default. When several mutations
must succeed or fail together, open a transaction with ``begin_transaction``
and build the repositories with ``auto_commit=False`` on the yielded session:

    async with begin_transaction(session_factory) as session:
        repos = build_sql_repos_from_session(session=session, auto_commit=False)
        await acquire_advisory_lock(session, get_advisory_lock_id(str(site_id)))
        ...

Advisory locks taken here are transaction scoped (``pg_advisory_xact_lock``)
and released automatically on commit or rollback.
"""

from __future__ import annotations

import asyncio
import hashlib
import random
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from baremetal_db.core.config import settings
from baremetal_db.core.logging_config import get_logger

from .errors import AdvisoryLockError, InvalidParamsError

logger = get_logger(__name__)

DEFAULT_LOCK_RETRIES = 3
DEFAULT_LOCK_RETRY_DELAY = 0.3  # seconds
DEFAULT_LOCK_RETRY_MAX_JITTER = 0.1  # seconds

_LOCK_ID_MASK = 0x7FFFFFFFFFFFFFFF


def get_advisory_lock_id(value: str) -> int:
    """Derive a stable advisory lock id from a string.

    The id is the first 8 bytes of the SHA-256 digest, masked to 63 bits so
    it always fits Postgres' signed ``bigint``.
    """
    digest = hashlib.sha256(value.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") & _LOCK_ID_MASK


def _is_postgres(session: AsyncSession) -> bool:
    return session.bind is not None and session.bind.dialect.name == "postgresql"


@asynccontextmanager
async def begin_transaction(
    session_factory: async_sessionmaker[AsyncSession],
    lock_timeout_seconds: Optional[int] = None,
) -> AsyncIterator[AsyncSession]:
    """Open a session inside a transaction.

    On Postgres the transaction gets a ``lock_timeout`` so a blocked row or
    advisory lock fails the transaction instead of hanging forever.

    Args:
        session_factory: Factory producing the session
        lock_timeout_seconds: Lock timeout in seconds, at least 1; defaults to the configured one

    Yields:
        Session with an open transaction, committed on success and rolled
        back when the block raises
    """
    timeout = settings.lock_timeout_seconds if lock_timeout_seconds is None else lock_timeout_seconds
    if timeout < 1:
        raise InvalidParamsError(f"Lock timeout must be at least 1 second: {timeout}")
    async with session_factory() as session:
        async with session.begin():
            if _is_postgres(session):
                await session.execute(text(f"SET LOCAL lock_timeout = '{int(timeout)}s'"))
            yield session


async def acquire_advisory_lock(session: AsyncSession, lock_id: int, blocking: bool = True) -> None:
    """Take a transaction-scoped advisory lock.

    Args:
        session: Session with an open transaction
        lock_id: Lock identifier, see ``get_advisory_lock_id``
        blocking: Wait for the lock instead of failing immediately

    Raises:
        AdvisoryLockError: If ``blocking`` is False and the lock is held elsewhere
    """
    if blocking:
        await session.execute(text("SELECT pg_advisory_xact_lock(:lock_id)"), {"lock_id": lock_id})
        logger.debug(f"Acquired advisory lock {lock_id}")
        return

    result = await session.execute(text("SELECT pg_try_advisory_xact_lock(:lock_id)"), {"lock_id": lock_id})
    if not result.scalar_one():
        raise AdvisoryLockError(lock_id)
    logger.debug(f"Acquired advisory lock {lock_id}")


async def try_acquire_advisory_lock(
    session: AsyncSession,
    lock_id: int,
    retries: int = DEFAULT_LOCK_RETRIES,
    delay: float = DEFAULT_LOCK_RETRY_DELAY,
    jitter: float = DEFAULT_LOCK_RETRY_MAX_JITTER,
) -> None:
    """Take an advisory lock without blocking, retrying with backoff.

    Each retry waits ``delay * 2**attempt`` plus up to ``jitter`` seconds.

    Args:
        session: Session with an open transaction
        lock_id: Lock identifier
        retries: Total number of attempts
        delay: Base delay between attempts, in seconds
        jitter: Maximum random delay added to each wait, in seconds

    Raises:
        AdvisoryLockError: If the lock is still held after the last attempt
    """
    attempts = max(retries, 1)
    for attempt in range(attempts):
        try:
            await acquire_advisory_lock(session, lock_id, blocking=False)
            return
        except AdvisoryLockError:
            if attempt == attempts - 1:
                raise
            wait = delay * (2**attempt) + random.uniform(0, jitter)
            logger.warning(f"Advisory lock {lock_id} busy, retrying in {wait:.2f}s ({attempt + 1}/{attempts})")
            await asyncio.sleep(wait)
