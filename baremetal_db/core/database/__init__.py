"""
Data access layer for bare-metal infrastructure management.

This package provides a unified location for all database entities and
repositories, one module per table.

Structure:
- entities/: SQLModel table models, status enums, order-by and relation names
- schemas/: Pydantic input models for repository operations
- repositories/: Async repositories and the repository bundle
- paginator.py: Offset/limit pagination with totals and ordering
- search.py: Full-text and ILIKE search predicates
- transaction.py: Transactions with lock timeouts and advisory locks
- session.py: Global engine and session factory management
- utils.py: Engine and session factory helpers
"""

from .base import Base
from .errors import (
    AdvisoryLockError,
    DatabaseError,
    DoesNotExistError,
    InvalidOrderByFieldError,
    InvalidOrderError,
    InvalidParamsError,
    InvalidValueError,
    RecordCountMismatchError,
)
from .paginator import OrderBy, PageInput
from .repositories.bundle import SqlRepoBundle, build_sql_repos, build_sql_repos_from_session
from .session import dispose_engine, get_engine, get_session, get_session_maker
from .transaction import acquire_advisory_lock, begin_transaction, get_advisory_lock_id, try_acquire_advisory_lock
from .utils import create_all, create_engine, create_sessionmaker, drop_all

__all__ = [
    "AdvisoryLockError",
    "Base",
    "DatabaseError",
    "DoesNotExistError",
    "InvalidOrderByFieldError",
    "InvalidOrderError",
    "InvalidParamsError",
    "InvalidValueError",
    "OrderBy",
    "PageInput",
    "RecordCountMismatchError",
    "SqlRepoBundle",
    "acquire_advisory_lock",
    "begin_transaction",
    "build_sql_repos",
    "build_sql_repos_from_session",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_engine",
    "drop_all",
    "get_advisory_lock_id",
    "get_engine",
    "get_session",
    "get_session_maker",
    "try_acquire_advisory_lock",
]
