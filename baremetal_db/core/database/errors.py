"""Error types for the database layer.

Defines a small hierarchy of exceptions raised by repositories, the
paginator and the transaction helpers. Driver errors (integrity violations,
connection failures) are not wrapped and propagate as raised by SQLAlchemy.
"""

from __future__ import annotations

from typing import Any, Iterable


class DatabaseError(Exception):
    """Base error for all data access exceptions."""


class DoesNotExistError(DatabaseError):
    """Raised when a record looked up by its identifier is not found."""

    def __init__(self, entity: str, identifier: Any) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} does not exist: '{identifier}'")


class InvalidParamsError(DatabaseError):
    """Raised when filter or input parameters are missing or contradictory."""


class InvalidOrderByFieldError(InvalidParamsError):
    """Raised when a listing is ordered by a field that is not allowed."""

    def __init__(self, field: str, allowed: Iterable[str]) -> None:
        self.field = field
        self.allowed = tuple(allowed)
        super().__init__(f"Invalid order by field '{field}', must be one of: {', '.join(self.allowed)}")


class InvalidOrderError(InvalidParamsError):
    """Raised when an order direction is neither ASC nor DESC."""

    def __init__(self, order: str) -> None:
        self.order = order
        super().__init__(f"Invalid order '{order}', must be ASC or DESC")


class InvalidValueError(DatabaseError):
    """Raised when a value is outside of its enumerated set."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for '{field}': '{value}'")


class RecordCountMismatchError(DatabaseError):
    """Raised when a bulk operation reads back a different number of rows than it wrote."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} records, found {actual}")


class AdvisoryLockError(DatabaseError):
    """Raised when a non-blocking transaction advisory lock could not be acquired."""

    def __init__(self, lock_id: int) -> None:
        self.lock_id = lock_id
        super().__init__(f"Failed to acquire transaction advisory lock: {lock_id}")
