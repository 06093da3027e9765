"""Unit tests for the paginator."""

from __future__ import annotations

import pytest
from sqlalchemy.dialects import postgresql
from sqlmodel import select

from baremetal_db.core.database.entities.vpcs import Vpc
from baremetal_db.core.database.errors import InvalidOrderByFieldError, InvalidOrderError, InvalidParamsError
from baremetal_db.core.database.paginator import (
    DEFAULT_LIMIT,
    ORDER_ASCENDING,
    ORDER_DESCENDING,
    OrderBy,
    PageInput,
    Paginator,
    new_default_order_by,
)

ORDER_BY_COLUMNS = {"name": Vpc.name, "created": Vpc.created}


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


class TestOrderBy:
    def test_order_is_normalized(self):
        assert OrderBy(field="name", order="desc").order == ORDER_DESCENDING

    def test_order_defaults_to_ascending(self):
        assert OrderBy(field="name").order == ORDER_ASCENDING
        assert new_default_order_by("created") == OrderBy(field="created", order="ASC")

    def test_invalid_order(self):
        with pytest.raises(InvalidOrderError):
            OrderBy(field="name", order="sideways")


class TestPaginatorCreate:
    async def test_defaults(self, mock_session):
        mock_session.result.scalar_one.return_value = 42

        paginator = await Paginator.create(mock_session, select(Vpc), None, ORDER_BY_COLUMNS, "created", Vpc.id)

        assert paginator.total == 42
        assert paginator.offset == 0
        assert paginator.limit == DEFAULT_LIMIT
        assert paginator.order_by.field == "created"
        sql = _sql(paginator.statement)
        assert "ORDER BY vpc.created ASC, vpc.id ASC" in sql
        assert "LIMIT" in sql and "OFFSET" in sql

    async def test_count_runs_before_paging(self, mock_session):
        await Paginator.create(mock_session, select(Vpc), PageInput(limit=5), ORDER_BY_COLUMNS, "created")

        count_stmt = mock_session.execute.await_args.args[0]
        sql = _sql(count_stmt)
        assert sql.startswith("SELECT count(*)")
        assert "LIMIT" not in sql

    async def test_descending_order(self, mock_session):
        page = PageInput(offset=10, limit=5, order_by=OrderBy(field="name", order="DESC"))

        paginator = await Paginator.create(mock_session, select(Vpc), page, ORDER_BY_COLUMNS, "created", Vpc.id)

        assert paginator.offset == 10
        assert paginator.limit == 5
        assert "ORDER BY vpc.name DESC, vpc.id ASC" in _sql(paginator.statement)

    async def test_invalid_field(self, mock_session):
        page = PageInput(order_by=OrderBy(field="labels"))

        with pytest.raises(InvalidOrderByFieldError) as exc_info:
            await Paginator.create(mock_session, select(Vpc), page, ORDER_BY_COLUMNS, "created")

        assert exc_info.value.field == "labels"
        assert set(exc_info.value.allowed) == {"name", "created"}
        mock_session.execute.assert_not_called()

    @pytest.mark.parametrize("page", [PageInput(offset=-1), PageInput(limit=-5)])
    async def test_negative_offset_or_limit(self, mock_session, page):
        with pytest.raises(InvalidParamsError):
            await Paginator.create(mock_session, select(Vpc), page, ORDER_BY_COLUMNS, "created")
