"""Tests for SqlPriceRepository: mapping, queries, bulk_upsert edge cases."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock

from sqlalchemy.dialects import postgresql

from src.domain.models.prices import PriceObservation
from src.infrastructure.persistence.repositories.prices import SqlPriceRepository


def _orm_row(**overrides):
    defaults = {"symbol": "BTC", "timestamp": 1641009600000, "price": Decimal("46813.21")}
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _obs(**overrides):
    defaults = dict(symbol="BTC", timestamp=1641009600000, price=Decimal("46813.21"))
    defaults.update(overrides)
    return PriceObservation(**defaults)


def _session_returning(rows):
    session = AsyncMock()
    session.execute.return_value = SimpleNamespace(scalars=lambda: iter(rows))
    return session


def _compiled_sql(session) -> str:
    stmt = session.execute.call_args.args[0]
    return str(stmt.compile(dialect=postgresql.dialect()))


# --- _to_domain mapping ---

def test_to_domain_maps_symbol():
    assert SqlPriceRepository._to_domain(_orm_row(symbol="ETH")).symbol == "ETH"


def test_to_domain_maps_timestamp():
    assert SqlPriceRepository._to_domain(_orm_row(timestamp=5)).timestamp == 5


def test_to_domain_keeps_decimal_price():
    assert SqlPriceRepository._to_domain(_orm_row(price=Decimal("0.1"))).price == Decimal("0.1")


# --- find_* ---

async def test_find_by_symbol_maps_rows():
    session = _session_returning([_orm_row(), _orm_row(timestamp=1641031200000)])
    result = await SqlPriceRepository(session).find_by_symbol("BTC")
    assert [o.timestamp for o in result] == [1641009600000, 1641031200000]


async def test_find_by_symbol_filters_on_symbol():
    session = _session_returning([])
    await SqlPriceRepository(session).find_by_symbol("BTC")
    assert "crypto_prices.symbol = " in _compiled_sql(session)


async def test_find_by_timestamp_range_uses_between():
    session = _session_returning([])
    await SqlPriceRepository(session).find_by_timestamp_range(1, 2)
    assert "BETWEEN" in _compiled_sql(session)


async def test_find_all_orders_by_symbol_then_timestamp():
    session = _session_returning([])
    await SqlPriceRepository(session).find_all()
    order_by = _compiled_sql(session).split("ORDER BY", 1)[1]
    assert order_by.index("symbol") < order_by.index("timestamp")


async def test_find_all_empty_store():
    assert await SqlPriceRepository(_session_returning([])).find_all() == []


# --- bulk_upsert ---

async def test_bulk_upsert_empty_list_returns_zero():
    session = AsyncMock()
    assert await SqlPriceRepository(session).bulk_upsert([]) == 0
    session.execute.assert_not_called()


async def test_bulk_upsert_returns_rowcount():
    session = AsyncMock()
    session.execute.return_value = SimpleNamespace(rowcount=2)
    result = await SqlPriceRepository(session).bulk_upsert([_obs(), _obs(timestamp=1)])
    assert result == 2


async def test_bulk_upsert_updates_price_on_conflict():
    session = AsyncMock()
    session.execute.return_value = SimpleNamespace(rowcount=1)
    await SqlPriceRepository(session).bulk_upsert([_obs()])
    sql = _compiled_sql(session)
    assert "ON CONFLICT" in sql
    assert "DO UPDATE SET price = excluded.price" in sql


async def test_bulk_upsert_collapses_duplicate_keys():
    session = AsyncMock()
    session.execute.return_value = SimpleNamespace(rowcount=1)
    await SqlPriceRepository(session).bulk_upsert([_obs(), _obs(price=Decimal("1"))])
    assert "), (" not in _compiled_sql(session)
