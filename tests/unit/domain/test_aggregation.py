"""Unit tests for AggregationService."""

from decimal import Decimal

import pytest

from src.domain.models.prices import PriceObservation
from src.domain.services.aggregation import AggregationService

T0, T1, T2 = 1641009600000, 1641031200000, 1641063600000


@pytest.fixture
def service() -> AggregationService:
    return AggregationService()


@pytest.fixture
def btc_series() -> list[PriceObservation]:
    """Three BTC observations, deliberately out of timestamp order."""
    return [
        PriceObservation(symbol="BTC", timestamp=T1, price=Decimal("46797.61")),
        PriceObservation(symbol="BTC", timestamp=T2, price=Decimal("41743.58")),
        PriceObservation(symbol="BTC", timestamp=T0, price=Decimal("46813.21")),
    ]


class TestReductions:
    def test_min_price(self, service, btc_series):
        assert service.min_price(btc_series) == Decimal("41743.58")

    def test_max_price(self, service, btc_series):
        assert service.max_price(btc_series) == Decimal("46813.21")

    def test_oldest(self, service, btc_series):
        assert service.oldest(btc_series).price == Decimal("46813.21")

    def test_newest(self, service, btc_series):
        assert service.newest(btc_series).price == Decimal("41743.58")

    def test_bounds_hold_for_every_observation(self, service, btc_series):
        lo, hi = service.min_price(btc_series), service.max_price(btc_series)
        first, last = service.oldest(btc_series), service.newest(btc_series)
        for obs in btc_series:
            assert lo <= obs.price <= hi
            assert first.timestamp <= obs.timestamp <= last.timestamp


class TestEmptyInput:
    def test_min_price_is_zero(self, service):
        assert service.min_price([]) == Decimal(0)

    def test_max_price_is_zero(self, service):
        assert service.max_price([]) == Decimal(0)

    def test_oldest_is_none(self, service):
        assert service.oldest([]) is None

    def test_newest_is_none(self, service):
        assert service.newest([]) is None

    def test_summarize_is_none(self, service):
        assert service.summarize("BTC", []) is None


class TestTies:
    def test_oldest_tie_returns_first_encountered(self, service):
        a = PriceObservation(symbol="BTC", timestamp=T0, price=Decimal("1"))
        b = PriceObservation(symbol="BTC", timestamp=T0, price=Decimal("2"))
        assert service.oldest([a, b]) is a

    def test_newest_tie_returns_first_encountered(self, service):
        a = PriceObservation(symbol="BTC", timestamp=T2, price=Decimal("1"))
        b = PriceObservation(symbol="BTC", timestamp=T2, price=Decimal("2"))
        assert service.newest([a, b]) is a


def test_summarize_bundles_all_four(service, btc_series):
    stats = service.summarize("BTC", btc_series)
    assert stats.symbol == "BTC"
    assert stats.oldest_price == Decimal("46813.21")
    assert stats.newest_price == Decimal("41743.58")
    assert stats.min_price == Decimal("41743.58")
    assert stats.max_price == Decimal("46813.21")


def test_single_observation_is_its_own_min_max_oldest_newest(service):
    obs = PriceObservation(symbol="ETH", timestamp=T0, price=Decimal("3715.32"))
    stats = service.summarize("ETH", [obs])
    assert stats.min_price == stats.max_price == Decimal("3715.32")
    assert stats.oldest is stats.newest is obs
