"""Tests for the plain-text renderings in src/api/formatting.py."""

from datetime import date
from decimal import Decimal

import pytest

from src.api.formatting import format_day_range, format_price, format_ranking, format_stats
from src.domain.models.prices import DayRangeResult, NormalizedStats, PriceObservation, SymbolStats


@pytest.mark.parametrize(
    "value, expected",
    [
        ("46813.21", "46813,21"),
        ("46813.2100", "46813,21"),
        ("100.00", "100"),
        ("0.123456", "0,1235"),
        ("0.00001", "0"),
        ("1E+3", "1000"),
    ],
)
def test_format_price(value, expected):
    assert format_price(Decimal(value)) == expected


def test_format_price_beyond_default_context_precision():
    assert format_price(Decimal("1234567890123456789012345.67895")) == "1234567890123456789012345,679"


def test_format_stats():
    stats = SymbolStats(
        symbol="BTC",
        oldest=PriceObservation(symbol="BTC", timestamp=1, price=Decimal("46813.21")),
        newest=PriceObservation(symbol="BTC", timestamp=3, price=Decimal("41743.58")),
        min_price=Decimal("41743.58"),
        max_price=Decimal("46813.21"),
    )
    assert format_stats(stats) == (
        "Crypto BTC:\n"
        "Oldest Price: 46813,21\n"
        "Newest Price: 41743,58\n"
        "Min Price: 41743,58\n"
        "Max Price: 46813,21"
    )


def test_format_ranking_one_line_per_symbol():
    ranking = [
        NormalizedStats(symbol="ETH", min_price=Decimal(1), max_price=Decimal(2),
                        normalized_value=Decimal("1.0000000000")),
        NormalizedStats(symbol="BTC", min_price=Decimal(3), max_price=Decimal(4),
                        normalized_value=Decimal("0.3333333333")),
    ]
    assert format_ranking(ranking) == (
        "Crypto: ETH  Normalized Value: 1.000000\n"
        "Crypto: BTC  Normalized Value: 0.333333\n"
    )


def test_format_ranking_empty():
    assert format_ranking([]) == ""


def test_format_day_range_found():
    result = DayRangeResult.winner(date(2022, 1, 1), "DOGE", Decimal("0.2502937720"))
    assert format_day_range(result) == "Crypto DOGE:\nNormalized Range: 0.2503"


def test_format_day_range_not_found_uses_message():
    result = DayRangeResult.not_found(date(2022, 1, 1))
    assert format_day_range(result) == "No records found for the specified date."
