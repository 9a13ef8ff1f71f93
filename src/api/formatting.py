"""Plain-text renderings used by the ``*-string`` endpoints."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from src.domain.models.prices import DayRangeResult, NormalizedStats, SymbolStats
from src.domain.services.normalization import quantize

SYMBOL_NOT_FOUND = "The cryptocurrency was not found."
PRICE_DIGITS = 4
RANKING_DIGITS = 6
DAY_RANGE_DIGITS = 4


def format_price(value: Decimal) -> str:
    """At most four fraction digits, trailing zeros stripped, comma separator."""
    rounded = quantize(value, PRICE_DIGITS, rounding=ROUND_HALF_EVEN)
    with localcontext() as ctx:
        ctx.prec = len(rounded.as_tuple().digits)
        trimmed = rounded.normalize()
    return format(trimmed, "f").replace(".", ",")


def format_stats(stats: SymbolStats) -> str:
    return (
        f"Crypto {stats.symbol}:\n"
        f"Oldest Price: {format_price(stats.oldest_price)}\n"
        f"Newest Price: {format_price(stats.newest_price)}\n"
        f"Min Price: {format_price(stats.min_price)}\n"
        f"Max Price: {format_price(stats.max_price)}"
    )


def format_ranking(ranking: list[NormalizedStats]) -> str:
    return "".join(
        f"Crypto: {entry.symbol}  Normalized Value: "
        f"{quantize(entry.normalized_value, RANKING_DIGITS)}\n"
        for entry in ranking
    )


def format_day_range(result: DayRangeResult) -> str:
    if not result.found:
        return result.message or ""
    return (
        f"Crypto {result.symbol}:\n"
        f"Normalized Range: {quantize(result.normalized_value, DAY_RANGE_DIGITS)}"
    )
