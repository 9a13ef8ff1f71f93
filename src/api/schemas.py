"""Response models for the crypto API.

Decimal fields serialize to JSON strings so prices and ratios keep their
exact decimal digits.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from src.domain.models.prices import DayRangeResult, NormalizedStats, SymbolStats


class SymbolStatsResponse(BaseModel):
    symbol: str
    oldest_price: Decimal
    newest_price: Decimal
    min_price: Decimal
    max_price: Decimal
    oldest_timestamp: int
    newest_timestamp: int

    @classmethod
    def from_domain(cls, stats: SymbolStats) -> SymbolStatsResponse:
        return cls(
            symbol=stats.symbol,
            oldest_price=stats.oldest_price,
            newest_price=stats.newest_price,
            min_price=stats.min_price,
            max_price=stats.max_price,
            oldest_timestamp=stats.oldest.timestamp,
            newest_timestamp=stats.newest.timestamp,
        )


class NormalizedRangeResponse(BaseModel):
    symbol: str
    normalized_value: Decimal
    min_price: Decimal
    max_price: Decimal

    @classmethod
    def from_domain(cls, entry: NormalizedStats) -> NormalizedRangeResponse:
        return cls(
            symbol=entry.symbol,
            normalized_value=entry.normalized_value,
            min_price=entry.min_price,
            max_price=entry.max_price,
        )


class DayRangeResponse(BaseModel):
    day: date
    symbol: str
    normalized_value: Decimal

    @classmethod
    def from_domain(cls, result: DayRangeResult) -> DayRangeResponse:
        if not result.found or result.day is None:
            raise ValueError(f"cannot build a response from a {result.status.value} result")
        return cls(day=result.day, symbol=result.symbol, normalized_value=result.normalized_value)
