"""Price series domain models.

PriceObservation: a single price observation for one symbol at one instant.
SymbolStats     : oldest / newest / min / max summary of one symbol's series.
NormalizedStats : min / max and the normalized range ratio for one symbol.
DayRangeResult  : tagged outcome of the per-day highest-range query.

All are immutable value objects created per query; only PriceObservation is
persisted (by the ingestion loader, never by the analytics core).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import QueryStatus


class PriceObservation(BaseModel):
    """Price of one symbol at one instant.

    timestamp is milliseconds since the Unix epoch (UTC).
    The natural key is (symbol, timestamp); a later write with the same key
    replaces the price (upsert semantics owned by the ingestion loader).
    Symbols are compared by exact string match; no case normalization.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(min_length=1)
    timestamp: int = Field(ge=0)
    price: Decimal = Field(ge=0)


class SymbolStats(BaseModel):
    """Descriptive statistics for one symbol's full series."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    oldest: PriceObservation
    newest: PriceObservation
    min_price: Decimal
    max_price: Decimal

    @property
    def oldest_price(self) -> Decimal:
        return self.oldest.price

    @property
    def newest_price(self) -> Decimal:
        return self.newest.price


class NormalizedStats(BaseModel):
    """Normalized range of one symbol: (max_price - min_price) / min_price.

    normalized_value is 0 when min_price is 0 (division guard).
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    min_price: Decimal
    max_price: Decimal
    normalized_value: Decimal = Field(ge=0)


class DayRangeResult(BaseModel):
    """Outcome of the highest-normalized-range-for-a-day query.

    status = FOUND          → symbol is the day's winner, message is None
    status = NOT_FOUND      → the day has no observations; symbol is ""
    status = INVALID_INPUT  → the day string could not be parsed; symbol is ""

    normalized_value is always 0 unless status is FOUND.
    """

    model_config = ConfigDict(frozen=True)

    status: QueryStatus
    day: date | None = None
    symbol: str = ""
    normalized_value: Decimal = Decimal(0)
    message: str | None = None

    @model_validator(mode="after")
    def _status_and_fields_consistent(self) -> DayRangeResult:
        if self.status == QueryStatus.FOUND:
            if not self.symbol:
                raise ValueError("symbol is required when status is FOUND")
            if self.message is not None:
                raise ValueError("message must be None when status is FOUND")
        else:
            if self.symbol:
                raise ValueError(f"symbol must be empty when status is {self.status}")
            if not self.message:
                raise ValueError(f"message is required (non-empty) when status is {self.status}")
        return self

    @property
    def found(self) -> bool:
        return self.status == QueryStatus.FOUND

    @classmethod
    def winner(cls, day: date, symbol: str, normalized_value: Decimal) -> DayRangeResult:
        return cls(
            status=QueryStatus.FOUND,
            day=day,
            symbol=symbol,
            normalized_value=normalized_value,
        )

    @classmethod
    def not_found(cls, day: date) -> DayRangeResult:
        return cls(
            status=QueryStatus.NOT_FOUND,
            day=day,
            message="No records found for the specified date.",
        )

    @classmethod
    def invalid_input(cls, reason: str) -> DayRangeResult:
        return cls(status=QueryStatus.INVALID_INPUT, message=reason)
