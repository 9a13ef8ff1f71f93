"""Price repository interface.

PriceRepository is a specialised time-series interface: price observations
have no single-entity CRUD lifecycle.  They are ingested in bulk and queried
by symbol, by timestamp range, or in full.

The analytics core only ever calls the three find_* methods; bulk_upsert is
reserved for the ingestion loader.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.prices import PriceObservation


class PriceRepository(ABC):
    """Read/write interface for per-symbol price observations."""

    @abstractmethod
    async def find_by_symbol(self, symbol: str) -> list[PriceObservation]:
        """Return every observation for the symbol (exact match) in timestamp order."""

    @abstractmethod
    async def find_by_timestamp_range(self, start: int, end: int) -> list[PriceObservation]:
        """Return observations with start <= timestamp <= end, ordered by (symbol, timestamp)."""

    @abstractmethod
    async def find_all(self) -> list[PriceObservation]:
        """Return the full dataset ordered by (symbol, timestamp)."""

    @abstractmethod
    async def bulk_upsert(self, observations: list[PriceObservation]) -> int:
        """Insert observations, replacing the price on (symbol, timestamp) conflict.

        Returns the number of rows affected.
        """
