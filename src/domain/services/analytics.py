"""Crypto analytics service: the read operations exposed to the API layer.

Each operation fetches the rows it needs from a PriceRepository and hands
the materialized list to the pure services (aggregation, ranking, day
window).  Nothing is cached between calls.

    stats_for              → SymbolStats | None
    ranked_by_symbol       → list[NormalizedStats] (descending)
    top_ranked             → NormalizedStats | None
    highest_range_for_day  → DayRangeResult (FOUND / NOT_FOUND / INVALID_INPUT)
"""

from __future__ import annotations

import logging

from src.domain.models.prices import DayRangeResult, NormalizedStats, SymbolStats
from src.domain.repositories.prices import PriceRepository
from src.domain.services.aggregation import AggregationService
from src.domain.services.day_window import (
    DayWindowService,
    InvalidDateError,
    day_bounds,
    parse_day,
)
from src.domain.services.ranking import RankingService

logger = logging.getLogger(__name__)


class CryptoAnalyticsService:
    """Orchestrates repository reads and pure computations per request.

    Not-found outcomes are returned (None or QueryStatus.NOT_FOUND), never
    raised; a malformed day string yields QueryStatus.INVALID_INPUT.
    """

    def __init__(
        self,
        prices: PriceRepository,
        aggregation: AggregationService | None = None,
        ranking: RankingService | None = None,
        day_window: DayWindowService | None = None,
    ) -> None:
        self._prices = prices
        self._aggregation = aggregation or AggregationService()
        self._ranking = ranking or RankingService(self._aggregation)
        self._day_window = day_window or DayWindowService(self._ranking)

    async def stats_for(self, symbol: str) -> SymbolStats | None:
        """Oldest / newest / min / max for one symbol, or None if it has no records."""
        logger.info("Fetching price statistics for symbol %s", symbol)
        observations = await self._prices.find_by_symbol(symbol)
        stats = self._aggregation.summarize(symbol, observations)
        if stats is None:
            logger.info("No records found for symbol %s", symbol)
        return stats

    async def ranked_by_symbol(self) -> list[NormalizedStats]:
        logger.info("Ranking all symbols by normalized range")
        observations = await self._prices.find_all()
        return self._ranking.rank_by_symbol(observations)

    async def top_ranked(self) -> NormalizedStats | None:
        """The symbol with the highest normalized range overall, or None without data."""
        ranking = await self.ranked_by_symbol()
        return ranking[0] if ranking else None

    async def highest_range_for_day(self, day_text: str) -> DayRangeResult:
        """Resolve a YYYY-MM-DD day and return its highest-normalized-range symbol."""
        logger.info("Fetching highest normalized range for day %s", day_text)
        try:
            day = parse_day(day_text)
        except InvalidDateError as exc:
            logger.info("Rejected day %r: %s", day_text, exc)
            return DayRangeResult.invalid_input(str(exc))

        start, end = day_bounds(day)
        observations = await self._prices.find_by_timestamp_range(start, end)
        return self._day_window.highest_range(day, observations)
