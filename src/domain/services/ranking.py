"""Ranking service: normalized range per symbol, sorted descending.

Pipeline:
    rank_by_symbol
        → group_by_symbol   (symbol → observations, first-seen order)
        → normalize_group   (min / max via AggregationService, ratio at RANKING_SCALE)
        → sort descending by normalized_value
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from src.domain.models.prices import NormalizedStats, PriceObservation
from src.domain.services.aggregation import AggregationService
from src.domain.services.normalization import RANKING_SCALE, normalized_range

logger = logging.getLogger(__name__)


class RankingService:
    """Pure computation service for grouping and ranking symbols.

    Ties on normalized_value keep the order in which the symbols were first
    seen in the input (Python's sort is stable, including with reverse=True).

    The class is stateless apart from its AggregationService collaborator.
    """

    def __init__(self, aggregation: AggregationService | None = None) -> None:
        self._aggregation = aggregation or AggregationService()

    @staticmethod
    def group_by_symbol(
        observations: Iterable[PriceObservation],
    ) -> dict[str, list[PriceObservation]]:
        """Partition observations by exact symbol string."""
        groups: dict[str, list[PriceObservation]] = {}
        for obs in observations:
            groups.setdefault(obs.symbol, []).append(obs)
        return groups

    def normalize_group(
        self,
        symbol: str,
        observations: Sequence[PriceObservation],
    ) -> NormalizedStats:
        min_price = self._aggregation.min_price(observations)
        max_price = self._aggregation.max_price(observations)
        return NormalizedStats(
            symbol=symbol,
            min_price=min_price,
            max_price=max_price,
            normalized_value=normalized_range(min_price, max_price, scale=RANKING_SCALE),
        )

    def normalize_groups(
        self,
        observations: Iterable[PriceObservation],
    ) -> list[NormalizedStats]:
        """One NormalizedStats per symbol, in first-seen order (unsorted)."""
        return [
            self.normalize_group(symbol, group)
            for symbol, group in self.group_by_symbol(observations).items()
        ]

    def rank_by_symbol(
        self,
        observations: Iterable[PriceObservation],
    ) -> list[NormalizedStats]:
        """Return one entry per symbol ordered by normalized_value descending.

        An empty input yields an empty ranking.
        """
        entries = self.normalize_groups(observations)
        ranked = sorted(entries, key=lambda entry: entry.normalized_value, reverse=True)
        logger.debug("Ranked %d symbol(s) by normalized range", len(ranked))
        return ranked
