"""Aggregation service: min / max price and oldest / newest observation.

Every reduction is a single pass over the sequence it is handed.  The caller
is responsible for passing observations of one symbol; homogeneity is not
checked here.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from src.domain.models.prices import PriceObservation, SymbolStats

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


class AggregationService:
    """Pure reductions over a sequence of price observations.

    Ties are resolved in favour of the first observation encountered, so
    results are deterministic for a fixed iteration order.

    The class is stateless; all inputs are passed per-call.
    """

    def min_price(self, observations: Sequence[PriceObservation]) -> Decimal:
        """Return the lowest price, or Decimal(0) when the sequence is empty."""
        if not observations:
            return ZERO
        return min(obs.price for obs in observations)

    def max_price(self, observations: Sequence[PriceObservation]) -> Decimal:
        """Return the highest price, or Decimal(0) when the sequence is empty."""
        if not observations:
            return ZERO
        return max(obs.price for obs in observations)

    def oldest(self, observations: Sequence[PriceObservation]) -> PriceObservation | None:
        """Return the observation with the smallest timestamp, or None when empty."""
        return min(observations, key=lambda obs: obs.timestamp, default=None)

    def newest(self, observations: Sequence[PriceObservation]) -> PriceObservation | None:
        """Return the observation with the largest timestamp, or None when empty."""
        return max(observations, key=lambda obs: obs.timestamp, default=None)

    def summarize(
        self,
        symbol: str,
        observations: Sequence[PriceObservation],
    ) -> SymbolStats | None:
        """Bundle the four reductions for one symbol.

        Returns None when there are no observations (symbol not found).
        """
        oldest = self.oldest(observations)
        newest = self.newest(observations)
        if oldest is None or newest is None:
            return None
        stats = SymbolStats(
            symbol=symbol,
            oldest=oldest,
            newest=newest,
            min_price=self.min_price(observations),
            max_price=self.max_price(observations),
        )
        logger.debug(
            "Summarized %d observation(s) for %s: min=%s max=%s",
            len(observations),
            symbol,
            stats.min_price,
            stats.max_price,
        )
        return stats
