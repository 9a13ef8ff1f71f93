"""Day-window query: the symbol with the highest normalized range on one UTC day.

Day strings are ISO dates, YYYY-MM-DD, zero-padded.  Any other shape
(including DD-MM-YYYY) is rejected with InvalidDateError.

The window for a day is [00:00:00.000, 23:59:59.000] UTC, both ends
inclusive, expressed in epoch milliseconds.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import date, datetime, time, timedelta, timezone

from src.domain.models.prices import DayRangeResult, PriceObservation
from src.domain.services.ranking import RankingService

logger = logging.getLogger(__name__)

DAY_FORMAT = "YYYY-MM-DD"

_ISO_DAY = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_END_OF_DAY = time(23, 59, 59)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class InvalidDateError(ValueError):
    """Raised when a day string is not a valid YYYY-MM-DD calendar date."""


def parse_day(text: str) -> date:
    """Parse a strict ISO calendar date.

    Raises:
        InvalidDateError: If text is not exactly YYYY-MM-DD or names no real day.
    """
    if not _ISO_DAY.fullmatch(text):
        raise InvalidDateError(f"Invalid date format {text!r}. Please use {DAY_FORMAT}.")
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date {text!r}: {exc}") from exc


def to_millis(moment: datetime) -> int:
    """Epoch milliseconds for a timezone-aware datetime."""
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def from_millis(millis: int) -> datetime:
    """UTC datetime for an epoch-millisecond timestamp."""
    return _EPOCH + timedelta(milliseconds=millis)


def day_bounds(day: date) -> tuple[int, int]:
    """Return (start_ms, end_ms) of the UTC day, both inclusive."""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    end = datetime.combine(day, _END_OF_DAY, tzinfo=timezone.utc)
    return to_millis(start), to_millis(end)


class DayWindowService:
    """Select the single highest-normalized-range symbol among one day's observations.

    Restricting the input to a day's window and taking the first entry of
    RankingService.rank_by_symbol gives the same answer: both keep the
    first-seen symbol on ties.
    """

    def __init__(self, ranking: RankingService | None = None) -> None:
        self._ranking = ranking or RankingService()

    def highest_range(
        self,
        day: date,
        observations: Sequence[PriceObservation],
    ) -> DayRangeResult:
        """Return the day's winner, or the NOT_FOUND sentinel when there is no data."""
        if not observations:
            logger.warning("No records found for day %s", day.isoformat())
            return DayRangeResult.not_found(day)

        entries = self._ranking.normalize_groups(observations)
        best = max(entries, key=lambda entry: entry.normalized_value)
        logger.debug(
            "Highest normalized range on %s: %s (%s) among %d symbol(s)",
            day.isoformat(),
            best.symbol,
            best.normalized_value,
            len(entries),
        )
        return DayRangeResult.winner(day, best.symbol, best.normalized_value)
