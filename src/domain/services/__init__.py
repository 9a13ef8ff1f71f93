"""Domain services package."""

from .aggregation import AggregationService
from .analytics import CryptoAnalyticsService
from .day_window import DayWindowService, InvalidDateError
from .ranking import RankingService

__all__ = [
    "AggregationService",
    "CryptoAnalyticsService",
    "DayWindowService",
    "InvalidDateError",
    "RankingService",
]
