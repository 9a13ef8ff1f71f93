"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .enums import QueryStatus
from .prices import DayRangeResult, NormalizedStats, PriceObservation, SymbolStats

__all__ = [
    # enums
    "QueryStatus",
    # prices
    "PriceObservation",
    "SymbolStats",
    "NormalizedStats",
    "DayRangeResult",
]
