"""Domain enumerations for the crypto analyzer.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (FastAPI / Pydantic default behaviour).
"""

from enum import Enum


class QueryStatus(str, Enum):
    """Outcome tag for queries that may legitimately find nothing."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
