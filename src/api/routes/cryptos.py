"""Crypto statistics endpoints.

JSON endpoints return the structured models in src.api.schemas; the
``*-string`` variants return the same data as plain text.

Status mapping for all endpoints:
  symbol / day without data → 404
  malformed day string      → 400
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from src.api.dependencies import get_analytics_service
from src.api.formatting import (
    SYMBOL_NOT_FOUND,
    format_day_range,
    format_ranking,
    format_stats,
)
from src.api.schemas import DayRangeResponse, NormalizedRangeResponse, SymbolStatsResponse
from src.domain.models.enums import QueryStatus
from src.domain.models.prices import DayRangeResult
from src.domain.services.analytics import CryptoAnalyticsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cryptos", tags=["cryptos"])

_DAY_STATUS_CODES = {
    QueryStatus.FOUND: status.HTTP_200_OK,
    QueryStatus.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    QueryStatus.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
}


def _raise_for_day(result: DayRangeResult) -> None:
    if not result.found:
        raise HTTPException(status_code=_DAY_STATUS_CODES[result.status], detail=result.message)


@router.get("/normalized-ranking", response_model=list[NormalizedRangeResponse])
async def get_normalized_ranking(
    service: CryptoAnalyticsService = Depends(get_analytics_service),
) -> list[NormalizedRangeResponse]:
    """All symbols ordered by normalized range, highest first."""
    ranking = await service.ranked_by_symbol()
    return [NormalizedRangeResponse.from_domain(entry) for entry in ranking]


@router.get("/highest-range", response_model=NormalizedRangeResponse)
async def get_highest_range(
    service: CryptoAnalyticsService = Depends(get_analytics_service),
) -> NormalizedRangeResponse:
    top = await service.top_ranked()
    if top is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No price data available.")
    return NormalizedRangeResponse.from_domain(top)


@router.get("/highest-range-string", response_class=PlainTextResponse)
async def get_highest_range_string(
    service: CryptoAnalyticsService = Depends(get_analytics_service),
) -> str:
    return format_ranking(await service.ranked_by_symbol())


@router.get("/{symbol}/stats", response_model=SymbolStatsResponse)
async def get_stats(
    symbol: str,
    service: CryptoAnalyticsService = Depends(get_analytics_service),
) -> SymbolStatsResponse:
    stats = await service.stats_for(symbol)
    if stats is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SYMBOL_NOT_FOUND)
    return SymbolStatsResponse.from_domain(stats)


@router.get("/{symbol}/stats-string", response_class=PlainTextResponse)
async def get_stats_string(
    symbol: str,
    service: CryptoAnalyticsService = Depends(get_analytics_service),
) -> PlainTextResponse:
    stats = await service.stats_for(symbol)
    if stats is None:
        return PlainTextResponse(SYMBOL_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(format_stats(stats))


@router.get("/{day}/highest-normalized-range", response_model=DayRangeResponse)
async def get_highest_range_for_day(
    day: str,
    service: CryptoAnalyticsService = Depends(get_analytics_service),
) -> DayRangeResponse:
    """Symbol with the highest normalized range on a UTC day given as YYYY-MM-DD."""
    result = await service.highest_range_for_day(day)
    _raise_for_day(result)
    return DayRangeResponse.from_domain(result)


@router.get("/{day}/highest-normalized-range-string", response_class=PlainTextResponse)
async def get_highest_range_for_day_string(
    day: str,
    service: CryptoAnalyticsService = Depends(get_analytics_service),
) -> PlainTextResponse:
    result = await service.highest_range_for_day(day)
    return PlainTextResponse(format_day_range(result), status_code=_DAY_STATUS_CODES[result.status])
