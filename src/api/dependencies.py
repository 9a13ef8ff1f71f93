"""FastAPI dependencies wiring sessions, repositories and services."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.repositories.prices import PriceRepository
from src.domain.services.analytics import CryptoAnalyticsService
from src.infrastructure.database import get_session
from src.infrastructure.persistence.repositories import get_repositories


async def get_price_repository(
    session: AsyncSession = Depends(get_session),
) -> PriceRepository:
    return get_repositories(session).prices


async def get_analytics_service(
    prices: PriceRepository = Depends(get_price_repository),
) -> CryptoAnalyticsService:
    return CryptoAnalyticsService(prices)
