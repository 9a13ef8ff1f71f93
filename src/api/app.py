"""FastAPI application factory.

    uvicorn src.api.app:app
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.rate_limit import RateLimiter, RateLimitMiddleware
from src.api.routes import cryptos_router
from src.infrastructure.config import Settings, settings as default_settings
from src.infrastructure.database import AsyncSessionLocal
from src.infrastructure.ingestion import ingest_price_files
from src.infrastructure.logging_config import configure_logging
from src.infrastructure.persistence.repositories import get_repositories

logger = logging.getLogger(__name__)


async def load_initial_prices(settings: Settings) -> int:
    """Upsert the configured price files in one transaction."""
    async with AsyncSessionLocal() as session:
        async with session.begin():
            repos = get_repositories(session)
            return await ingest_price_files(repos.prices, settings.price_paths)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        if settings.load_on_startup:
            logger.info("Loading price files from %s", settings.prices_dir)
            await load_initial_prices(settings)
        yield

    app = FastAPI(
        title="Crypto Analyzer API",
        description="Price statistics and normalized-range rankings for crypto symbols",
        lifespan=lifespan,
    )
    if settings.rate_limit_requests > 0:
        limiter = RateLimiter(settings.rate_limit_requests, settings.rate_limit_window_seconds)
        app.add_middleware(RateLimitMiddleware, limiter=limiter)
    app.include_router(cryptos_router)
    return app


app = create_app()
