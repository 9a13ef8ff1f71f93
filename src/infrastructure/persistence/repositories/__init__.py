"""Concrete SQLAlchemy repository implementations.

Exports all SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary (FastAPI dependency injection).
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .prices import SqlPriceRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    prices: SqlPriceRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a FastAPI dependency:

        async def handler(
            session: AsyncSession = Depends(get_session),
        ) -> ...:
            repos = get_repositories(session)
            prices = await repos.prices.find_by_symbol("BTC")
    """
    return Repositories(prices=SqlPriceRepository(session))


__all__ = [
    "SqlPriceRepository",
    "Repositories",
    "get_repositories",
]
