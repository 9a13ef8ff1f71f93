"""SQLAlchemy implementation of PriceRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.prices import PriceObservation
from src.domain.repositories.prices import PriceRepository
from src.infrastructure.persistence.models.market_data import CryptoPrice


class SqlPriceRepository(PriceRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _to_domain(row: CryptoPrice) -> PriceObservation:
        return PriceObservation(
            symbol=row.symbol,
            timestamp=row.timestamp,
            price=row.price,
        )

    async def _fetch(self, stmt) -> list[PriceObservation]:  # type: ignore[no-untyped-def]
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    async def find_by_symbol(self, symbol: str) -> list[PriceObservation]:
        stmt = (
            select(CryptoPrice)
            .where(CryptoPrice.symbol == symbol)
            .order_by(CryptoPrice.timestamp.asc())
        )
        return await self._fetch(stmt)

    async def find_by_timestamp_range(self, start: int, end: int) -> list[PriceObservation]:
        stmt = (
            select(CryptoPrice)
            .where(CryptoPrice.timestamp.between(start, end))
            .order_by(CryptoPrice.symbol.asc(), CryptoPrice.timestamp.asc())
        )
        return await self._fetch(stmt)

    async def find_all(self) -> list[PriceObservation]:
        stmt = select(CryptoPrice).order_by(
            CryptoPrice.symbol.asc(), CryptoPrice.timestamp.asc()
        )
        return await self._fetch(stmt)

    async def bulk_upsert(self, observations: list[PriceObservation]) -> int:
        if not observations:
            return 0
        # ON CONFLICT cannot touch the same row twice in one statement.
        latest = {(o.symbol, o.timestamp): o for o in observations}
        values = [
            {"symbol": o.symbol, "timestamp": o.timestamp, "price": o.price}
            for o in latest.values()
        ]
        stmt = pg_insert(CryptoPrice).values(values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["symbol", "timestamp"],
            set_={"price": stmt.excluded.price},
        )
        result = await self._session.execute(stmt)
        return result.rowcount
