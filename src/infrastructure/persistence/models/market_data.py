"""Market data layer ORM models: crypto_prices."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import BigInteger, CheckConstraint, Index, Numeric, PrimaryKeyConstraint, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class CryptoPrice(Base):
    """Price of one crypto symbol at one instant.

    Composite PK: (symbol, timestamp).  timestamp is epoch milliseconds (UTC).
    Re-ingesting the same key replaces price (upsert in SqlPriceRepository).
    """

    __tablename__ = "crypto_prices"
    __table_args__ = (
        PrimaryKeyConstraint("symbol", "timestamp", name="pk_crypto_prices"),
        Index("ix_crypto_prices_timestamp", "timestamp"),
        CheckConstraint("price >= 0", name="ck_crypto_prices_price_non_negative"),
    )

    symbol: Mapped[str] = mapped_column(Text, primary_key=True, nullable=False)
    timestamp: Mapped[int] = mapped_column(BigInteger, primary_key=True, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(38, 18), nullable=False)
