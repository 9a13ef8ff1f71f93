"""Initial schema: crypto_prices.

Revision ID: 0001
Revises:
Create Date: 2026-10-16
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "crypto_prices",
        sa.Column("symbol", sa.Text, nullable=False),
        sa.Column("timestamp", sa.BigInteger, nullable=False),
        sa.Column("price", sa.Numeric(38, 18), nullable=False),
        sa.PrimaryKeyConstraint("symbol", "timestamp", name="pk_crypto_prices"),
        sa.CheckConstraint("price >= 0", name="ck_crypto_prices_price_non_negative"),
    )
    op.create_index("ix_crypto_prices_timestamp", "crypto_prices", ["timestamp"])


def downgrade() -> None:
    op.drop_index("ix_crypto_prices_timestamp", table_name="crypto_prices")
    op.drop_table("crypto_prices")
