"""ORM model registry: imports all layer modules so every mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from src.infrastructure.persistence.models.market_data import CryptoPrice

__all__ = [
    # Market data
    "CryptoPrice",
]
