"""Normalized range calculation.

    normalized_range = (max_price - min_price) / min_price

The ratio is quantized half-up to a fixed number of fractional digits.
Ranking and comparison use RANKING_SCALE; DISPLAY_SCALE is for reporting
only and is never applied before sorting.

A non-positive min_price yields 0.  That is the defined result for a
degenerate group, not an error.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext

logger = logging.getLogger(__name__)

DISPLAY_SCALE = 3
RANKING_SCALE = 10

# Enough significant digits for any realistic price ratio at RANKING_SCALE.
_WORKING_PRECISION = 60


def quantize(value: Decimal, scale: int, rounding: str = ROUND_HALF_UP) -> Decimal:
    """Round value to `scale` fractional digits (half-up unless told otherwise)."""
    with localcontext() as ctx:
        # The quantized result carries every integer digit plus `scale` fraction digits.
        ctx.prec = max(_WORKING_PRECISION, value.adjusted() + scale + 2)
        return value.quantize(Decimal(1).scaleb(-scale), rounding=rounding)


def normalized_range(
    min_price: Decimal,
    max_price: Decimal,
    scale: int = RANKING_SCALE,
) -> Decimal:
    """Return (max_price - min_price) / min_price rounded half-up to `scale` digits.

    Args:
        min_price: Lowest price of the group (>= 0).
        max_price: Highest price of the same group (>= min_price).
        scale: Number of fractional digits kept; defaults to RANKING_SCALE.

    Returns:
        The ratio as a Decimal, or Decimal(0) quantized to `scale` when
        min_price is not positive.
    """
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")
    if min_price <= 0:
        logger.warning("Min price is %s, normalized range defaults to zero", min_price)
        return quantize(Decimal(0), scale)
    with localcontext() as ctx:
        ctx.prec = _WORKING_PRECISION
        ratio = (max_price - min_price) / min_price
    return quantize(ratio, scale)


def display_range(min_price: Decimal, max_price: Decimal) -> Decimal:
    """Normalized range at reporting precision (DISPLAY_SCALE digits)."""
    return normalized_range(min_price, max_price, scale=DISPLAY_SCALE)
