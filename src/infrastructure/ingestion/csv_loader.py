"""CSV price-file loader.

Each file has a header row ``timestamp,symbol,price`` followed by one
observation per line.  Every column is read as text so prices reach
Decimal without passing through float.  Blank lines and rows with an empty
timestamp are skipped.

Within one load a later row with the same (symbol, timestamp) replaces an
earlier one; the repository applies the same rule against stored rows.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path

import pandas as pd

from src.domain.models.prices import PriceObservation
from src.domain.repositories.prices import PriceRepository

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("timestamp", "symbol", "price")


class PriceFileError(ValueError):
    """Raised when a price file is structurally invalid or holds a malformed row."""


def load_price_file(path: Path) -> list[PriceObservation]:
    """Parse one CSV price file into observations, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        PriceFileError: If a required column is missing or a row cannot be parsed.
    """
    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError as exc:
        raise PriceFileError(f"{path}: file is empty") from exc
    frame.columns = [str(col).strip().lower() for col in frame.columns]
    missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
    if missing:
        raise PriceFileError(f"{path}: missing column(s) {', '.join(missing)}")

    observations: list[PriceObservation] = []
    for row_number, row in enumerate(frame.itertuples(index=False), start=2):
        timestamp = row.timestamp.strip()
        if not timestamp:
            continue
        try:
            observations.append(
                PriceObservation(
                    symbol=row.symbol.strip(),
                    timestamp=int(timestamp),
                    price=Decimal(row.price.strip()),
                )
            )
        except (ValueError, ArithmeticError) as exc:
            raise PriceFileError(f"{path}, row {row_number}: {exc}") from exc
    logger.debug("Parsed %d observation(s) from %s", len(observations), path)
    return observations


def load_price_files(paths: Iterable[Path]) -> list[PriceObservation]:
    """Parse several price files; missing files are logged and skipped.

    Duplicate (symbol, timestamp) keys keep the last row read.
    """
    latest: dict[tuple[str, int], PriceObservation] = {}
    for path in paths:
        if not path.is_file():
            logger.warning("Price file not found, skipping: %s", path)
            continue
        for obs in load_price_file(path):
            latest[(obs.symbol, obs.timestamp)] = obs
    return list(latest.values())


async def ingest_price_files(repository: PriceRepository, paths: Iterable[Path]) -> int:
    """Load price files and upsert them; returns the number of rows affected."""
    observations = load_price_files(paths)
    if not observations:
        logger.warning("No price observations to ingest")
        return 0
    affected = await repository.bulk_upsert(observations)
    logger.info("Ingested %d observation(s), %d row(s) affected", len(observations), affected)
    return affected
