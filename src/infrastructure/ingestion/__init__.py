"""Ingestion of delimited price files into the price store."""

from .csv_loader import PriceFileError, ingest_price_files, load_price_file, load_price_files

__all__ = ["PriceFileError", "ingest_price_files", "load_price_file", "load_price_files"]
