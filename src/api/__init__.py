"""HTTP presentation layer (FastAPI)."""
