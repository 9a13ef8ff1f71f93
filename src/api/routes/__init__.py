from .cryptos import router as cryptos_router

__all__ = ["cryptos_router"]
