"""Domain repository interfaces.

Abstractions are defined with abc.ABC and @abstractmethod.  Concrete
implementations live in src/infrastructure/persistence/ and are wired at the
application boundary via dependency injection.
"""

from .prices import PriceRepository

__all__ = ["PriceRepository"]
