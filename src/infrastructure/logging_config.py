"""Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; this only installs the
root handler and format once, at application start.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger at `level`."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)
