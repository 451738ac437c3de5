"""
Configuration constants for routegraph.

All tunable settings are defined here. Values that can be overridden are
read from environment variables (a local .env file is honoured).
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Cost Configuration
# =============================================================================

# Cost contributed by an edge that carries no weight
MISSING_WEIGHT = 0

# Price reported by the flight solver when no route satisfies the stop bound
UNREACHABLE_PRICE = -1

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
# DEBUG traces every heap pop and relaxation, which is very chatty
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging for scripts and interactive sessions.

    Library modules only create loggers; callers decide whether to see them.

    Args:
        level: Level name or number. Defaults to LOG_LEVEL.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
