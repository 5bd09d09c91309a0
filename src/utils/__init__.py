"""Utility modules for the orb datasource.

- **errors** -- Exception hierarchy rooted at OrbFetchError; providers raise
  these internally to classify registry failures before logging them.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

# -- Datasource exception hierarchy ----------------------------------------
from src.utils.errors import (
    ConfigurationError,
    DatasourceLookupError,
    DatasourceResponseError,
    OrbFetchError,
    OrbNotFoundError,
)

# -- Structured logging setup ----------------------------------------------
from src.utils.logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "DatasourceLookupError",
    "DatasourceResponseError",
    "OrbFetchError",
    "OrbNotFoundError",
    "configure_logging",
    "get_logger",
]
