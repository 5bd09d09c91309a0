"""Composition root for the orb datasource.

Builds the one shared ``httpx.AsyncClient``, the cache, and the datasource
from :class:`Settings`.  Every consumer (the CLI, or a host application
embedding the datasource) goes through :func:`build_components` so there is
exactly one HTTP client per datasource identity and no module-level client.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from src.config.settings import Settings
from src.providers.cache.memory_cache import MemoryCacheProvider
from src.providers.datasource.orb_provider import OrbDatasourceProvider
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


def build_components(app_settings: Settings) -> dict[str, Any]:
    """Construct every provider instance for the process.

    Returns a flat dict of named components: ``http_client``, ``cache`` and
    ``orb_datasource``.  Pass it to :func:`close_components` on shutdown.
    """
    http_client = httpx.AsyncClient(
        timeout=app_settings.http_timeout,
        headers={"User-Agent": app_settings.http_user_agent},
    )

    cache = MemoryCacheProvider(max_size=app_settings.cache_max_size)

    orb_datasource = OrbDatasourceProvider(
        http_client=http_client,
        cache=cache,
        graphql_url=app_settings.circleci_graphql_url,
        registry_url=app_settings.circleci_registry_url,
    )

    _logger.debug(
        "components_built",
        datasource=orb_datasource.get_provider_name(),
        graphql_url=app_settings.circleci_graphql_url,
        cache_max_size=app_settings.cache_max_size,
    )

    return {
        "http_client": http_client,
        "cache": cache,
        "orb_datasource": orb_datasource,
    }


async def close_components(components: dict[str, Any]) -> None:
    """Release resources held by :func:`build_components` output."""
    http_client: httpx.AsyncClient = components["http_client"]
    await http_client.aclose()
    _logger.debug("components_closed", message="HTTP client closed")
