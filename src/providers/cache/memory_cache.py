"""In-memory cache provider using cachetools.TLRUCache.

Simple, fast cache for single-process deployments.  Unlike a plain
``TTLCache``, ``TLRUCache`` computes an expiry per entry, so each ``set``
honours its own ``ttl_minutes``.  Can be swapped for Redis or another
backend via the ICacheProvider interface.
"""

from __future__ import annotations

import time
from typing import Any, Callable, NamedTuple

import structlog
from cachetools import TLRUCache

from src.interfaces.cache_provider import ICacheProvider

logger = structlog.get_logger(logger_name=__name__)


class _Entry(NamedTuple):
    value: Any
    ttl_seconds: float


def _time_to_use(_key: tuple[str, str], entry: _Entry, now: float) -> float:
    return now + entry.ttl_seconds


class MemoryCacheProvider(ICacheProvider):
    """In-memory namespaced TTL cache backed by ``cachetools.TLRUCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    timer:
        Clock returning seconds; defaults to ``time.monotonic``.  Tests
        inject a fake clock to step past expiry.
    """

    def __init__(
        self,
        max_size: int = 1000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: TLRUCache[tuple[str, str], _Entry] = TLRUCache(
            maxsize=max_size, ttu=_time_to_use, timer=timer
        )

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def get(self, namespace: str, key: str) -> Any | None:
        """Retrieve the cached value, or ``None`` if missing/expired."""
        entry = self._cache.get((namespace, key))
        if entry is None:
            logger.debug("cache_miss", namespace=namespace, key=key)
            return None
        logger.debug("cache_hit", namespace=namespace, key=key)
        return entry.value

    async def set(self, namespace: str, key: str, value: Any, ttl_minutes: int) -> None:
        """Store *value* for *ttl_minutes*.

        A non-positive TTL means the entry is already expired; cachetools
        drops it instead of storing it.
        """
        self._cache[(namespace, key)] = _Entry(value=value, ttl_seconds=ttl_minutes * 60.0)
        logger.debug("cache_set", namespace=namespace, key=key, ttl_minutes=ttl_minutes)
