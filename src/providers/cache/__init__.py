"""Cache providers.

In-memory TTL cache used to avoid repeating registry lookups for the same
package within a short window (datasources cache for 15 minutes).

MemoryCacheProvider is dict-based — fast but not shared across processes.
For multi-worker deployments, swap in a Redis adapter implementing
ICacheProvider without changing any datasource.
"""

from src.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
