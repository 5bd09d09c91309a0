"""Public interface definitions for the datasource's collaborators.

Every external store or registry is reached through the abstract base
classes in this package.  Concrete adapters live in ``src/providers/`` and
are wired together in ``src/main.py``, so tests can inject fakes and a
Redis cache can replace the in-memory one without touching a datasource.

CONCRETE PROVIDER MAP:
    Interface              →  Concrete implementations (in src/providers/)
    ─────────────────────────────────────────────────────────────────
    IDatasourceProvider    →  OrbDatasourceProvider
    ICacheProvider         →  MemoryCacheProvider
"""

from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.datasource_provider import IDatasourceProvider

__all__ = [
    "ICacheProvider",
    "IDatasourceProvider",
]
