"""Abstract base class for cache service providers.

Defines the namespaced key-value contract datasources use to keep registry
responses for a short time.  Implementations may use an in-memory dict,
SQLite, Redis, or any other storage backend; expiry and eviction are the
implementation's business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ICacheProvider(ABC):
    """Contract for namespaced key-value cache services.

    Entries are addressed by ``(namespace, key)``.  Equal keys in different
    namespaces never collide.  All operations are async so network-backed
    stores do not block the event loop.
    """

    @abstractmethod
    async def get(self, namespace: str, key: str) -> Any | None:
        """Retrieve the value stored under ``(namespace, key)``.

        Parameters
        ----------
        namespace:
            Cache partition, usually the datasource id (e.g. ``"orb"``).
        key:
            Key within the namespace, compared verbatim.

        Returns
        -------
        Any or None
            The cached value if present and not expired; ``None`` otherwise.
        """

    @abstractmethod
    async def set(self, namespace: str, key: str, value: Any, ttl_minutes: int) -> None:
        """Store *value* under ``(namespace, key)`` for *ttl_minutes*.

        Parameters
        ----------
        namespace:
            Cache partition.
        key:
            Key within the namespace.
        value:
            The value to store.  Callers must treat it as immutable once
            stored.
        ttl_minutes:
            Time-to-live in minutes, after which ``get`` returns ``None``.
        """
