"""Abstract base class for package-registry datasources.

A datasource looks up the published versions of a package in one remote
registry and returns them in the shared :class:`ReleaseResult` shape.
Datasources are interchangeable: callers depend on this contract only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.models.release import GetReleasesConfig, ReleaseResult


class IDatasourceProvider(ABC):
    """Contract for registry datasources used by the update system."""

    @abstractmethod
    async def get_releases(self, config: GetReleasesConfig) -> ReleaseResult | None:
        """Return the normalized release list for ``config.lookup_name``.

        Parameters
        ----------
        config:
            Lookup input; only ``lookup_name`` is used.

        Returns
        -------
        ReleaseResult or None
            ``None`` when the package does not exist *or* the lookup failed.
            Callers must not read a single ``None`` as permanent absence.

        Notes
        -----
        Implementations never raise for registry or transport failures.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the datasource id, also used as its cache namespace."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the datasource is configured and usable."""
