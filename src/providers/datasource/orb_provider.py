"""CircleCI orb datasource via the orb registry's GraphQL API.

Looks up the published versions of an orb (``namespace/name``) by POSTing
to ``https://circleci.com/graphql-unstable`` and normalizes the answer into
a :class:`~src.models.release.ReleaseResult`.  Successful results are
cached for 15 minutes under the ``"orb"`` namespace; not-found results are
never cached, so a registry hiccup is not remembered as absence.

Injected ``httpx.AsyncClient``, one query constant, graceful error
handling.  There is no retry or throttle: one failed attempt yields
``None`` and the caller decides when to ask again.
"""

from __future__ import annotations

import socket
from typing import Any

import httpx
from pydantic import ValidationError

from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.datasource_provider import IDatasourceProvider
from src.models.release import GetReleasesConfig, OrbRelease, ReleaseResult
from src.utils.errors import (
    DatasourceLookupError,
    DatasourceResponseError,
    OrbNotFoundError,
)
from src.utils.logging import get_logger

DATASOURCE_ID = "orb"

_GRAPHQL_URL = "https://circleci.com/graphql-unstable"
_REGISTRY_URL = "https://circleci.com/orbs/registry/orb"
_CACHE_NAMESPACE = DATASOURCE_ID
_CACHE_MINUTES = 15

# The orb name travels in ``variables``; it is never spliced into the query text.
_ORB_QUERY = (
    "query OrbVersions($name: String!) {"
    "orb(name: $name) {"
    "name homeUrl "
    "versions {version createdAt}"
    "}"
    "}"
)

# Resolver messages seen when the exception chain has lost the gaierror.
_DNS_FAILURE_MARKERS = (
    "name or service not known",
    "nodename nor servname provided",
    "temporary failure in name resolution",
    "getaddrinfo failed",
)


def _is_dns_failure(exc: BaseException) -> bool:
    """Return ``True`` if *exc* was caused by an unresolvable host."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, socket.gaierror):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__

    if isinstance(exc, httpx.ConnectError):
        message = str(exc).lower()
        return any(marker in message for marker in _DNS_FAILURE_MARKERS)
    return False


class OrbDatasourceProvider(IDatasourceProvider):
    """Fetches CircleCI orb releases with a cache-first strategy.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient``, shared across the process and
        owned by the composition root.  Timeouts are the client's concern.
    cache:
        Namespaced cache store.
    graphql_url:
        Registry GraphQL endpoint.
    registry_url:
        Prefix of the public registry page, used as the homepage fallback.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        cache: ICacheProvider,
        graphql_url: str = _GRAPHQL_URL,
        registry_url: str = _REGISTRY_URL,
    ) -> None:
        self._http = http_client
        self._cache = cache
        self._graphql_url = graphql_url
        self._registry_url = registry_url
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _fetch_orb(self, lookup_name: str) -> OrbRelease | None:
        """POST the orb query and return the raw ``data.orb`` object.

        Returns ``None`` when the registry answered but knows no such orb.

        Raises
        ------
        OrbNotFoundError
            On HTTP 404 or when the registry host cannot be resolved.
        DatasourceLookupError
            On any other HTTP status or transport failure.
        DatasourceResponseError
            When the body is not JSON or not shaped like a GraphQL answer.
        """
        payload = {"query": _ORB_QUERY, "variables": {"name": lookup_name}}
        try:
            response = await self._http.post(
                self._graphql_url,
                json=payload,
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status == 404:
                raise OrbNotFoundError(
                    message=f"Registry returned HTTP 404 for '{lookup_name}'",
                    provider_name=DATASOURCE_ID,
                    status_code=status,
                ) from exc
            raise DatasourceLookupError(
                message=f"Registry returned HTTP {status}",
                provider_name=DATASOURCE_ID,
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            if _is_dns_failure(exc):
                raise OrbNotFoundError(
                    message=f"Cannot resolve registry host: {exc}",
                    provider_name=DATASOURCE_ID,
                ) from exc
            raise DatasourceLookupError(
                message=f"Registry request failed: {exc}",
                provider_name=DATASOURCE_ID,
            ) from exc

        return self._parse_orb(response)

    @staticmethod
    def _parse_orb(response: httpx.Response) -> OrbRelease | None:
        """Extract ``data.orb`` from a GraphQL response envelope."""
        try:
            body: Any = response.json()
        except ValueError as exc:
            raise DatasourceResponseError(
                message="Registry response is not valid JSON",
                provider_name=DATASOURCE_ID,
            ) from exc

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise DatasourceResponseError(
                message="Registry response has no 'data' object",
                provider_name=DATASOURCE_ID,
            )

        raw_orb = data.get("orb")
        if raw_orb is None:
            return None

        try:
            return OrbRelease.model_validate(raw_orb)
        except ValidationError as exc:
            raise DatasourceResponseError(
                message=f"Unexpected orb payload: {exc.error_count()} validation error(s)",
                provider_name=DATASOURCE_ID,
            ) from exc

    # ------------------------------------------------------------------
    # IDatasourceProvider implementation
    # ------------------------------------------------------------------

    async def get_releases(self, config: GetReleasesConfig) -> ReleaseResult | None:
        """Return the orb's releases, from cache when possible.

        Never raises for registry failures: 404s and DNS failures are
        logged at debug, everything else at warning, and both give ``None``.
        """
        lookup_name = config.lookup_name
        self._logger.debug("orb_get_releases", lookup_name=lookup_name)

        cached = await self._cache.get(_CACHE_NAMESPACE, lookup_name)
        if cached is not None:
            return cached

        try:
            orb = await self._fetch_orb(lookup_name)
            if orb is None:
                self._logger.debug("orb_not_found", lookup_name=lookup_name)
                return None

            result = orb.to_release_result(lookup_name, self._registry_url)
            self._logger.debug(
                "orb_release_result",
                lookup_name=lookup_name,
                release_count=len(result.releases or []),
                homepage=result.homepage,
            )
            await self._cache.set(_CACHE_NAMESPACE, lookup_name, result, _CACHE_MINUTES)
            return result
        except Exception as exc:
            self._logger.debug("orb_lookup_error", lookup_name=lookup_name, error=repr(exc))
            if isinstance(exc, OrbNotFoundError):
                self._logger.debug(
                    "orb_lookup_failure", lookup_name=lookup_name, reason="not_found"
                )
                return None
            self._logger.warning(
                "orb_lookup_failure", lookup_name=lookup_name, reason="unknown_error"
            )
            return None

    def get_provider_name(self) -> str:
        """Return ``'orb'``."""
        return DATASOURCE_ID

    def is_available(self) -> bool:
        """Always ``True`` — the orb registry needs no credentials."""
        return True
