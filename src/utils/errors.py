"""Custom exception hierarchy for the orb datasource.

All application exceptions inherit from :class:`OrbFetchError`, which
carries an optional ``provider_name`` so log handlers can identify which
datasource (e.g. "orb") raised the failure.

    OrbFetchError  (base -- catch-all for any datasource error)
    +-- DatasourceLookupError    (transport failure talking to a registry)
    |   +-- OrbNotFoundError     (HTTP 404 or unresolvable registry host)
    +-- DatasourceResponseError  (registry answered with an unusable payload)
    +-- ConfigurationError       (startup / invalid config)

These types never cross the public ``get_releases`` boundary.  Providers
raise them internally so that the boundary can pick the right log level
before collapsing every failure to ``None``.
"""


class OrbFetchError(Exception):
    """Base exception for all datasource errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name``.  ``__str__`` prefixes the provider name in brackets,
    e.g. ``[orb] Registry returned HTTP 502``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Registry lookup errors
# ---------------------------------------------------------------------------

class DatasourceLookupError(OrbFetchError):
    """Raised when the registry request fails at the transport or HTTP level."""

    def __init__(
        self,
        message: str = "Registry lookup failed",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._status_code = status_code

    @property
    def status_code(self) -> int | None:
        """HTTP status of the failed response, ``None`` for transport errors."""
        return self._status_code


class OrbNotFoundError(DatasourceLookupError):
    """Raised when the registry reports 404 or its host cannot be resolved.

    This is the expected "package does not exist" path and is logged at
    debug level only.
    """

    def __init__(
        self,
        message: str = "Package not found",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            message=message, provider_name=provider_name, status_code=status_code
        )


class DatasourceResponseError(OrbFetchError):
    """Raised when the registry response cannot be decoded or has the wrong shape."""

    def __init__(
        self,
        message: str = "Malformed registry response",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(OrbFetchError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
