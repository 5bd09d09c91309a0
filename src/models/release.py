"""Pydantic v2 models for datasource release metadata.

All models use frozen config (immutable): a :class:`ReleaseResult` is cached
verbatim and handed to every later caller, so nobody may mutate it.  Frozen
only blocks attribute assignment, so its containers are immutable too:
``releases`` is a tuple and ``versions`` a read-only ``MappingProxyType``.

Field names are snake_case in Python.  Aliases carry the camelCase names
used on the wire (CircleCI's GraphQL payload) and by the downstream
release-metadata consumers, so ``model_dump(by_alias=True)`` yields
``releaseTimestamp`` / ``homeUrl`` / ``createdAt``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class GetReleasesConfig(BaseModel):
    """Input to a datasource ``get_releases`` call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lookup_name: str = Field(
        alias="lookupName",
        description="Package name as requested by the caller, e.g. 'circleci/node'.",
    )


class ReleaseInfo(BaseModel):
    """One published version of a package."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = Field(description="Version string exactly as published.")
    release_timestamp: str | None = Field(
        default=None,
        alias="releaseTimestamp",
        description="ISO-8601 publish time, or None when the registry has none.",
    )


class ReleaseResult(BaseModel):
    """Normalized release list returned to callers and cached verbatim."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(description="The lookup name, not the registry's echo of it.")
    homepage: str | None = Field(default=None, description="Project homepage URL.")
    releases: tuple[ReleaseInfo, ...] | None = Field(
        default=None, description="Releases in registry response order."
    )
    versions: Mapping[str, Any] = Field(
        default_factory=dict,
        description="Always empty here; reserved for downstream collaborators.",
    )

    @field_validator("versions", mode="after")
    @classmethod
    def _freeze_versions(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("versions")
    def _dump_versions(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)


class OrbVersion(BaseModel):
    """A single ``versions[]`` element of CircleCI's ``orb`` GraphQL object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str
    created_at: str | None = Field(default=None, alias="createdAt")


class OrbRelease(BaseModel):
    """Raw ``data.orb`` object from CircleCI's GraphQL API.

    Transient: only lives long enough to be normalized into a
    :class:`ReleaseResult`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str | None = None
    home_url: str | None = Field(default=None, alias="homeUrl")
    versions: list[OrbVersion]

    def to_release_result(self, lookup_name: str, registry_url: str) -> ReleaseResult:
        """Normalize into the shared release-metadata shape.

        Parameters
        ----------
        lookup_name:
            Name the caller asked for; becomes ``ReleaseResult.name``.
        registry_url:
            Prefix of the registry page used when ``homeUrl`` is absent or
            empty, e.g. ``https://circleci.com/orbs/registry/orb``.
        """
        homepage = self.home_url or f"{registry_url.rstrip('/')}/{lookup_name}"
        releases = tuple(
            # Empty createdAt strings count as missing.
            ReleaseInfo(version=v.version, release_timestamp=v.created_at or None)
            for v in self.versions
        )
        return ReleaseResult(
            name=lookup_name,
            homepage=homepage,
            releases=releases,
            versions={},
        )
