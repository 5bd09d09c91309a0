"""Datasource domain models — re-exports all public model classes.

Import from ``src.models`` rather than the individual module files:
    - release.py — lookup input, normalized release list, raw orb payload
"""

from src.models.release import (
    GetReleasesConfig,
    OrbRelease,
    OrbVersion,
    ReleaseInfo,
    ReleaseResult,
)

__all__ = [
    "GetReleasesConfig",
    "OrbRelease",
    "OrbVersion",
    "ReleaseInfo",
    "ReleaseResult",
]
