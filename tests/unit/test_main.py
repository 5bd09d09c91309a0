"""Unit tests for the composition root (src.main)."""

from __future__ import annotations

import httpx
import pytest

from src.config.settings import Settings
from src.main import build_components, close_components
from src.providers.cache.memory_cache import MemoryCacheProvider
from src.providers.datasource.orb_provider import OrbDatasourceProvider


class TestBuildComponents:
    @pytest.mark.asyncio
    async def test_builds_one_shared_client(self, settings: Settings) -> None:
        components = build_components(settings)
        try:
            assert isinstance(components["http_client"], httpx.AsyncClient)
            assert isinstance(components["cache"], MemoryCacheProvider)
            datasource = components["orb_datasource"]
            assert isinstance(datasource, OrbDatasourceProvider)
            assert datasource._http is components["http_client"]
            assert datasource._cache is components["cache"]
        finally:
            await close_components(components)

    @pytest.mark.asyncio
    async def test_applies_settings(self) -> None:
        settings = Settings(
            _env_file=None,
            circleci_graphql_url="https://registry.test/graphql",
            http_timeout=7.5,
            http_user_agent="tests/1.0",
        )
        components = build_components(settings)
        try:
            client: httpx.AsyncClient = components["http_client"]
            assert client.timeout == httpx.Timeout(7.5)
            assert client.headers["User-Agent"] == "tests/1.0"
            assert components["orb_datasource"]._graphql_url == "https://registry.test/graphql"
        finally:
            await close_components(components)

    @pytest.mark.asyncio
    async def test_close_components_closes_client(self, settings: Settings) -> None:
        components = build_components(settings)
        await close_components(components)
        assert components["http_client"].is_closed
