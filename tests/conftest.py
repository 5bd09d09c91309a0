"""Shared pytest fixtures for the orb datasource test suite."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
import structlog

from src.config.settings import Settings
from src.interfaces.cache_provider import ICacheProvider
from src.providers.cache.memory_cache import MemoryCacheProvider


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingTransport(httpx.MockTransport):
    """``httpx.MockTransport`` that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Drop logging config after each test.

    Loggers built under one test must not keep writing to that test's
    captured (and by then closed) stream.
    """
    yield
    structlog.reset_defaults()
    structlog.configure(cache_logger_on_first_use=False)
    logging.getLogger().handlers.clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env lookup)."""
    return Settings(_env_file=None)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_cache(clock: FakeClock) -> MemoryCacheProvider:
    return MemoryCacheProvider(max_size=100, timer=clock)


@pytest.fixture
def mock_cache() -> ICacheProvider:
    """Mock ICacheProvider that always misses.

    Override ``mock_cache.get.return_value`` to simulate a hit.
    """
    mock = MagicMock(spec=ICacheProvider)
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=None)
    return mock


@pytest_asyncio.fixture
async def registry() -> Any:
    """Factory for an ``httpx.AsyncClient`` served by a fake registry.

    ``client, transport = registry(handler)``; every client built here is
    closed at teardown.
    """
    clients: list[httpx.AsyncClient] = []

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> tuple[httpx.AsyncClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport)
        clients.append(client)
        return client, transport

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture
def sample_orb() -> dict[str, Any]:
    """Raw ``data.orb`` object as returned by CircleCI."""
    return {
        "name": "circleci/node",
        "homeUrl": "https://github.com/CircleCI-Public/node-orb",
        "versions": [
            {"version": "5.1.0", "createdAt": "2023-02-14T18:03:12.000Z"},
            {"version": "5.0.3", "createdAt": "2022-11-02T09:41:00.000Z"},
            {"version": "4.0.0", "createdAt": None},
        ],
    }
