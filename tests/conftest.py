from __future__ import annotations

import os

os.environ["APP_VERSION"] = "1.4.2-test"
os.environ["HEALTH_PROBE_TIMEOUT_SECONDS"] = "2"

from collections.abc import AsyncGenerator, Iterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from healthboard.main import app

CLIENTS_INFO: dict[str, Any] = {"connected_clients": 7, "blocked_clients": 0}
MEMORY_INFO: dict[str, Any] = {"used_memory": 1101824, "used_memory_human": "1.05M"}


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def mock_db_session() -> AsyncMock:
    session = AsyncMock()
    session.scalar.return_value = 0
    return session


@pytest.fixture
def mock_session_factory(mock_db_session: AsyncMock) -> MagicMock:
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = mock_db_session
    return factory


@pytest.fixture
def mock_redis() -> AsyncMock:
    redis = AsyncMock()
    redis.ping.return_value = True
    redis.info.side_effect = lambda section: {
        "clients": dict(CLIENTS_INFO),
        "memory": dict(MEMORY_INFO),
    }[section]
    return redis


@pytest.fixture
def override_dependencies(
    mock_session_factory: MagicMock,
    mock_redis: AsyncMock,
) -> Iterator[None]:
    from healthboard.api.deps import get_redis, get_session_factory

    app.dependency_overrides[get_session_factory] = lambda: mock_session_factory
    app.dependency_overrides[get_redis] = lambda: mock_redis
    yield
    app.dependency_overrides.clear()
