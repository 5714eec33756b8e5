from __future__ import annotations

from collections.abc import AsyncGenerator

import redis.asyncio as aioredis

from healthboard.core.config import settings

redis_client: aioredis.Redis = aioredis.from_url(  # type: ignore[no-untyped-call]
    settings.redis_url,
    decode_responses=True,
    socket_connect_timeout=settings.redis_socket_timeout_seconds,
    socket_timeout=settings.redis_socket_timeout_seconds,
)


async def get_redis() -> AsyncGenerator[aioredis.Redis]:
    yield redis_client
