from __future__ import annotations

import redis.asyncio as aioredis
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from healthboard.core.config import settings
from healthboard.core.database import get_session_factory
from healthboard.core.process import ProcessContext
from healthboard.core.redis import get_redis
from healthboard.health import HealthAggregator, build_dependencies


def get_process_context(request: Request) -> ProcessContext:
    process: ProcessContext = request.app.state.process
    return process


def get_health_aggregator(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    redis: aioredis.Redis = Depends(get_redis),
    process: ProcessContext = Depends(get_process_context),
) -> HealthAggregator:
    return HealthAggregator(
        build_dependencies(session_factory, redis),
        process=process,
        timeout=settings.health_probe_timeout_seconds,
    )


# Re-export for convenient imports
__all__ = [
    "get_health_aggregator",
    "get_process_context",
    "get_redis",
    "get_session_factory",
]
