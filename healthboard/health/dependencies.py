from __future__ import annotations

import redis.asyncio as aioredis
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from healthboard.health.models import Criticality, DependencyDescriptor
from healthboard.health.probes import DatabaseProbe, RedisProbe

DATABASE = "database"
REDIS = "redis"


def build_dependencies(
    session_factory: async_sessionmaker[AsyncSession],
    redis: aioredis.Redis,
) -> list[DependencyDescriptor]:
    """Dependencies reported on the health dashboard, in report order."""
    return [
        DependencyDescriptor(
            name=DATABASE,
            criticality=Criticality.CRITICAL,
            probe=DatabaseProbe(session_factory),
        ),
        DependencyDescriptor(
            name=REDIS,
            criticality=Criticality.NONCRITICAL,
            probe=RedisProbe(redis),
        ),
    ]
