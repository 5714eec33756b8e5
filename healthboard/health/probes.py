from __future__ import annotations

import logging
import re
import time
from collections.abc import Mapping
from typing import Any, Protocol

import redis.asyncio as aioredis
from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from healthboard.health.errors import ConnectivityError, OperationError, describe_error
from healthboard.health.models import ProbeResult
from healthboard.models import Account, Base, Machine, Session, SessionMessage

logger = logging.getLogger(__name__)

# Record collections counted by the database probe, keyed by report name
RECORD_COLLECTIONS: dict[str, type[Base]] = {
    "accounts": Account,
    "sessions": Session,
    "messages": SessionMessage,
    "machines": Machine,
}


class Probe(Protocol):
    """A liveness check against one external dependency.

    Implementations must not raise: every failure is reported as an
    ERROR result carrying the elapsed time up to the failure.
    """

    async def check(self) -> ProbeResult:
        ...


def elapsed_ms(start: float) -> int:
    """Milliseconds elapsed since a ``time.monotonic()`` reading."""
    return max(0, int((time.monotonic() - start) * 1000))


class DatabaseProbe:
    """Round-trips ``SELECT 1`` and counts rows of the main collections.

    Only the ``SELECT 1`` round-trip is included in ``response_time_ms`` on
    success; the counts run afterwards. On failure the latency covers
    everything up to the error.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        collections: Mapping[str, type[Base]] = RECORD_COLLECTIONS,
    ) -> None:
        self._session_factory = session_factory
        self._collections = collections

    async def check(self) -> ProbeResult:
        start = time.monotonic()
        try:
            async with self._session_factory() as session:
                await self._ping(session)
                response_time_ms = elapsed_ms(start)
                record_counts = await self._count_records(session)
        except Exception as exc:
            logger.warning("Database probe failed (%s): %s", type(exc).__name__, exc)
            return ProbeResult.failure(elapsed_ms(start), exc)

        return ProbeResult.success(response_time_ms, record_counts=record_counts)

    async def _ping(self, session: AsyncSession) -> None:
        try:
            await session.execute(text("SELECT 1"))
        except Exception as exc:
            raise ConnectivityError(describe_error(exc)) from exc

    async def _count_records(self, session: AsyncSession) -> dict[str, int]:
        counts: dict[str, int] = {}
        for name, model in self._collections.items():
            try:
                count = await session.scalar(select(func.count()).select_from(model))
            except Exception as exc:
                raise OperationError(describe_error(exc)) from exc
            counts[name] = int(count or 0)
        return counts


def parse_info_field(info: Mapping[str, Any] | str, key: str) -> Any | None:
    """Read one field from an INFO reply.

    redis-py parses INFO into a mapping; raw ``key:value`` text (as returned
    by proxies or ``execute_command``) is scraped line by line.
    """
    if isinstance(info, str):
        match = re.search(rf"^{re.escape(key)}:([^\r\n]+)", info, re.MULTILINE)
        return match.group(1) if match else None
    return info.get(key)


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


class RedisProbe:
    """Pings Redis and reports connected clients and memory usage."""

    def __init__(self, redis: aioredis.Redis) -> None:
        self._redis = redis

    async def check(self) -> ProbeResult:
        start = time.monotonic()
        try:
            await self._ping()
            response_time_ms = elapsed_ms(start)
            metadata = await self._read_stats()
        except Exception as exc:
            logger.warning("Redis probe failed (%s): %s", type(exc).__name__, exc)
            return ProbeResult.failure(elapsed_ms(start), exc)

        return ProbeResult.success(response_time_ms, **metadata)

    async def _ping(self) -> None:
        try:
            await self._redis.ping()
        except Exception as exc:
            raise ConnectivityError(describe_error(exc)) from exc

    async def _read_stats(self) -> dict[str, Any]:
        try:
            clients_info = await self._redis.info("clients")
            memory_info = await self._redis.info("memory")
        except Exception as exc:
            raise OperationError(describe_error(exc)) from exc

        # Fields missing from the reply are left out, not reported as errors
        stats: dict[str, Any] = {}
        connected_clients = _as_int(parse_info_field(clients_info, "connected_clients"))
        if connected_clients is not None:
            stats["connected_clients"] = connected_clients
        used_memory = parse_info_field(memory_info, "used_memory_human")
        if used_memory is not None:
            stats["used_memory"] = str(used_memory).strip()
        return stats
