import asyncio
import os
import sys

# Add project root to path so we can import healthboard
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from healthboard.core.config import settings
from healthboard.core.database import async_session_factory, engine
from healthboard.core.process import ProcessContext, resolve_version
from healthboard.core.redis import redis_client
from healthboard.health import HealthAggregator, build_dependencies
from healthboard.health.reporter import http_status_for

ICONS = {"ok": "✅", "error": "❌"}


async def main():
    print("--- Verifying service dependencies ---")
    print(f"Database: {settings.database_url.rsplit('@', 1)[-1]}")
    print(f"Redis:    {settings.redis_url.rsplit('@', 1)[-1]}")

    aggregator = HealthAggregator(
        build_dependencies(async_session_factory, redis_client),
        process=ProcessContext.capture(resolve_version(settings.app_version)),
        timeout=settings.health_probe_timeout_seconds,
    )

    try:
        report = await aggregator.aggregate()
    finally:
        await redis_client.aclose()
        await engine.dispose()

    for name, result in report.results.items():
        print(f"\n{ICONS[result.status]} {name}: {result.status} ({result.response_time_ms} ms)")
        if result.error:
            print(f"   error: {result.error}")
        for key, value in result.metadata.items():
            print(f"   {key}: {value}")

    print(f"\nOverall: {report.overall_status} (HTTP {http_status_for(report.overall_status)})")
    return 0 if report.overall_status != "unhealthy" else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
