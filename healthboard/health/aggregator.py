from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime

from healthboard.core.process import ProcessContext
from healthboard.health.models import (
    Criticality,
    DependencyDescriptor,
    HealthReport,
    OverallStatus,
    ProbeResult,
)
from healthboard.health.probes import elapsed_ms

logger = logging.getLogger(__name__)


def classify(
    criticality: Mapping[str, Criticality],
    results: Mapping[str, ProbeResult],
) -> OverallStatus:
    """Fold per-dependency results into one overall status.

    Any failed CRITICAL dependency makes the system unhealthy; otherwise any
    failed NONCRITICAL dependency makes it degraded.
    """
    failed = {criticality[name] for name, result in results.items() if not result.ok}
    if Criticality.CRITICAL in failed:
        return OverallStatus.UNHEALTHY
    if Criticality.NONCRITICAL in failed:
        return OverallStatus.DEGRADED
    return OverallStatus.HEALTHY


class HealthAggregator:
    """Runs every registered probe concurrently and builds a HealthReport."""

    def __init__(
        self,
        descriptors: Sequence[DependencyDescriptor],
        process: ProcessContext,
        timeout: float = 5.0,
    ) -> None:
        names = [descriptor.name for descriptor in descriptors]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate dependency names: {', '.join(duplicates)}")
        if timeout <= 0:
            raise ValueError("Probe timeout must be positive")

        self._descriptors = tuple(descriptors)
        self._criticality = {d.name: d.criticality for d in self._descriptors}
        self._process = process
        self._timeout = timeout

    async def aggregate(self) -> HealthReport:
        results = await asyncio.gather(*(self._run(d) for d in self._descriptors))
        by_name = {
            descriptor.name: result
            for descriptor, result in zip(self._descriptors, results, strict=True)
        }

        overall = classify(self._criticality, by_name)
        if overall is not OverallStatus.HEALTHY:
            failed = [name for name, result in by_name.items() if not result.ok]
            logger.info("Health report is %s, failing: %s", overall, ", ".join(failed))

        return HealthReport(
            overall_status=overall,
            timestamp=datetime.now(UTC),
            version=self._process.version,
            uptime_seconds=self._process.uptime_seconds(),
            results=by_name,
        )

    async def _run(self, descriptor: DependencyDescriptor) -> ProbeResult:
        start = time.monotonic()
        try:
            return await asyncio.wait_for(descriptor.probe.check(), timeout=self._timeout)
        except TimeoutError:
            logger.warning("Health probe %s timed out after %gs", descriptor.name, self._timeout)
            return ProbeResult.failure(elapsed_ms(start), f"timed out after {self._timeout:g}s")
        except Exception as exc:
            # Probes should never raise; keep the report complete if one does
            logger.warning("Health probe %s raised %s: %s", descriptor.name, type(exc).__name__, exc)
            return ProbeResult.failure(elapsed_ms(start), exc)
