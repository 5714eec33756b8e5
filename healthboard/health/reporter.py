from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import status
from pydantic.alias_generators import to_camel

from healthboard.health.models import HealthReport, OverallStatus, ProbeResult
from healthboard.schemas import HealthDashboardResponse


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def http_status_for(overall: OverallStatus) -> int:
    """Only an unhealthy system is a transport-level failure."""
    if overall is OverallStatus.UNHEALTHY:
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_200_OK


def _service_payload(result: ProbeResult) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "status": result.status.value,
        "responseTimeMs": result.response_time_ms,
    }
    if result.error is not None:
        payload["error"] = result.error
    for key, value in result.metadata.items():
        payload[to_camel(key)] = value
    return payload


def render_dashboard(report: HealthReport) -> HealthDashboardResponse:
    """Validate a report against the dashboard schema.

    Raises ``pydantic.ValidationError`` when the report does not fit it.
    """
    return HealthDashboardResponse.model_validate(
        {
            "status": report.overall_status.value,
            "timestamp": format_timestamp(report.timestamp),
            "version": report.version,
            "uptimeSeconds": report.uptime_seconds,
            "services": {
                name: _service_payload(result) for name, result in report.results.items()
            },
        }
    )
