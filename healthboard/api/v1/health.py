from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import ValidationError

from healthboard.api.deps import get_health_aggregator, get_process_context
from healthboard.core.process import ProcessContext
from healthboard.health import HealthAggregator
from healthboard.health.reporter import format_timestamp, http_status_for, render_dashboard
from healthboard.schemas import HealthDashboardResponse, LivenessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=LivenessResponse)
async def liveness(
    process: ProcessContext = Depends(get_process_context),
) -> LivenessResponse:
    """Report that the process is up, without touching any dependency."""
    return LivenessResponse(
        version=process.version,
        startedAt=format_timestamp(process.started_at),
        uptimeSeconds=process.uptime_seconds(),
    )


@router.get(
    "/health/dashboard",
    response_model=HealthDashboardResponse,
    response_model_exclude_none=True,
    responses={503: {"model": HealthDashboardResponse}},
)
async def health_dashboard(
    response: Response,
    aggregator: HealthAggregator = Depends(get_health_aggregator),
) -> HealthDashboardResponse:
    """Check every dependency and report overall service health."""
    report = await aggregator.aggregate()

    try:
        dashboard = render_dashboard(report)
    except ValidationError:
        logger.exception("Health report does not match the dashboard schema")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Malformed health report",
        ) from None

    response.status_code = http_status_for(report.overall_status)
    return dashboard
