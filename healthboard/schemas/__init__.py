from __future__ import annotations

from .health import (
    DashboardServices,
    DatabaseStatus,
    HealthDashboardResponse,
    LivenessResponse,
    RecordCounts,
    RedisStatus,
    ServiceStatus,
)

__all__ = [
    "DashboardServices",
    "DatabaseStatus",
    "HealthDashboardResponse",
    "LivenessResponse",
    "RecordCounts",
    "RedisStatus",
    "ServiceStatus",
]
