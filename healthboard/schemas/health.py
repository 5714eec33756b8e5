from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ServiceStatus(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: Literal["ok", "error"]
    responseTimeMs: int = Field(ge=0)
    error: str | None = None


class RecordCounts(BaseModel):
    accounts: int
    sessions: int
    messages: int
    machines: int


class DatabaseStatus(ServiceStatus):
    recordCounts: RecordCounts | None = None


class RedisStatus(ServiceStatus):
    connectedClients: int | None = None
    usedMemory: str | None = None


class DashboardServices(BaseModel):
    database: DatabaseStatus
    redis: RedisStatus


class HealthDashboardResponse(BaseModel):
    status: Literal["healthy", "degraded", "unhealthy"]
    timestamp: str  # ISO-8601
    version: str
    uptimeSeconds: int = Field(ge=0)
    services: DashboardServices


class LivenessResponse(BaseModel):
    status: Literal["ok"] = "ok"
    version: str
    startedAt: str  # ISO-8601
    uptimeSeconds: int = Field(ge=0)
