from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from healthboard.health.errors import describe_error

if TYPE_CHECKING:
    from healthboard.health.probes import Probe


class ProbeStatus(StrEnum):
    OK = "ok"
    ERROR = "error"


class Criticality(StrEnum):
    CRITICAL = "critical"  # failure makes the system unhealthy
    NONCRITICAL = "noncritical"  # failure only degrades it


class OverallStatus(StrEnum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class ProbeResult(BaseModel):
    """Outcome of a single dependency check."""

    model_config = ConfigDict(frozen=True)

    status: ProbeStatus
    response_time_ms: int = Field(ge=0)
    error: str | None = None
    metadata: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("metadata", mode="after")
    @classmethod
    def freeze_metadata(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @property
    def ok(self) -> bool:
        return self.status is ProbeStatus.OK

    @classmethod
    def success(cls, response_time_ms: int, **metadata: Any) -> ProbeResult:
        return cls(
            status=ProbeStatus.OK,
            response_time_ms=response_time_ms,
            metadata=metadata,
        )

    @classmethod
    def failure(cls, response_time_ms: int, exc: BaseException | str) -> ProbeResult:
        message = exc if isinstance(exc, str) else describe_error(exc)
        return cls(
            status=ProbeStatus.ERROR,
            response_time_ms=response_time_ms,
            error=message,
        )


@dataclass(frozen=True)
class DependencyDescriptor:
    name: str
    criticality: Criticality
    probe: Probe


@dataclass(frozen=True)
class HealthReport:
    overall_status: OverallStatus
    timestamp: datetime
    version: str
    uptime_seconds: int
    results: Mapping[str, ProbeResult]

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", MappingProxyType(dict(self.results)))
