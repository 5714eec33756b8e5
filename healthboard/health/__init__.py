from healthboard.health.aggregator import HealthAggregator, classify
from healthboard.health.dependencies import DATABASE, REDIS, build_dependencies
from healthboard.health.errors import ConnectivityError, OperationError, ProbeError
from healthboard.health.models import (
    Criticality,
    DependencyDescriptor,
    HealthReport,
    OverallStatus,
    ProbeResult,
    ProbeStatus,
)
from healthboard.health.probes import DatabaseProbe, Probe, RedisProbe

__all__ = [
    "DATABASE",
    "REDIS",
    "ConnectivityError",
    "Criticality",
    "DatabaseProbe",
    "DependencyDescriptor",
    "HealthAggregator",
    "HealthReport",
    "OperationError",
    "OverallStatus",
    "Probe",
    "ProbeError",
    "ProbeResult",
    "ProbeStatus",
    "RedisProbe",
    "build_dependencies",
    "classify",
]
