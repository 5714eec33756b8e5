from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from importlib import metadata
from time import monotonic

DEFAULT_VERSION = "0.0.0"


def resolve_version(configured: str | None, distribution: str = "healthboard") -> str:
    """Pick the process version from deployment config, then package metadata."""
    if configured:
        return configured
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return DEFAULT_VERSION


@dataclass(frozen=True)
class ProcessContext:
    """Immutable facts about the running process, captured once at startup."""

    version: str
    started_at: datetime
    started_monotonic: float = field(repr=False)

    @classmethod
    def capture(cls, version: str) -> ProcessContext:
        return cls(
            version=version,
            started_at=datetime.now(UTC),
            started_monotonic=monotonic(),
        )

    def uptime_seconds(self) -> int:
        return max(0, int(monotonic() - self.started_monotonic))
