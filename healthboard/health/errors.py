from __future__ import annotations


class ProbeError(Exception):
    """Base class for failures raised inside a dependency probe."""


class ConnectivityError(ProbeError):
    """The dependency could not be reached."""


class OperationError(ProbeError):
    """The dependency is reachable but an individual read failed."""


def describe_error(exc: BaseException) -> str:
    """Human-readable message for an exception, falling back to its type name."""
    return str(exc) or exc.__class__.__name__
