"""metrics_facade exception hierarchy.

Small exception tree for failures the facade itself detects. Errors raised by
prometheus_client (negative counter increments, label cardinality mismatch,
unknown enumeration states, duplicate registration) are never wrapped and
surface to callers as the library's own ``ValueError``.
"""
from __future__ import annotations


class MetricsFacadeError(Exception):
    """Base class for all facade exceptions."""


class ConfigError(MetricsFacadeError, ValueError):
    """Invalid metric construction options (missing name/help/states, misplaced options)."""


class UnsupportedOperationError(MetricsFacadeError, TypeError):
    """Operation invoked on a metric whose kind does not support it."""


__all__ = [
    "MetricsFacadeError",
    "ConfigError",
    "UnsupportedOperationError",
]
