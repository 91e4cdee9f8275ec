"""Registry attachment helpers.

Thin forwards to ``CollectorRegistry.register`` / ``unregister``. Duplicate
names (``ValueError: Duplicated timeseries in CollectorRegistry``) and unknown
collectors (``KeyError``) propagate unchanged; nothing is recovered here.
"""
from __future__ import annotations

import logging
from typing import Any, TypeVar

from prometheus_client import CollectorRegistry

logger = logging.getLogger(__name__)

M = TypeVar("M")


def _describe(metric: Any) -> str:
    describe = getattr(metric, "describe", None)
    if callable(describe):
        names = ",".join(family.name for family in describe())
        if names:
            return names
    return type(metric).__name__


def register(registry: CollectorRegistry, metric: M) -> M:
    """Register ``metric`` into ``registry`` and return it."""
    registry.register(metric)  # type: ignore[arg-type]
    logger.debug("registered metric %s", _describe(metric))
    return metric


def unregister(registry: CollectorRegistry, metric: M) -> M:
    """Remove ``metric`` from ``registry`` and return it."""
    registry.unregister(metric)  # type: ignore[arg-type]
    logger.debug("unregistered metric %s", _describe(metric))
    return metric


__all__ = ["register", "unregister"]
