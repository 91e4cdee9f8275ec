"""Testing helpers for metrics isolation.

Provides isolated_registry() which yields a brand new CollectorRegistry so
tests never touch the process-wide default registry, and register_all() to
attach several metrics in one call.
"""
from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from typing import Any

from prometheus_client import CollectorRegistry

from .registration import register, unregister

logger = logging.getLogger(__name__)


def register_all(registry: CollectorRegistry, *metrics: Any) -> tuple[Any, ...]:
    return tuple(register(registry, m) for m in metrics)


@contextlib.contextmanager
def isolated_registry(*metrics: Any) -> Iterator[CollectorRegistry]:
    """Yield a fresh registry with ``metrics`` registered; unregister them on exit."""
    registry = CollectorRegistry(auto_describe=True)
    register_all(registry, *metrics)
    try:
        yield registry
    finally:
        for m in metrics:
            try:
                unregister(registry, m)
            except KeyError:
                # already removed inside the block
                logger.debug("metric %r was not registered at teardown", m)


__all__ = ["isolated_registry", "register_all"]
