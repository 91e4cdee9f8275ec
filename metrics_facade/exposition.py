"""Read-side helpers over a CollectorRegistry.

Formatting and sample collection are produced entirely by prometheus_client;
these helpers only forward and decode.

  render(registry)                       -> text exposition (str)
  family_names(registry)                 -> collected metric family names
  sample_value(registry, name, labels)   -> float | None
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prometheus_client import CollectorRegistry, generate_latest

from .sanitize import sanitize_name, sanitize_value


def render(registry: CollectorRegistry) -> str:
    return generate_latest(registry).decode("utf-8")


def family_names(registry: CollectorRegistry) -> list[str]:
    return [family.name for family in registry.collect()]


def sample_value(registry: CollectorRegistry, name: Any, labels: Mapping[Any, Any] | None = None) -> float | None:
    """Current value of sample ``name`` with exactly ``labels``, or None when absent.

    Sample names and label keys are sanitized like metric names, label values
    like values, so callers may pass the same identifiers used at construction.
    """
    sample_labels = {sanitize_name(k): sanitize_value(v) for k, v in (labels or {}).items()}
    return registry.get_sample_value(sanitize_name(name), sample_labels)


__all__ = ["render", "family_names", "sample_value"]
