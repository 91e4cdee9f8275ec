"""Metric kinds and construction options.

``MetricSpec`` is the data-driven description handed to the constructors in
``metrics_facade.factory``. It can be built directly, from a mapping of
options (``MetricSpec.from_options({"name": ..., "help": ...})``) or from
keyword arguments.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from prometheus_client import Counter, Enum as EnumMetric, Gauge, Histogram, Info, Summary

from .exceptions import ConfigError

__all__ = [
    "MetricKind",
    "MetricSpec",
]


class MetricKind(str, Enum):
    counter = "counter"
    gauge = "gauge"
    summary = "summary"
    histogram = "histogram"
    enumeration = "enumeration"
    info = "info"

    @property
    def help_noun(self) -> str:
        return _HELP_NOUNS[self]

    @property
    def metric_cls(self) -> type:
        return _METRIC_CLASSES[self]


_HELP_NOUNS = {
    MetricKind.counter: "number of",
    MetricKind.gauge: "value of",
    MetricKind.summary: "summary of",
    MetricKind.histogram: "histogram of",
    MetricKind.enumeration: "enumeration of",
    MetricKind.info: "information of",
}

_METRIC_CLASSES = {
    MetricKind.counter: Counter,
    MetricKind.gauge: Gauge,
    MetricKind.summary: Summary,
    MetricKind.histogram: Histogram,
    MetricKind.enumeration: EnumMetric,
    MetricKind.info: Info,
}


@dataclass(frozen=True)
class MetricSpec:
    name: Any = None
    help: str | None = None
    namespace: Any = None
    subsystem: Any = None
    labels: Sequence[Any] | None = None
    states: Sequence[Any] | None = None  # enumeration only
    buckets: Sequence[float] | None = None  # histogram only
    unit: Any = None

    @classmethod
    def from_options(cls, spec: MetricSpec | Mapping[str, Any] | None = None, **options: Any) -> MetricSpec:
        """Coerce a spec, a mapping of options and/or keyword options into a MetricSpec.

        Keyword options override entries of ``spec``. Unknown option names raise
        ``ConfigError`` so typos do not silently drop configuration.
        """
        if isinstance(spec, MetricSpec):
            base = {f.name: getattr(spec, f.name) for f in fields(cls)}
        elif spec is None:
            base = {}
        elif isinstance(spec, Mapping):
            base = dict(spec)
        else:
            raise ConfigError(f"metric options must be a MetricSpec or mapping, got {type(spec).__name__}")
        base.update(options)
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in base if k not in known)
        if unknown:
            raise ConfigError(f"unknown metric option(s): {', '.join(unknown)}")
        return cls(**base)
