"""
Metric constructors over prometheus_client.

One constructor per metric kind. Each accepts a ``MetricSpec``, a mapping of
options or keyword options (``name`` required; ``help``, ``namespace``,
``subsystem``, ``labels``, ``unit`` optional; ``states`` required for
enumerations; ``buckets`` optional for histograms).

Names, namespaces, subsystems, units and label names are sanitized with
``sanitize_name``; enumeration states with ``sanitize_value``. A missing
``help`` is synthesized as ``"<kind noun> <qualified name>"`` unless strict
help is requested (``strict_help=True`` or METRICS_FACADE_STRICT_HELP).

Metrics are created with ``registry=None`` and returned unregistered; use
``metrics_facade.register`` to attach them to a ``CollectorRegistry``.

    from metrics_facade import counter, inc, Identifier

    emails_sent = counter(name=Identifier("emails-sent"), help="emails we sent")
    inc(emails_sent)
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from prometheus_client import Counter, Enum, Gauge, Histogram, Info, Summary

from .env_flags import STRICT_HELP_ENV, strict_help_enabled
from .exceptions import ConfigError
from .sanitize import sanitize_name, sanitize_names, sanitize_values, str_name
from .spec import MetricKind, MetricSpec

logger = logging.getLogger(__name__)

SpecLike = MetricSpec | Mapping[str, Any] | None


def default_help(kind: MetricKind, name: Any) -> str:
    return f"{kind.help_noun} {str_name(name, '/')}"


def _resolve_help(kind: MetricKind, spec: MetricSpec, strict_help: bool | None) -> str:
    if spec.help is not None:
        return spec.help
    strict = strict_help_enabled() if strict_help is None else strict_help
    if strict:
        logger.warning("metric %s rejected: help is required (%s)", str_name(spec.name, '/'), STRICT_HELP_ENV)
        raise ConfigError(f"{kind.value} {str_name(spec.name, '/')!r} requires help")
    return default_help(kind, spec.name)


def build_collector(kind: MetricKind, spec: SpecLike = None, *, strict_help: bool | None = None, **options: Any) -> Any:
    """Validate and sanitize options, then instantiate the prometheus_client class for ``kind``."""
    spec = MetricSpec.from_options(spec, **options)
    if spec.name is None or spec.name == "":
        raise ConfigError(f"{kind.value} requires a name")
    if spec.states is not None and kind is not MetricKind.enumeration:
        raise ConfigError(f"states only apply to enumerations, not {kind.value}")
    if spec.buckets is not None and kind is not MetricKind.histogram:
        raise ConfigError(f"buckets only apply to histograms, not {kind.value}")

    kwargs: dict[str, Any] = {
        "namespace": sanitize_name(spec.namespace) if spec.namespace is not None else "",
        "subsystem": sanitize_name(spec.subsystem) if spec.subsystem is not None else "",
        "unit": sanitize_name(spec.unit) if spec.unit is not None else "",
        "registry": None,
    }
    if spec.labels:
        kwargs["labelnames"] = sanitize_names(spec.labels)
    if kind is MetricKind.enumeration:
        if not spec.states:
            raise ConfigError(f"enumeration {str_name(spec.name, '/')!r} requires non-empty states")
        kwargs["states"] = list(sanitize_values(spec.states))
    if kind is MetricKind.histogram and spec.buckets is not None:
        kwargs["buckets"] = tuple(spec.buckets)

    name = sanitize_name(spec.name)
    documentation = _resolve_help(kind, spec, strict_help)
    collector = kind.metric_cls(name, documentation, **kwargs)
    logger.debug("created %s metric name=%s namespace=%s subsystem=%s labels=%s",
                 kind.value, name, kwargs["namespace"], kwargs["subsystem"], kwargs.get("labelnames", ()))
    return collector


def counter(spec: SpecLike = None, **options: Any) -> Counter:
    """Create a Counter."""
    return build_collector(MetricKind.counter, spec, **options)


def gauge(spec: SpecLike = None, **options: Any) -> Gauge:
    """Create a Gauge."""
    return build_collector(MetricKind.gauge, spec, **options)


def summary(spec: SpecLike = None, **options: Any) -> Summary:
    """Create a Summary."""
    return build_collector(MetricKind.summary, spec, **options)


def histogram(spec: SpecLike = None, **options: Any) -> Histogram:
    """Create a Histogram. Accepts optional ``buckets``."""
    return build_collector(MetricKind.histogram, spec, **options)


def enumeration(spec: SpecLike = None, **options: Any) -> Enum:
    """Create an Enum metric. Also requires ``states``; the first state is the initial one."""
    return build_collector(MetricKind.enumeration, spec, **options)


def info(spec: SpecLike = None, **options: Any) -> Info:
    """Create an Info metric."""
    return build_collector(MetricKind.info, spec, **options)


__all__ = [
    "build_collector",
    "default_help",
    "counter",
    "gauge",
    "summary",
    "histogram",
    "enumeration",
    "info",
]
