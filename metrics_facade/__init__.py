"""Idiomatic Python API over prometheus_client.

This package does not try to hide prometheus_client; you will likely use its
objects directly too. The functions here give a uniform way to create
collectors with sanitized names and to update them without caring which
concrete kind you hold.

All constructors take the same options: ``name`` is required; ``help``,
``namespace``, ``subsystem``, ``labels`` and ``unit`` are optional. A missing
``help`` is synthesized from the name unless METRICS_FACADE_STRICT_HELP is set.

The expected usage pattern is a long lived, module level metric::

    from prometheus_client import REGISTRY

    import metrics_facade as mf

    _m_emails_sent = mf.register(REGISTRY, mf.counter(name="emails-sent", help="emails we sent"))

    def send_email():
        mf.inc(_m_emails_sent)
"""
from __future__ import annotations

from .exceptions import ConfigError, MetricsFacadeError, UnsupportedOperationError
from .exposition import family_names, render, sample_value
from .factory import counter, enumeration, gauge, histogram, info, summary
from .operations import (
    dec,
    inc,
    observe,
    set,  # noqa: A004
    set_info,
    set_state,
    set_value,
    start_timer,
    timed,
    with_labels,
)
from .protocols import (
    Decrementable,
    Incrementable,
    Informable,
    Labelable,
    Observable,
    Settable,
    Stateful,
)
from .registration import register, unregister
from .sanitize import Identifier, sanitize_name, sanitize_value
from .spec import MetricKind, MetricSpec

__version__ = "0.1.0"

__all__ = [
    # data model
    "Identifier",
    "MetricKind",
    "MetricSpec",
    # errors
    "MetricsFacadeError",
    "ConfigError",
    "UnsupportedOperationError",
    # sanitizer
    "sanitize_name",
    "sanitize_value",
    # constructors
    "counter",
    "gauge",
    "summary",
    "histogram",
    "enumeration",
    "info",
    # registry
    "register",
    "unregister",
    "render",
    "family_names",
    "sample_value",
    # operations
    "with_labels",
    "inc",
    "dec",
    "set",
    "set_value",
    "observe",
    "start_timer",
    "timed",
    "set_state",
    "set_info",
    # capabilities
    "Labelable",
    "Incrementable",
    "Decrementable",
    "Settable",
    "Observable",
    "Stateful",
    "Informable",
]
