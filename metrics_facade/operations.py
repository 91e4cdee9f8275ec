"""Generic metric operations.

Polymorphic functions over prometheus_client metrics and their labeled
children. Each operation requires one capability protocol (see
``metrics_facade.protocols``) and forwards to the metric's own atomic update
method; an unsupported metric raises ``UnsupportedOperationError``.

  inc(m, amount=1)       Counter, Gauge
  dec(m, amount=1)       Gauge
  set(m, amount)         Gauge (alias of set_value)
  observe(m, amount)     Summary, Histogram
  start_timer(m)         Summary, Histogram -> stop()
  timed(m)               Summary, Histogram (context manager / decorator)
  set_state(m, state)    Enum
  set_info(m, mapping)   Info
  with_labels(m, values) any parent metric created with labels

Value errors from the library (negative counter increment, wrong label
cardinality, unknown enumeration state) propagate unchanged.
"""
from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import Enum
from timeit import default_timer
from typing import Any, TypeVar

from .exceptions import UnsupportedOperationError
from .protocols import (
    Decrementable,
    Incrementable,
    Informable,
    Labelable,
    Observable,
    Settable,
    Stateful,
)
from .sanitize import Identifier, sanitize_name, sanitize_value, sanitize_values

P = TypeVar("P")


def _require(metric: Any, capability: type[P], operation: str) -> P:
    if not isinstance(metric, capability):
        raise UnsupportedOperationError(
            f"{type(metric).__name__} does not support {operation} (requires {capability.__name__})"
        )
    return metric  # type: ignore[return-value]


def with_labels(metric: Labelable, values: Any) -> Any:
    """Return the child of ``metric`` bound to ``values``.

    ``values`` is an ordered sequence matching the metric's label names, a
    mapping of label name to value, or a single scalar for metrics with
    one label. Values are sanitized with ``sanitize_value``.
    """
    parent = _require(metric, Labelable, "with_labels")
    if isinstance(values, Mapping):
        return parent.labels(**{sanitize_name(k): sanitize_value(v) for k, v in values.items()})
    if isinstance(values, (str, bytes, Identifier, Enum)) or not isinstance(values, Iterable):
        values = (values,)
    return parent.labels(*sanitize_values(values))


def inc(metric: Incrementable, amount: float = 1) -> None:
    """Increment a Counter or Gauge by 1 or ``amount``."""
    _require(metric, Incrementable, "inc").inc(float(amount))


def dec(metric: Decrementable, amount: float = 1) -> None:
    """Decrement a Gauge by 1 or ``amount``."""
    _require(metric, Decrementable, "dec").dec(float(amount))


def set_value(metric: Settable, amount: float) -> None:
    """Set a Gauge to ``amount``."""
    _require(metric, Settable, "set").set(float(amount))


def observe(metric: Observable, amount: float) -> None:
    _require(metric, Observable, "observe").observe(float(amount))


def start_timer(metric: Observable) -> Callable[[], float]:
    """Start a timer on a Summary or Histogram.

    Returns a function that, when called, observes the elapsed seconds into
    the metric and returns them. Every call records a new observation.
    """
    target = _require(metric, Observable, "start_timer")
    start = default_timer()

    def stop() -> float:
        # Time can go backwards.
        elapsed = max(default_timer() - start, 0.0)
        target.observe(elapsed)
        return elapsed

    return stop


def timed(metric: Observable) -> contextlib.AbstractContextManager[None]:
    """Measure the run time of the enclosed block into a Summary or Histogram.

    The timer is stopped exactly once on every exit path; exceptions raised
    inside the block propagate after the observation is recorded. An
    unobservable metric is rejected here, before any block or function runs.
    Usable as a decorator as well::

        with timed(request_latency):
            handle()

        @timed(request_latency)
        def handle(): ...
    """
    return _timed(_require(metric, Observable, "timed"))


@contextlib.contextmanager
def _timed(metric: Observable) -> Iterator[None]:
    stop = start_timer(metric)
    try:
        yield
    finally:
        stop()


def set_state(metric: Stateful, state: Any) -> None:
    """Set the state of an Enum metric. The state is sanitized with ``sanitize_value``."""
    _require(metric, Stateful, "set_state").state(sanitize_value(state))


def sanitize_info(info: Mapping[Any, Any]) -> dict[str, str]:
    return {sanitize_name(k): sanitize_value(v) for k, v in info.items()}


def set_info(metric: Informable, info: Mapping[Any, Any]) -> None:
    """Replace the key/value set of an Info metric. Keys and values are sanitized."""
    _require(metric, Informable, "set_info").info(sanitize_info(info))


set = set_value  # noqa: A001

__all__ = [
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
    "sanitize_info",
]
