"""Capability protocols for prometheus_client metrics.

Each metric kind implements only the capabilities it supports:

  Counter             Labelable, Incrementable
  Gauge               Labelable, Incrementable, Decrementable, Settable
  Summary/Histogram   Labelable, Observable
  Enum                Labelable, Stateful
  Info                Labelable, Informable

Labeled children share their parent's class and therefore its capabilities.
The protocols are ``runtime_checkable`` so the generic operations can reject
an unsupported metric before touching it; static type checkers flag the same
mismatches at analysis time.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Labelable(Protocol):
    def labels(self, *labelvalues: Any, **labelkwargs: Any) -> Any: ...


@runtime_checkable
class Incrementable(Protocol):
    def inc(self, amount: float = 1) -> None: ...


@runtime_checkable
class Decrementable(Protocol):
    def dec(self, amount: float = 1) -> None: ...


@runtime_checkable
class Settable(Protocol):
    def set(self, value: float) -> None: ...


@runtime_checkable
class Observable(Protocol):
    def observe(self, amount: float) -> None: ...


@runtime_checkable
class Stateful(Protocol):
    def state(self, state: str) -> None: ...


@runtime_checkable
class Informable(Protocol):
    def info(self, val: dict[str, str]) -> None: ...


__all__ = [
    "Labelable",
    "Incrementable",
    "Decrementable",
    "Settable",
    "Observable",
    "Stateful",
    "Informable",
]
