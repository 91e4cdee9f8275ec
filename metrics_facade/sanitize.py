"""Name and value sanitization for Prometheus metric fields.

Two flavours:

  sanitize_name(v)   -> safe for metric names, namespaces, subsystems, units,
                        label names and info keys ([A-Za-z0-9_:], an invalid first
                        character dropped, single underscores, no
                        leading/trailing underscore)
  sanitize_value(v)  -> string form only; used for label values and
                        enumeration states which may carry any character

Inputs are either an ``Identifier`` (symbolic name, optionally namespaced),
an ``enum.Enum`` member (treated as an identifier) or any other value which is
converted with ``str``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

_INVALID_NAME_PREFIX = re.compile(r"^[^a-zA-Z_:]")
_INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_:]")
_UNDERSCORE_RUNS = re.compile(r"__+")
_EDGE_UNDERSCORES = re.compile(r"(^_+|_+$)")

NAME_JOIN = "_"


@dataclass(frozen=True)
class Identifier:
    """Symbolic identifier, e.g. ``Identifier("emails-sent", namespace="mail")``."""

    name: str
    namespace: str | None = None

    def qualified(self, join: str) -> str:
        if self.namespace:
            return f"{self.namespace}{join}{self.name}"
        return self.name

    def __str__(self) -> str:  # pragma: no cover - display only
        return self.qualified("/")


def _identifier(value: Any) -> Identifier | None:
    if isinstance(value, Identifier):
        return value
    if isinstance(value, Enum):
        raw = value.value if isinstance(value.value, str) else value.name
        return Identifier(raw)
    return None


def str_name(value: Any, join: str) -> str:
    """String form of ``value``; identifiers join namespace and name with ``join``."""
    ident = _identifier(value)
    if ident is not None:
        return ident.qualified(join)
    return str(value)


def sanitize_name(value: Any) -> str:
    """Sanitize a name, namespace, subsystem or label name."""
    out = _INVALID_NAME_PREFIX.sub("_", str_name(value, NAME_JOIN), count=1)
    out = _INVALID_NAME_CHARS.sub("_", out)
    out = _UNDERSCORE_RUNS.sub("_", out)
    return _EDGE_UNDERSCORES.sub("", out)


def sanitize_value(value: Any) -> str:
    """Identifiers yield their local name, everything else goes through ``str``."""
    ident = _identifier(value)
    if ident is not None:
        return ident.name
    return str(value)


def sanitize_names(values) -> tuple[str, ...]:
    return tuple(sanitize_name(v) for v in values)


def sanitize_values(values) -> tuple[str, ...]:
    return tuple(sanitize_value(v) for v in values)


__all__ = [
    "Identifier",
    "str_name",
    "sanitize_name",
    "sanitize_value",
    "sanitize_names",
    "sanitize_values",
]
