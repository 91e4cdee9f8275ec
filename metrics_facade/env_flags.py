"""Environment flag helpers.

Interprets environment variables as boolean feature flags using the canonical
truthy set {"1","true","yes","on"} (case-insensitive). Flags are read on every
call so tests can toggle them with ``monkeypatch.setenv``.

Recognized flags:
  METRICS_FACADE_STRICT_HELP  -> constructors reject a missing ``help``
"""
from __future__ import annotations

import os

TRUTHY_SET: set[str] = {"1", "true", "yes", "on"}

STRICT_HELP_ENV = "METRICS_FACADE_STRICT_HELP"


def is_truthy(value: str | None) -> bool:
    if not value:
        return False
    return value.strip().lower() in TRUTHY_SET


def is_truthy_env(name: str) -> bool:
    return is_truthy(os.environ.get(name))


def strict_help_enabled() -> bool:
    return is_truthy_env(STRICT_HELP_ENV)


__all__ = [
    'TRUTHY_SET',
    'STRICT_HELP_ENV',
    'is_truthy',
    'is_truthy_env',
    'strict_help_enabled',
]
