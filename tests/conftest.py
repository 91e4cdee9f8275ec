"""Pytest configuration for metrics_facade.

Responsibilities:
1. Ensure project root on sys.path.
2. Provide a fresh CollectorRegistry per test (never the process default).
3. Provide the shared metric option bundles used across test modules.
4. Clear METRICS_FACADE_* flags so a developer shell cannot leak into tests.
"""
import sys
from pathlib import Path

import pytest
from prometheus_client import CollectorRegistry

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests._helpers import M_HELP, M_LABELS, M_NAME, M_NS, M_SUBSYSTEM  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_facade_env(monkeypatch):
    monkeypatch.delenv("METRICS_FACADE_STRICT_HELP", raising=False)


@pytest.fixture()
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture()
def opts() -> dict:
    return {"name": M_NAME, "help": M_HELP, "namespace": M_NS, "subsystem": M_SUBSYSTEM}


@pytest.fixture()
def opts_l(opts) -> dict:
    return {**opts, "labels": list(M_LABELS)}
