import pytest
from prometheus_client import CollectorRegistry

import metrics_facade as mf
from metrics_facade.testing import isolated_registry, register_all

from tests._helpers import M_FULLNAME


def test_register_exports_fully_qualified_name(registry, opts):
    mf.register(registry, mf.counter(opts))
    families = list(registry.collect())
    assert families[0].name == M_FULLNAME
    assert mf.family_names(registry) == [M_FULLNAME]


def test_register_returns_metric(registry, opts):
    c = mf.counter(opts)
    assert mf.register(registry, c) is c


def test_duplicate_registration_surfaces_registry_error(registry, opts):
    mf.register(registry, mf.counter(opts))
    with pytest.raises(ValueError, match="Duplicated timeseries"):
        mf.register(registry, mf.counter(opts))


def test_same_metric_in_two_registries(opts):
    c = mf.counter(opts)
    a, b = CollectorRegistry(), CollectorRegistry()
    mf.register(a, c)
    mf.register(b, c)
    mf.inc(c)
    assert a.get_sample_value(M_FULLNAME + "_total") == 1.0
    assert b.get_sample_value(M_FULLNAME + "_total") == 1.0


def test_unregister(registry, opts):
    c = mf.register(registry, mf.counter(opts))
    assert mf.unregister(registry, c) is c
    assert mf.family_names(registry) == []
    with pytest.raises(KeyError):
        mf.unregister(registry, c)
    # name is free again
    mf.register(registry, mf.counter(opts))


def test_isolated_registry_registers_and_cleans_up(opts):
    c = mf.counter(opts)
    with isolated_registry(c) as reg:
        mf.inc(c, 5)
        assert reg.get_sample_value(M_FULLNAME + "_total") == 5.0
    assert mf.family_names(reg) == []


def test_isolated_registry_tolerates_early_unregister(opts):
    g = mf.gauge(opts)
    with isolated_registry(g) as reg:
        mf.unregister(reg, g)
    assert mf.family_names(reg) == []


def test_register_all(registry):
    a = mf.gauge(name="a", help="h")
    b = mf.gauge(name="b", help="h")
    assert register_all(registry, a, b) == (a, b)
    assert mf.family_names(registry) == ["a", "b"]


def test_register_logs_family_name(registry, opts, caplog):
    import logging

    with caplog.at_level(logging.DEBUG, logger="metrics_facade.registration"):
        mf.register(registry, mf.counter(opts))
    assert any(M_FULLNAME in r.getMessage() for r in caplog.records)
