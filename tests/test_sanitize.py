import re
from enum import Enum

import pytest

from metrics_facade import Identifier, sanitize_name, sanitize_value
from metrics_facade.sanitize import str_name


class Colour(str, Enum):
    dark_red = "dark-red"


class Level(Enum):
    high = 3


@pytest.mark.parametrize("value,expected", [
    (Identifier("foo"), "foo"),
    (Identifier("foo-bar"), "foo_bar"),
    (Identifier("foo-bar--baz"), "foo_bar_baz"),
    ("foo-bar", "foo_bar"),
    ("foo", "foo"),
    (Identifier("foo-bar-baz", namespace="tests.metrics"), "tests_metrics_foo_bar_baz"),
    ("_leading_and_trailing_", "leading_and_trailing"),
    ("keeps:colons", "keeps:colons"),
    ("a b/c", "a_b_c"),
    ("1abc", "abc"),
    ("2fa", "fa"),
    (Identifier("9-lives"), "lives"),
    (":ok", ":ok"),
    (Colour.dark_red, "dark_red"),
])
def test_sanitize_name(value, expected):
    assert sanitize_name(value) == expected


@pytest.mark.parametrize("value,expected", [
    (Identifier("foo"), "foo"),
    ("foo", "foo"),
    (42, "42"),
    ("foo-bar baz", "foo-bar baz"),
    (Identifier("local", namespace="ns"), "local"),
    (Colour.dark_red, "dark-red"),
    (Level.high, "high"),
])
def test_sanitize_value(value, expected):
    assert sanitize_value(value) == expected


@pytest.mark.parametrize("raw", [
    "a-b-c", "--x--", "x__y", "metric-2_total", "___", "A1-b2__C3-", "-_-_-", "plain",
])
def test_sanitize_name_output_shape(raw):
    for value in (raw, Identifier(raw)):
        out = sanitize_name(value)
        assert re.fullmatch(r"[A-Za-z0-9_:]*", out)
        assert "__" not in out
        assert not out.startswith("_")
        assert not out.endswith("_")


def test_str_name_join():
    ident = Identifier("foo-bar", namespace="my.ns")
    assert str_name(ident, "/") == "my.ns/foo-bar"
    assert str_name(ident, "_") == "my.ns_foo-bar"
    assert str_name(Identifier("foo"), "/") == "foo"
    assert str_name(3.5, "/") == "3.5"
