from __future__ import annotations

from collections import OrderedDict
from decimal import Decimal
import io

import pytest

from faultlog.pretty import pretty_value


class _Plain:
    pass


class _BrokenNumber(int):
    def __str__(self) -> str:
        raise RuntimeError("no text for you")


class _BrokenEverything(int):
    def __str__(self) -> str:
        raise RuntimeError("no text")

    def __repr__(self) -> str:
        raise RuntimeError("no repr")


@pytest.mark.parametrize(
    "value",
    [[1, 2], (1,), {"a": 1}, {1, 2}, frozenset(), OrderedDict(), bytearray(b"x")],
)
def test_containers_render_as_array(value) -> None:
    assert pretty_value(value) == "(Array)"


def test_none_and_booleans() -> None:
    assert pretty_value(None) == "(Null)"
    assert pretty_value(True) == "(True)"
    assert pretty_value(False) == "(False)"


def test_open_streams_render_as_resource(tmp_path) -> None:
    assert pretty_value(io.StringIO("x")) == "(Resource)"
    with open(tmp_path / "f.txt", "w", encoding="utf-8") as handle:
        assert pretty_value(handle) == "(Resource)"


def test_other_objects_render_as_object() -> None:
    assert pretty_value(_Plain()) == "(Object)"
    assert pretty_value(object()) == "(Object)"
    assert pretty_value(len) == "(Object)"


def test_scalars_are_quoted() -> None:
    assert pretty_value("abc") == '"abc"'
    assert pretty_value(42) == '"42"'
    assert pretty_value(3.5) == '"3.5"'
    assert pretty_value(Decimal("1.10")) == '"1.10"'
    assert pretty_value(b"raw") == "\"b'raw'\""


def test_long_scalars_are_truncated_with_ellipsis() -> None:
    rendered = pretty_value("x" * 200)
    assert rendered == '"' + "x" * 80 + '..."'


def test_truncation_boundary() -> None:
    assert pretty_value("y" * 79) == '"' + "y" * 79 + '"'
    assert pretty_value("y" * 80) == '"' + "y" * 80 + '..."'


def test_failing_str_falls_back_to_identity_repr() -> None:
    rendered = pretty_value(_BrokenNumber(3))
    assert rendered.startswith('"<')
    assert "_BrokenNumber object at" in rendered


def test_everything_failing_still_renders() -> None:
    rendered = pretty_value(_BrokenEverything(3))
    assert rendered.startswith('"<') or rendered == "(Object)"


@pytest.mark.parametrize(
    "value",
    [
        None,
        True,
        [list(range(1000))],
        {"k": "v" * 10_000},
        "z" * 10_000,
        10**500,
        _Plain(),
        _BrokenNumber(1),
        _BrokenEverything(1),
    ],
    ids=[
        "none",
        "bool",
        "nested-list",
        "long-dict-value",
        "long-string",
        "huge-int",
        "plain-object",
        "broken-str",
        "broken-everything",
    ],
)
def test_rendering_is_bounded(value) -> None:
    assert len(pretty_value(value)) <= 90
