"""Tests for bool, float, char and string generators."""

import pytest

from conftest import ScriptedSource
from testcore.errors import InvalidBoundsError
from testcore.generators.scalars import next_bool, next_char, next_float, next_string


def test_bool_is_a_coin_flip():
    src = ScriptedSource(ints=[1, 0])
    assert next_bool(src) is True
    assert next_bool(src) is False
    assert src.calls == [("next_int", 0, 2), ("next_int", 0, 2)]


def test_bool_is_balanced(rng):
    """Over 10,000 draws true and false are each within 5% of half."""
    trues = sum(next_bool(rng) for _ in range(10_000))
    assert 4500 <= trues <= 5500


def test_char_printable_range(rng):
    for _ in range(5000):
        assert 32 <= ord(next_char(rng)) <= 127


def test_char_endpoints(lowest, highest):
    assert next_char(lowest) == " "
    assert next_char(highest) == "\x7f"
    assert lowest.calls == [(32, 128)]


def test_string_has_exact_length(rng):
    for _ in range(100):
        value = next_string(rng, 5)
        assert len(value) == 5
        assert all(32 <= ord(c) <= 127 for c in value)


def test_empty_string_draws_nothing():
    src = ScriptedSource()
    assert next_string(src, 0) == ""
    assert src.calls == []


def test_string_uses_one_draw_per_char():
    src = ScriptedSource(ints=[ord("a"), ord("b"), ord("c")])
    assert next_string(src, 3) == "abc"
    assert len(src.calls) == 3


def test_negative_string_length():
    with pytest.raises(InvalidBoundsError, match="non-negative"):
        next_string(ScriptedSource(), -1)


def test_float_narrows_to_single_precision():
    src = ScriptedSource(doubles=[0.5, 0.1])
    assert next_float(src) == 0.5
    narrowed = next_float(src)
    assert narrowed != 0.1
    assert narrowed == pytest.approx(0.1, rel=1e-7)


def test_float_near_one_rounds_up(highest):
    """A double just below 1.0 has no single-precision neighbour below it."""
    assert next_float(highest) == 1.0


def test_float_draws(rng):
    for _ in range(1000):
        assert 0.0 <= next_float(rng) <= 1.0
