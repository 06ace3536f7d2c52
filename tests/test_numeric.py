import math

import pytest

from zerg import numeric


def test_is_valid():
    assert numeric.is_valid(1.5)
    assert not numeric.is_valid(math.inf)
    assert not numeric.is_valid(math.nan)


def test_float_equal_within_tolerance():
    assert numeric.float_equal(1.0, 1.0 + 1e-7)
    assert not numeric.float_equal(1.0, 1.0 + 1e-5)
    assert numeric.float_equal(1.0, 1.05, 0.1)


def test_float_equal_non_finite():
    assert numeric.float_equal(math.nan, math.nan)
    assert numeric.float_equal(math.inf, -math.inf)
    assert not numeric.float_equal(math.nan, 1.0)
    assert not numeric.float_equal(math.inf, 1.0)


def test_round_up_documented_example():
    assert numeric.round_up(1.3456, 2) == pytest.approx(1.35)


def test_round_up_never_below_value():
    for value in (0.1234, 2.5, 7.0001, 10.999):
        assert numeric.round_up(value, 2) >= value


def test_round_up_nan_raises():
    with pytest.raises(ValueError):
        numeric.round_up(math.nan, 2)


def test_is_zero():
    assert numeric.is_zero(0.0)
    assert numeric.is_zero(-5e-7)
    assert not numeric.is_zero(1e-5)


@pytest.mark.parametrize("value", [3.5, -2, 0, 1e-12, -1e-12])
def test_sign_matches_value(value):
    result = numeric.sign(value)
    assert result * abs(value) == pytest.approx(value)
    assert result in (-1, 0, 1)
    assert (result == 0) == (value == 0)