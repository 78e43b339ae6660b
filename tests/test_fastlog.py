import math

import pytest

from codedrills.fastlog import fast_log, fast_log2


def test_one_gives_minus_127():
    assert fast_log2(1.0) == pytest.approx(-127.0, abs=1e-4)


def test_zero_matches_one():
    assert fast_log2(0.0) == fast_log2(1.0)


@pytest.mark.parametrize("value", [1.5, 3.0, 0.111328, 0.393555, 7.25])
def test_power_of_two_scaling_does_not_change_result(value):
    assert fast_log2(value) == fast_log2(value * 2) == fast_log2(value / 4)


@pytest.mark.parametrize("value", [0.111328, 0.393555, 1.0, 1.9, 5.0, 1000.0])
def test_positive_values_fall_in_fixed_band(value):
    assert -127.0001 <= fast_log2(value) <= -126.0


@pytest.mark.parametrize("value", [0.0, 0.111328, 0.393555, 1.0])
def test_natural_log_is_scaled_base_two(value):
    assert fast_log(value) == pytest.approx(fast_log2(value) * math.log(2), rel=1e-6)


def test_mantissa_approximation_is_increasing():
    samples = [1.0, 1.2, 1.4, 1.6, 1.8, 1.99]
    results = [fast_log2(v) for v in samples]
    assert results == sorted(results)