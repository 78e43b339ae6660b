import math

import pytest

from codedrills.pi import liuhui, main


def test_first_estimate():
    assert liuhui(1) == [(3, 3.0)]


def test_count_and_sides_doubling():
    estimates = liuhui(8)
    assert len(estimates) == 8
    sides = [s for s, _ in estimates]
    assert all(b == 2 * a for a, b in zip(sides, sides[1:]))


def test_estimates_increase_toward_pi():
    values = [v for _, v in liuhui(10)]
    assert values == sorted(values)
    assert all(v < math.pi for v in values)
    assert values[-1] == pytest.approx(math.pi, abs=1e-4)


@pytest.mark.parametrize("n", [0, -3])
def test_no_estimates(n):
    assert liuhui(n) == []


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("3.141")
    assert lines[1].startswith("sides = 3\tpi(0) = 3.000")
    assert lines[-1] == "DEBUG: 17"
    assert len(lines) == 19