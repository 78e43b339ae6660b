import pytest

from codedrills.lspa import fit_polynomial

X = [float(i) for i in range(1, 17)]
Y = [4.00, 6.40, 8.00, 8.80, 9.22, 9.50, 9.70, 9.86, 10.00, 10.20, 10.32,
     10.42, 10.50, 10.55, 10.58, 10.60]


def test_source_data_satisfies_normal_equations():
    coeffs = fit_polynomial(X, Y)
    assert len(coeffs) == 3
    residuals = [y - sum(c * x**k for k, c in enumerate(coeffs)) for x, y in zip(X, Y)]
    for power in range(3):
        assert sum(r * x**power for r, x in zip(residuals, X)) == pytest.approx(0, abs=1e-6)


def test_source_data_curve_is_concave():
    coeffs = fit_polynomial(X, Y)
    assert coeffs[2] < 0
    assert coeffs[1] > 0


def test_exact_quadratic_recovered():
    xs = [0, 1, 2, 3]
    ys = [1, 6, 17, 34]
    assert fit_polynomial(xs, ys) == pytest.approx([1, 2, 3])


def test_linear_degree():
    assert fit_polynomial([0, 1, 2], [1, 3, 5], degree=1) == pytest.approx([1, 2])


def test_length_mismatch():
    with pytest.raises(ValueError):
        fit_polynomial([1, 2], [1])


def test_too_few_points():
    with pytest.raises(ValueError):
        fit_polynomial([1, 1], [2, 2])


def test_negative_degree():
    with pytest.raises(ValueError):
        fit_polynomial([1, 2], [1, 2], degree=-1)