"""Least-squares polynomial approximation of discrete data."""

from __future__ import annotations

from collections.abc import Sequence

from codedrills.cholesky import solve_augmented


def fit_polynomial(
    x: Sequence[float], y: Sequence[float], degree: int = 2
) -> list[float]:
    """Return coefficients a0..a_degree of the least-squares polynomial through (x, y)."""
    if degree < 0:
        raise ValueError("degree must not be negative")
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    size = degree + 1
    power_sums = [sum(xi**k for xi in x) for k in range(2 * degree + 1)]
    moments = [sum(yi * xi**i for xi, yi in zip(x, y)) for i in range(size)]
    augmented = [
        [power_sums[i + j] for j in range(size)] + [moments[i]] for i in range(size)
    ]
    return solve_augmented(augmented)