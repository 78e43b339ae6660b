"""Solve symmetric positive-definite systems by an upper factorisation without roots."""

from __future__ import annotations

from collections.abc import Sequence


def upper_factor(a: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the upper factor R of a square matrix, with A = R^T diag(R)^-1 R."""
    order = len(a)
    if any(len(row) != order for row in a):
        raise ValueError("matrix must be square")
    r = [[0.0] * order for _ in range(order)]
    for i in range(order):
        for j in range(i, order):
            correction = sum(r[k][i] / r[k][k] * r[k][j] for k in range(i))
            r[i][j] = float(a[i][j]) - correction
        if r[i][i] == 0:
            raise ValueError("matrix is singular")
    return r


def solve_augmented(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve the system given as an n-by-(n+1) augmented matrix [A | b]."""
    order = len(augmented)
    if any(len(row) != order + 1 for row in augmented):
        raise ValueError("augmented matrix must have one more column than rows")
    a = [row[:order] for row in augmented]
    b = [float(row[order]) for row in augmented]
    r = upper_factor(a)

    y: list[float] = []
    for i in range(order):
        y.append(b[i] - sum(r[k][i] / r[k][k] * y[k] for k in range(i)))

    x = [0.0] * order
    for i in reversed(range(order)):
        tail = sum(r[i][k] * x[k] for k in range(i + 1, order))
        x[i] = (y[i] - tail) / r[i][i]
    return x