"""Approximate pi by Liu Hui's polygon doubling."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence


def liuhui(n: int) -> list[tuple[int, float]]:
    """Return (sides, estimate) for the first n polygons, starting at a hexagon's half."""
    estimates: list[tuple[int, float]] = []
    k, y2 = 3.0, 1.0
    for i in range(max(n, 0)):
        estimates.append((3 * (1 << i), k * math.sqrt(y2)))
        y2 = 2 - math.sqrt(4 - y2)
        k *= 2.0
    return estimates


def main(argv: Sequence[str] | None = None) -> int:
    closed_form = math.sqrt(2 - math.sqrt(2 + math.sqrt(2 + math.sqrt(2 + math.sqrt(2 + 1))))) * 48.0
    print(f"{closed_form:.51f}")
    estimates = liuhui(17)
    for i, (sides, estimate) in enumerate(estimates):
        print(f"sides = {sides}\tpi({i}) = {estimate:.51f}")
    print(f"DEBUG: {len(estimates)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())