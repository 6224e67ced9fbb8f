"""One- and two-dimensional prefix sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Any


class PrefixSum:
    """Half-open range sums over a fixed sequence."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._s = list(accumulate(values, initial=0))
        self._n = len(self._s) - 1

    def prod(self, l: int, r: int) -> Any:
        """Sum of ``values[l:r]``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        return self._s[r] - self._s[l]


class PrefixSum2D:
    """Rectangle sums over a fixed grid."""

    def __init__(self, grid: Sequence[Sequence[Any]]) -> None:
        self._h = len(grid)
        self._w = len(grid[0]) if grid else 0
        s: list[list[Any]] = [[0] * (self._w + 1) for _ in range(self._h + 1)]
        for i, row in enumerate(grid):
            if len(row) != self._w:
                raise ValueError("grid rows must have equal length")
            for j, x in enumerate(row):
                s[i + 1][j + 1] = s[i][j + 1] + s[i + 1][j] - s[i][j] + x
        self._s = s

    def prod(self, x1: int, x2: int, y1: int, y2: int) -> Any:
        """Sum over rows ``[x1, x2)`` and columns ``[y1, y2)``."""
        if not 0 <= x1 <= x2 <= self._h:
            raise IndexError(f"rows [{x1}, {x2}) out of bounds")
        if not 0 <= y1 <= y2 <= self._w:
            raise IndexError(f"columns [{y1}, {y2}) out of bounds")
        if x1 == x2 or y1 == y2:
            return 0
        s = self._s
        return s[x2][y2] - s[x1][y2] - s[x2][y1] + s[x1][y1]