"""Fenwick tree (binary indexed tree) over an additive group."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class FenwickTree:
    """Point add and half-open range sum in logarithmic time."""

    def __init__(self, size_or_values: int | Iterable[Any]) -> None:
        if isinstance(size_or_values, int):
            if size_or_values < 0:
                raise ValueError("size must be non-negative")
            values: list[Any] = []
            n = size_or_values
        else:
            values = list(size_or_values)
            n = len(values)
        self._n = n
        self._data: list[Any] = [0] * (n + 1)
        for i, x in enumerate(values, 1):
            self._data[i] = self._data[i] + x
        for i in range(1, n + 1):
            j = i + (i & -i)
            if j <= n:
                self._data[j] = self._data[j] + self._data[i]

    def __len__(self) -> int:
        return self._n

    def _prefix(self, i: int) -> Any:
        res: Any = 0
        while i > 0:
            res = res + self._data[i]
            i -= i & -i
        return res

    def add(self, i: int, x: Any) -> None:
        """Add ``x`` to element ``i``."""
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range")
        i += 1
        while i <= self._n:
            self._data[i] = self._data[i] + x
            i += i & -i

    def sum(self, l: int, r: int) -> Any:
        """Sum of elements in ``[l, r)``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        return self._prefix(r) - self._prefix(l)

    def lower_bound(self, w: Any) -> int:
        """Smallest ``k`` whose prefix of ``k`` elements sums to at least ``w``.

        Assumes non-negative elements. Returns 0 when ``w <= 0`` and
        ``len(self) + 1`` when the total is smaller than ``w``.
        """
        if w <= 0:
            return 0
        x = 0
        step = 1
        while step < self._n:
            step <<= 1
        while step > 0:
            if x + step <= self._n and self._data[x + step] < w:
                w = w - self._data[x + step]
                x += step
            step >>= 1
        return x + 1