"""Coordinate compression of a collection of values."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import Any


class Compression:
    """Maps each distinct value to its rank among the sorted distinct values."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._a = sorted(set(values))

    def __len__(self) -> int:
        return len(self._a)

    def __getitem__(self, i: int) -> Any:
        """The value of rank ``i``."""
        if not 0 <= i < len(self._a):
            raise IndexError(f"rank {i} out of range")
        return self._a[i]

    def index(self, x: Any) -> int:
        """Rank of ``x``; raises ``KeyError`` for a value that was not given."""
        i = bisect_left(self._a, x)
        if i == len(self._a) or self._a[i] != x:
            raise KeyError(x)
        return i