"""Ordered set over a universe of values known in advance."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator
from typing import Any

from algolib.fenwicktree import FenwickTree


class OfflineSet:
    """Ordered (multi)set whose possible elements are fixed at construction.

    Neighbour queries return ``(value, index)``; when no such element exists
    they return ``(none, len(self))``.
    """

    def __init__(self, values: Iterable[Any], none: Any, multi: bool = False) -> None:
        self._a = sorted(set(values))
        self._none = none
        self._multi = multi
        self._n = 0
        self._fw = FenwickTree(len(self._a))

    def _position(self, x: Any) -> int | None:
        i = bisect_left(self._a, x)
        if i < len(self._a) and self._a[i] == x:
            return i
        return None

    def _kth(self, i: int) -> Any:
        return self._a[self._fw.lower_bound(i + 1) - 1]

    def count(self, x: Any) -> int:
        i = self._position(x)
        return 0 if i is None else self._fw.sum(i, i + 1)

    def __contains__(self, x: Any) -> bool:
        return self.count(x) > 0

    def insert(self, x: Any) -> None:
        """Insert ``x``; it must belong to the universe given at construction."""
        i = self._position(x)
        if i is None:
            raise KeyError(x)
        if not self._multi and self._fw.sum(i, i + 1) == 1:
            return
        self._n += 1
        self._fw.add(i, 1)

    def erase(self, x: Any) -> None:
        """Remove one copy of ``x`` if present."""
        i = self._position(x)
        if i is not None and self._fw.sum(i, i + 1) > 0:
            self._n -= 1
            self._fw.add(i, -1)

    def _first_from(self, i: int) -> tuple[Any, int]:
        if i == len(self._a):
            return self._none, self._n
        cnt = self._fw.sum(0, i)
        pos = self._fw.lower_bound(cnt + 1) - 1
        if pos == len(self._a):
            return self._none, self._n
        return self._a[pos], cnt

    def ge(self, x: Any) -> tuple[Any, int]:
        return self._first_from(bisect_left(self._a, x))

    def gt(self, x: Any) -> tuple[Any, int]:
        return self._first_from(bisect_right(self._a, x))

    def le(self, x: Any) -> tuple[Any, int]:
        i = self.gt(x)[1] - 1
        if 0 <= i < self._n:
            return self._kth(i), i
        return self._none, self._n

    def lt(self, x: Any) -> tuple[Any, int]:
        i = self.ge(x)[1] - 1
        if 0 <= i < self._n:
            return self._kth(i), i
        return self._none, self._n

    def __getitem__(self, i: int) -> Any:
        if i < 0:
            i += self._n
        if not 0 <= i < self._n:
            raise IndexError("index out of range")
        return self._kth(i)

    def __len__(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[Any]:
        for i, value in enumerate(self._a):
            for _ in range(self._fw.sum(i, i + 1)):
                yield value