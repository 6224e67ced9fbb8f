"""Dual segment tree: range apply, point get."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class DualSegmentTree:
    """Applies an operation to a range and reads back single points.

    ``composition`` should be commutative, as pending operations are never
    pushed down. ``identity`` is a callable returning the neutral operation.
    """

    def __init__(
        self,
        size_or_values: int | Iterable[Any],
        composition: Callable[[Any, Any], Any],
        identity: Callable[[], Any],
    ) -> None:
        self._composition = composition
        self._identity = identity
        if isinstance(size_or_values, int):
            if size_or_values < 0:
                raise ValueError("size must be non-negative")
            self._n = size_or_values
            self._lz = [identity() for _ in range(2 * self._n)]
        else:
            values = list(size_or_values)
            self._n = len(values)
            self._lz = [identity() for _ in range(self._n)] + values

    def __len__(self) -> int:
        return self._n

    def get(self, p: int) -> Any:
        """Composition of everything applied to position ``p``."""
        if not 0 <= p < self._n:
            raise IndexError(f"index {p} out of range")
        total = self._identity()
        p += self._n
        while p:
            total = self._composition(total, self._lz[p])
            p >>= 1
        return total

    def __getitem__(self, p: int) -> Any:
        return self.get(p)

    def apply(self, l: int, r: int, f: Any) -> None:
        """Apply ``f`` to every position in ``[l, r)``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        if l == r:
            return
        comp = self._composition
        lz = self._lz
        if l == 0 and r == self._n:
            lz[1] = comp(lz[1], f)
            return
        l += self._n
        r += self._n
        while l < r:
            if l & 1:
                lz[l] = comp(lz[l], f)
                l += 1
            if r & 1:
                r -= 1
                lz[r] = comp(lz[r], f)
            l >>= 1
            r >>= 1

    def apply_at(self, p: int, f: Any) -> None:
        """Apply ``f`` to position ``p`` alone."""
        self.apply(p, p + 1, f)