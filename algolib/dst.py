"""Disjoint sparse table: O(1) range products for any associative operation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class DisjointSparseTable:
    """Static range product over a semigroup with identity.

    ``op`` must be associative; ``e`` is a callable returning the identity.
    """

    def __init__(
        self,
        values: Iterable[Any],
        op: Callable[[Any, Any], Any],
        e: Callable[[], Any],
    ) -> None:
        v = list(values)
        self._n = len(v)
        self._op = op
        self._e = e
        h = 1
        while (1 << h) < self._n:
            h += 1
        w = 1 << h
        v.extend(e() for _ in range(w - self._n))
        table: list[list[Any]] = []
        for i in range(h):
            length = 1 << (h - i - 1)
            row = [None] * w
            for pos in range(length - 1, w, length << 1):
                row[pos] = v[pos]
                for j in range(pos - 1, pos - length, -1):
                    row[j] = op(v[j], row[j + 1])
                row[pos + 1] = v[pos + 1]
                for j in range(pos + 2, pos + length + 1):
                    row[j] = op(row[j - 1], v[j])
            table.append(row)
        self._h = h
        self._table = table

    def __len__(self) -> int:
        return self._n

    def prod(self, l: int, r: int) -> Any:
        """Product of elements ``[l, r)`` in order."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        if l == r:
            return self._e()
        if r - l == 1:
            return self._table[self._h - 1][l]
        i = self._h - (l ^ (r - 1)).bit_length()
        return self._op(self._table[i][l], self._table[i][r - 1])