"""Static 2D range tree with point updates and rectangle products."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable
from heapq import merge
from typing import Any


class _SegTree:
    def __init__(self, n: int, op: Callable[[Any, Any], Any], e: Callable[[], Any]) -> None:
        size = 1
        while size < n:
            size <<= 1
        self._size = size
        self._op = op
        self._e = e
        self._d = [e() for _ in range(2 * size)]

    def get(self, i: int) -> Any:
        return self._d[i + self._size]

    def set(self, i: int, x: Any) -> None:
        i += self._size
        self._d[i] = x
        while i > 1:
            i >>= 1
            self._d[i] = self._op(self._d[2 * i], self._d[2 * i + 1])

    def prod(self, l: int, r: int) -> Any:
        left, right = self._e(), self._e()
        l += self._size
        r += self._size
        while l < r:
            if l & 1:
                left = self._op(left, self._d[l])
                l += 1
            if r & 1:
                r -= 1
                right = self._op(self._d[r], right)
            l >>= 1
            r >>= 1
        return self._op(left, right)


class RangeTree:
    """Monoid values on points fixed before ``build``; rectangle queries.

    ``op`` must be associative and commutative, ``e()`` its identity.
    """

    def __init__(
        self,
        op: Callable[[Any, Any], Any],
        e: Callable[[], Any],
        points: Iterable[tuple[Any, Any]] | None = None,
    ) -> None:
        self._op = op
        self._e = e
        self._ps: list[tuple[Any, Any]] = []
        self._yxs: list[list[tuple[Any, Any]]] = []
        self._segs: list[_SegTree] = []
        self._n = 0
        self._built = False
        if points is not None:
            for x, y in points:
                self.add_point(x, y)
            self.build()

    @classmethod
    def from_weighted(
        cls,
        op: Callable[[Any, Any], Any],
        e: Callable[[], Any],
        items: Iterable[tuple[Any, Any, Any]],
    ) -> RangeTree:
        """Build from ``(x, y, w)`` triples, adding each ``w`` at its point."""
        items = list(items)
        tree = cls(op, e, [(x, y) for x, y, _ in items])
        for x, y, w in items:
            tree.add(x, y, w)
        return tree

    def add_point(self, x: Any, y: Any) -> None:
        if self._built:
            raise RuntimeError("tree is already built")
        self._ps.append((x, y))

    def build(self) -> None:
        if self._built:
            raise RuntimeError("tree is already built")
        self._ps = sorted(set(self._ps))
        n = self._n = len(self._ps)
        yxs: list[list[tuple[Any, Any]]] = [[] for _ in range(2 * n)]
        for i, (x, y) in enumerate(self._ps):
            yxs[i + n].append((y, x))
        for i in range(n - 1, 0, -1):
            yxs[i] = list(merge(yxs[2 * i], yxs[2 * i + 1]))
        self._yxs = yxs
        self._segs = [_SegTree(len(node), self._op, self._e) for node in yxs]
        self._built = True

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("tree is not built")

    def _path(self, x: Any, y: Any) -> Iterable[tuple[_SegTree, int]]:
        self._require_built()
        i = bisect_left(self._ps, (x, y))
        if i >= self._n or self._ps[i] != (x, y):
            raise KeyError((x, y))
        i += self._n
        while i:
            yield self._segs[i], bisect_left(self._yxs[i], (y, x))
            i >>= 1

    def set(self, x: Any, y: Any, val: Any) -> None:
        """Replace the value at the registered point ``(x, y)``."""
        for seg, j in self._path(x, y):
            seg.set(j, val)

    def add(self, x: Any, y: Any, val: Any) -> None:
        """Combine ``val`` into the value at the registered point ``(x, y)``."""
        for seg, j in self._path(x, y):
            seg.set(j, self._op(seg.get(j), val))

    def _node_prod(self, i: int, yl: Any, yr: Any) -> Any:
        node = self._yxs[i]
        return self._segs[i].prod(bisect_left(node, (yl,)), bisect_left(node, (yr,)))

    def prod(self, xl: Any, xr: Any, yl: Any, yr: Any) -> Any:
        """Product over points with ``xl <= x < xr`` and ``yl <= y < yr``."""
        self._require_built()
        if xl > xr or yl > yr:
            raise ValueError("rectangle bounds are reversed")
        l = bisect_left(self._ps, (xl,)) + self._n
        r = bisect_left(self._ps, (xr,)) + self._n
        res = self._e()
        while l < r:
            if l & 1:
                res = self._op(res, self._node_prod(l, yl, yr))
                l += 1
            if r & 1:
                r -= 1
                res = self._op(res, self._node_prod(r, yl, yr))
            l >>= 1
            r >>= 1
        return res

    def get(self, x: Any, y: Any) -> Any:
        """Value at the integer point ``(x, y)``."""
        return self.prod(x, x + 1, y, y + 1)