"""Two-dimensional dual segment tree over a fixed set of points."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterable
from heapq import merge
from typing import Any

from algolib.dualsegmenttree import DualSegmentTree


class DualSegmentTree2D:
    """Rectangle apply, point get, over points registered before ``build``.

    Passing ``points`` registers them and builds at once.
    """

    def __init__(
        self,
        composition: Callable[[Any, Any], Any],
        identity: Callable[[], Any],
        points: Iterable[tuple[Any, Any]] | None = None,
    ) -> None:
        self._composition = composition
        self._identity = identity
        self._ps: list[tuple[Any, Any]] = []
        self._yxs: list[list[tuple[Any, Any]]] = []
        self._segs: list[DualSegmentTree] = []
        self._n = 0
        self._built = False
        if points is not None:
            for x, y in points:
                self.add_point(x, y)
            self.build()

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
        self._segs = [
            DualSegmentTree(len(node), self._composition, self._identity) for node in yxs
        ]
        self._built = True

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("tree is not built")

    def get(self, x: Any, y: Any) -> Any:
        """Composition of everything applied to the registered point ``(x, y)``."""
        self._require_built()
        i = bisect_left(self._ps, (x, y))
        if i >= self._n or self._ps[i] != (x, y):
            raise KeyError((x, y))
        total = self._identity()
        i += self._n
        while i:
            j = bisect_left(self._yxs[i], (y, x))
            total = self._composition(total, self._segs[i].get(j))
            i >>= 1
        return total

    def _apply_node(self, i: int, yl: Any, yr: Any, f: Any) -> None:
        node = self._yxs[i]
        lo = bisect_left(node, (yl,))
        hi = bisect_left(node, (yr,))
        self._segs[i].apply(lo, hi, f)

    def apply(self, xl: Any, xr: Any, yl: Any, yr: Any, f: Any) -> None:
        """Apply ``f`` to points with ``xl <= x < xr`` and ``yl <= y < yr``."""
        self._require_built()
        if xl > xr or yl > yr:
            raise ValueError("empty rectangle bounds are reversed")
        l = bisect_left(self._ps, (xl,)) + self._n
        r = bisect_left(self._ps, (xr,)) + self._n
        while l < r:
            if l & 1:
                self._apply_node(l, yl, yr, f)
                l += 1
            if r & 1:
                r -= 1
                self._apply_node(r, yl, yr, f)
            l >>= 1
            r >>= 1