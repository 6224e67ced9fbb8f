"""Area of the union of axis-aligned rectangles."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


class _CoverTree:
    """Covered length of a set of elementary segments under interval add."""

    def __init__(self, coords: Sequence[int]) -> None:
        self._coords = coords
        self._m = len(coords) - 1
        self._cnt = [0] * (4 * self._m)
        self._len = [0] * (4 * self._m)

    @property
    def covered(self) -> int:
        return self._len[1]

    def update(self, lo: int, hi: int, delta: int) -> None:
        self._update(1, 0, self._m, lo, hi, delta)

    def _update(self, node: int, nl: int, nr: int, lo: int, hi: int, delta: int) -> None:
        if hi <= nl or nr <= lo:
            return
        if lo <= nl and nr <= hi:
            self._cnt[node] += delta
        else:
            mid = (nl + nr) // 2
            self._update(2 * node, nl, mid, lo, hi, delta)
            self._update(2 * node + 1, mid, nr, lo, hi, delta)
        if self._cnt[node] > 0:
            self._len[node] = self._coords[nr] - self._coords[nl]
        elif nr - nl == 1:
            self._len[node] = 0
        else:
            self._len[node] = self._len[2 * node] + self._len[2 * node + 1]


class RectangleUnion:
    """Collects rectangles ``(l, r, d, u)`` meaning ``[l, r) x [d, u)``."""

    def __init__(self, rectangles: Iterable[tuple[int, int, int, int]] | None = None) -> None:
        self._rects: list[tuple[int, int, int, int]] = []
        self._xs: list[int] = []
        self._ys: list[int] = []
        self._events: list[list[tuple[int, int, int]]] = []
        self._stale = True
        for rect in rectangles or ():
            self.add(*rect)
        self.build()

    def add(self, l: int, r: int, d: int, u: int) -> None:
        if not l < r:
            raise ValueError("l must be smaller than r")
        if not d < u:
            raise ValueError("d must be smaller than u")
        self._rects.append((l, r, d, u))
        self._stale = True

    def build(self) -> None:
        """Prepare the sweep over the rectangles added so far."""
        xs = sorted({v for l, r, _, _ in self._rects for v in (l, r)})
        ys = sorted({v for _, _, d, u in self._rects for v in (d, u)})
        events: list[list[tuple[int, int, int]]] = [[] for _ in xs]
        for l, r, d, u in self._rects:
            lo, hi = bisect_left(ys, d), bisect_left(ys, u)
            events[bisect_left(xs, l)].append((lo, hi, 1))
            events[bisect_left(xs, r)].append((lo, hi, -1))
        self._xs, self._ys, self._events = xs, ys, events
        self._stale = False

    def area(self) -> int:
        """Area covered by at least one rectangle."""
        if self._stale:
            self.build()
        if len(self._xs) < 2:
            return 0
        cover = _CoverTree(self._ys)
        total = 0
        for x0, x1, events in zip(self._xs, self._xs[1:], self._events):
            for lo, hi, delta in events:
                cover.update(lo, hi, delta)
            total += (x1 - x0) * cover.covered
        return total