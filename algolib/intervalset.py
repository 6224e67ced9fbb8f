"""Set of disjoint half-open intervals, each carrying a value."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any

from sortedcontainers import SortedKeyList

_NEG = float("-inf")
_POS = float("inf")
_UNSET = object()

Callback = Callable[[Any, Any, Any], Any]


@dataclass(frozen=True)
class Interval:
    """The half-open interval ``[l, r)`` with value ``val``."""

    l: Any
    r: Any
    val: Any


def _key(iv: Interval) -> tuple[Any, Any]:
    return (iv.l, iv.r)


class IntervalSet:
    """Disjoint intervals where touching intervals of equal value are joined.

    ``insert`` and ``erase`` accept ``add(l, r, val)`` and ``delete(l, r, val)``
    callbacks, called for every interval that enters or leaves the set.
    """

    def __init__(self, default: Any = 0) -> None:
        self._default = default
        self._s = SortedKeyList(key=_key)
        self._s.add(Interval(_NEG, _NEG, default))
        self._s.add(Interval(_POS, _POS, default))

    def _floor(self, l: Any) -> Interval:
        return self._s[self._s.bisect_key_right((l, _POS)) - 1]

    def _drop(self, iv: Interval, delete: Callback | None) -> None:
        if delete is not None:
            delete(iv.l, iv.r, iv.val)
        self._s.remove(iv)

    def _put(self, l: Any, r: Any, val: Any, add: Callback | None) -> None:
        if add is not None:
            add(l, r, val)
        self._s.add(Interval(l, r, val))

    def covered(self, l: Any, r: Any = None) -> bool:
        """Whether ``[l, r)`` (or the point ``l``) lies inside one interval."""
        if r is None:
            r = l + 1
        if l > r:
            raise ValueError("l must not exceed r")
        if l == r:
            return True
        it = self._floor(l)
        return it.l <= l and r <= it.r

    def get(self, l: Any, r: Any = None) -> Interval | None:
        """Interval containing ``[l, r)``, else the nearest one to its left, else ``None``."""
        if r is None:
            r = l + 1
        if not l < r:
            raise ValueError("l must be smaller than r")
        it = self._floor(l)
        return None if it.l == _NEG else it

    def insert(
        self,
        l: Any,
        r: Any = None,
        x: Any = _UNSET,
        add: Callback | None = None,
        delete: Callback | None = None,
    ) -> None:
        """Set ``[l, r)`` (or the point ``l``) to value ``x``."""
        if r is None:
            r = l + 1
        if x is _UNSET:
            x = self._default
        if l > r:
            raise ValueError("l must not exceed r")
        if l == r:
            return
        s = self._s
        it = self._floor(l)
        if it.l <= l and r <= it.r:
            if x == it.val:
                return
            self._drop(it, delete)
            if it.l < l:
                self._put(it.l, l, it.val, add)
            if r < it.r:
                self._put(r, it.r, it.val, add)
            self._put(l, r, x, add)
        else:
            start = l
            if it.l <= l <= it.r:
                self._drop(it, delete)
                if x == it.val:
                    l = it.l
                elif it.l < l:
                    self._put(it.l, l, it.val, add)
            idx = s.bisect_key_right((start, _POS))
            while s[idx].r <= r:
                self._drop(s[idx], delete)
            it = s[idx]
            if it.l <= r:
                self._drop(it, delete)
                if x == it.val:
                    r = it.r
                elif r < it.r:
                    self._put(r, it.r, it.val, add)
            self._put(l, r, x, add)
        self._coalesce(l, r, add, delete)

    def _coalesce(
        self, l: Any, r: Any, add: Callback | None, delete: Callback | None
    ) -> None:
        s = self._s
        idx = s.bisect_key_left((l, r))
        it, before, after = s[idx], s[idx - 1], s[idx + 1]
        join_left = before.r == it.l and before.val == it.val
        join_right = it.r == after.l and it.val == after.val
        if join_left and join_right:
            for iv in (before, it, after):
                self._drop(iv, delete)
            self._put(before.l, after.r, it.val, add)
        elif join_left:
            self._drop(before, delete)
            self._drop(it, delete)
            self._put(before.l, it.r, it.val, add)
        elif join_right:
            self._drop(it, delete)
            self._drop(after, delete)
            self._put(it.l, after.r, it.val, add)

    def erase(
        self,
        l: Any,
        r: Any = None,
        add: Callback | None = None,
        delete: Callback | None = None,
    ) -> None:
        """Remove ``[l, r)`` (or the point ``l``) from the set."""
        if r is None:
            r = l + 1
        if l > r:
            raise ValueError("l must not exceed r")
        if l == r:
            return
        s = self._s
        it = self._floor(l)
        if it.l <= l and r <= it.r:
            self._drop(it, delete)
            if it.l < l:
                self._put(it.l, l, it.val, add)
            if r < it.r:
                self._put(r, it.r, it.val, add)
            return
        if it.l <= l < it.r:
            self._drop(it, delete)
            if it.l < l:
                self._put(it.l, l, it.val, add)
        idx = s.bisect_key_right((l, _POS))
        while s[idx].r <= r:
            self._drop(s[idx], delete)
        it = s[idx]
        if it.l < r:
            self._drop(it, delete)
            self._put(r, it.r, it.val, add)

    def mex(self, x: Any = 0) -> Any:
        """Smallest value ``>= x`` not covered by any interval."""
        it = self._floor(x)
        return it.r if it.l <= x < it.r else x

    def __len__(self) -> int:
        return len(self._s) - 2

    def __iter__(self) -> Iterator[Interval]:
        return islice(self._s, 1, len(self._s) - 1)