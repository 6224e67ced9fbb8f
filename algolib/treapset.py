"""Ordered (multi)set on a treap with rank queries."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("l", "r", "val", "pri", "sz")

    def __init__(self, val: Any, pri: float) -> None:
        self.l: _Node | None = None
        self.r: _Node | None = None
        self.val = val
        self.pri = pri
        self.sz = 1


def _size(t: _Node | None) -> int:
    return t.sz if t is not None else 0


def _update(t: _Node) -> None:
    t.sz = _size(t.l) + _size(t.r) + 1


class TreapSet:
    """Sorted (multi)set; neighbour queries return ``(value, index)``.

    When no element qualifies, they return ``(none, len(self))``.
    """

    def __init__(self, none: Any = None, multi: bool = False) -> None:
        self._none = none
        self._multi = multi
        self._priority = random.Random(88675123).random
        self._root: _Node | None = None

    def _merge(self, lt: _Node | None, rt: _Node | None) -> _Node | None:
        if lt is None or rt is None:
            return lt if lt is not None else rt
        if lt.pri > rt.pri:
            lt.r = self._merge(lt.r, rt)
            _update(lt)
            return lt
        rt.l = self._merge(lt, rt.l)
        _update(rt)
        return rt

    def _split(
        self, t: _Node | None, x: Any, inclusive: bool
    ) -> tuple[_Node | None, _Node | None]:
        """Split into values before ``x`` (``<`` or ``<=``) and the rest."""
        if t is None:
            return None, None
        if t.val < x or (inclusive and t.val == x):
            a, b = self._split(t.r, x, inclusive)
            t.r = a
            _update(t)
            return t, b
        a, b = self._split(t.l, x, inclusive)
        t.l = b
        _update(t)
        return a, t

    def __contains__(self, x: Any) -> bool:
        cur = self._root
        while cur is not None:
            if cur.val == x:
                return True
            cur = cur.l if cur.val > x else cur.r
        return False

    def insert(self, x: Any) -> None:
        """Add ``x``; without ``multi`` an existing value is left alone."""
        if not self._multi and x in self:
            return
        lt, rt = self._split(self._root, x, True)
        self._root = self._merge(self._merge(lt, _Node(x, self._priority())), rt)

    def erase(self, x: Any) -> None:
        """Remove one copy of ``x`` if present."""
        if x not in self:
            return
        lt, rest = self._split(self._root, x, False)
        mid, rt = self._split(rest, x, True)
        assert mid is not None
        mid = self._merge(mid.l, mid.r)
        self._root = self._merge(self._merge(lt, mid), rt)

    def _search_greater(self, x: Any, equal: bool) -> tuple[Any, int]:
        cur = self._root
        res = (self._none, len(self))
        cnt = 0
        while cur is not None:
            idx = cnt + _size(cur.l)
            if x < cur.val or (equal and x == cur.val):
                res = (cur.val, idx)
                cur = cur.l
            else:
                cnt = idx + 1
                cur = cur.r
        return res

    def _search_less(self, x: Any, equal: bool) -> tuple[Any, int]:
        cur = self._root
        res = (self._none, len(self))
        cnt = 0
        while cur is not None:
            idx = cnt + _size(cur.l)
            if x > cur.val or (equal and x == cur.val):
                res = (cur.val, idx)
                cnt = idx + 1
                cur = cur.r
            else:
                cur = cur.l
        return res

    def gt(self, x: Any) -> tuple[Any, int]:
        """Smallest element ``> x`` and its index."""
        return self._search_greater(x, False)

    def ge(self, x: Any) -> tuple[Any, int]:
        """Smallest element ``>= x`` and its index."""
        return self._search_greater(x, True)

    def lt(self, x: Any) -> tuple[Any, int]:
        """Largest element ``< x`` and its index."""
        return self._search_less(x, False)

    def le(self, x: Any) -> tuple[Any, int]:
        """Largest element ``<= x`` and its index."""
        return self._search_less(x, True)

    def __getitem__(self, i: int) -> Any:
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError("index out of range")
        cur = self._root
        while True:
            assert cur is not None
            left = _size(cur.l)
            if i < left:
                cur = cur.l
            elif i == left:
                return cur.val
            else:
                i -= left + 1
                cur = cur.r

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        cur = self._root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.l
            node = stack.pop()
            yield node.val
            cur = node.r