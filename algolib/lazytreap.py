"""Implicit treap with lazy range operations and range reversal."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("l", "r", "val", "pri", "sz", "sum", "lz", "rev")

    def __init__(self, val: Any, pri: float, lz: Any) -> None:
        self.l: _Node | None = None
        self.r: _Node | None = None
        self.val = val
        self.pri = pri
        self.sz = 1
        self.sum = val
        self.lz = lz
        self.rev = False


class LazyTreap:
    """Sequence with positional edits, range products, range apply and reversal.

    ``op``/``e`` form a monoid of values; ``mapping(f, x)`` applies an operation
    to a value; ``composition(f, g)`` means "``g`` then ``f``"; ``identity()`` is
    the neutral operation. ``values`` is an iterable or a count of ``e()``.
    """

    def __init__(
        self,
        op: Callable[[Any, Any], Any],
        e: Callable[[], Any],
        mapping: Callable[[Any, Any], Any],
        composition: Callable[[Any, Any], Any],
        identity: Callable[[], Any],
        values: int | Iterable[Any] | None = None,
    ) -> None:
        self._op = op
        self._e = e
        self._mapping = mapping
        self._composition = composition
        self._identity = identity
        self._priority = random.Random(88675123).random
        self._root: _Node | None = None
        if values is None:
            items: list[Any] = []
        elif isinstance(values, int):
            items = [e() for _ in range(values)]
        else:
            items = list(values)
        for x in items:
            self._root = self._merge(self._root, self._new(x))

    def _new(self, x: Any) -> _Node:
        return _Node(x, self._priority(), self._identity())

    @staticmethod
    def _size(t: _Node | None) -> int:
        return t.sz if t is not None else 0

    def _sum(self, t: _Node | None) -> Any:
        return t.sum if t is not None else self._e()

    def _update(self, t: _Node) -> None:
        t.sz = self._size(t.l) + self._size(t.r) + 1
        t.sum = self._op(self._op(self._sum(t.l), t.val), self._sum(t.r))

    def _all_apply(self, t: _Node | None, f: Any) -> None:
        if t is not None:
            t.val = self._mapping(f, t.val)
            t.sum = self._mapping(f, t.sum)
            t.lz = self._composition(f, t.lz)

    def _push(self, t: _Node) -> None:
        if t.rev:
            t.rev = False
            t.l, t.r = t.r, t.l
            if t.l is not None:
                t.l.rev = not t.l.rev
            if t.r is not None:
                t.r.rev = not t.r.rev
        self._all_apply(t.l, t.lz)
        self._all_apply(t.r, t.lz)
        t.lz = self._identity()

    def _merge(self, lt: _Node | None, rt: _Node | None) -> _Node | None:
        if lt is None or rt is None:
            return lt if lt is not None else rt
        if lt.pri > rt.pri:
            self._push(lt)
            lt.r = self._merge(lt.r, rt)
            self._update(lt)
            return lt
        self._push(rt)
        rt.l = self._merge(lt, rt.l)
        self._update(rt)
        return rt

    def _split(self, t: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
        if t is None:
            return None, None
        self._push(t)
        if k <= self._size(t.l):
            a, b = self._split(t.l, k)
            t.l = b
            self._update(t)
            return a, t
        a, b = self._split(t.r, k - self._size(t.l) - 1)
        t.r = a
        self._update(t)
        return t, b

    def _check_range(self, l: int, r: int) -> None:
        if not 0 <= l <= r <= len(self):
            raise IndexError(f"range [{l}, {r}) out of bounds")

    def _normalise(self, p: int) -> int:
        n = len(self)
        if p < 0:
            p += n
        if not 0 <= p < n:
            raise IndexError("index out of range")
        return p

    def insert(self, p: int, x: Any) -> None:
        """Insert ``x`` so that it ends up at position ``p``."""
        if not 0 <= p <= len(self):
            raise IndexError(f"position {p} out of range")
        lt, rt = self._split(self._root, p)
        self._root = self._merge(self._merge(lt, self._new(x)), rt)

    def erase(self, p: int) -> None:
        """Remove the element at position ``p``."""
        if not 0 <= p < len(self):
            raise IndexError(f"position {p} out of range")
        lm, rt = self._split(self._root, p + 1)
        lt, _ = self._split(lm, p)
        self._root = self._merge(lt, rt)

    def prod(self, l: int, r: int) -> Any:
        """Product of the elements in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return self._e()
        lm, rt = self._split(self._root, r)
        lt, mt = self._split(lm, l)
        assert mt is not None
        res = mt.sum
        self._root = self._merge(self._merge(lt, mt), rt)
        return res

    def apply(self, l: int, r: int, f: Any) -> None:
        """Apply ``f`` to every element in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return
        lm, rt = self._split(self._root, r)
        lt, mt = self._split(lm, l)
        self._all_apply(mt, f)
        self._root = self._merge(self._merge(lt, mt), rt)

    def reverse(self, l: int, r: int) -> None:
        """Reverse the elements in ``[l, r)``."""
        self._check_range(l, r)
        if l == r:
            return
        lm, rt = self._split(self._root, r)
        lt, mt = self._split(lm, l)
        assert mt is not None
        mt.rev = not mt.rev
        self._root = self._merge(self._merge(lt, mt), rt)

    def rotate(self, l: int, r: int, m: int) -> None:
        """Rotate ``[l, r)`` so that the element at ``m`` comes first."""
        self._check_range(l, r)
        if not l <= m < r:
            raise ValueError("m must satisfy l <= m < r")
        self.reverse(l, r)
        self.reverse(l, l + r - m)
        self.reverse(l + r - m, r)

    def __getitem__(self, p: int) -> Any:
        p = self._normalise(p)
        t = self._root
        while True:
            assert t is not None
            self._push(t)
            left = self._size(t.l)
            if p < left:
                t = t.l
            elif p == left:
                return t.val
            else:
                p -= left + 1
                t = t.r

    def __setitem__(self, p: int, x: Any) -> None:
        p = self._normalise(p)
        self.erase(p)
        self.insert(p, x)

    def __len__(self) -> int:
        return self._size(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        cur = self._root
        while stack or cur is not None:
            while cur is not None:
                self._push(cur)
                stack.append(cur)
                cur = cur.l
            node = stack.pop()
            yield node.val
            cur = node.r