"""Link-cut tree: a dynamic forest with path products."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class _Node:
    __slots__ = ("p", "l", "r", "idx", "val", "sum", "sz", "rev")

    def __init__(self, idx: int, value: Any) -> None:
        self.p: _Node | None = None
        self.l: _Node | None = None
        self.r: _Node | None = None
        self.idx = idx
        self.val = value
        self.sum = value
        self.sz = 1
        self.rev = False

    def is_root(self) -> bool:
        """Whether this node is the root of its splay tree."""
        p = self.p
        return p is None or (p.l is not self and p.r is not self)


class LinkCutTree:
    """Forest on vertices ``0 .. n-1`` with link, cut, re-rooting and path products.

    Every vertex holds a value, initially ``e()``. ``op`` must be associative
    with identity ``e()``; path products after re-rooting are only meaningful
    when ``op`` is commutative.
    """

    def __init__(self, n: int, op: Callable[[Any, Any], Any], e: Callable[[], Any]) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._op = op
        self._e = e
        self._nodes = [_Node(i, e()) for i in range(n)]

    def _update(self, t: _Node) -> None:
        t.sz = 1
        t.sum = t.val
        if t.l is not None:
            t.sz += t.l.sz
            t.sum = self._op(t.l.sum, t.sum)
        if t.r is not None:
            t.sz += t.r.sz
            t.sum = self._op(t.sum, t.r.sum)

    @staticmethod
    def _toggle(t: _Node) -> None:
        t.l, t.r = t.r, t.l
        t.rev = not t.rev

    def _push(self, t: _Node) -> None:
        if t.rev:
            if t.l is not None:
                self._toggle(t.l)
            if t.r is not None:
                self._toggle(t.r)
            t.rev = False

    def _attach(self, t: _Node, x: _Node, y: _Node | None) -> None:
        t.p = y
        if y is not None:
            if y.l is x:
                y.l = t
            if y.r is x:
                y.r = t
            self._update(y)

    def _rotr(self, t: _Node) -> None:
        x = t.p
        assert x is not None
        y = x.p
        x.l = t.r
        if x.l is not None:
            x.l.p = x
        t.r = x
        x.p = t
        self._update(x)
        self._update(t)
        self._attach(t, x, y)

    def _rotl(self, t: _Node) -> None:
        x = t.p
        assert x is not None
        y = x.p
        x.r = t.l
        if x.r is not None:
            x.r.p = x
        t.l = x
        x.p = t
        self._update(x)
        self._update(t)
        self._attach(t, x, y)

    def _splay(self, t: _Node) -> None:
        self._push(t)
        while not t.is_root():
            q = t.p
            assert q is not None
            if q.is_root():
                self._push(q)
                self._push(t)
                if q.l is t:
                    self._rotr(t)
                else:
                    self._rotl(t)
                continue
            r = q.p
            assert r is not None
            self._push(r)
            self._push(q)
            self._push(t)
            if r.l is q:
                if q.l is t:
                    self._rotr(q)
                    self._rotr(t)
                else:
                    self._rotl(t)
                    self._rotr(t)
            else:
                if q.r is t:
                    self._rotl(q)
                    self._rotl(t)
                else:
                    self._rotr(t)
                    self._rotl(t)

    def _expose(self, t: _Node) -> _Node:
        rp: _Node | None = None
        cur: _Node | None = t
        while cur is not None:
            self._splay(cur)
            cur.r = rp
            self._update(cur)
            rp = cur
            cur = cur.p
        self._splay(t)
        assert rp is not None
        return rp

    def _evert(self, t: _Node) -> None:
        self._expose(t)
        self._toggle(t)
        self._push(t)

    def _connected(self, u: _Node, v: _Node) -> bool:
        self._expose(u)
        self._expose(v)
        return u is v or u.p is not None

    def _node(self, v: int) -> _Node:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")
        return self._nodes[v]

    def expose(self, v: int) -> int:
        """Make the path from the root to ``v`` preferred; returns the last vertex joined."""
        return self._expose(self._node(v)).idx

    def link(self, u: int, v: int) -> None:
        """Add the edge ``u-v``, making ``u`` a child of ``v``."""
        nu, nv = self._node(u), self._node(v)
        if self._connected(nu, nv):
            raise ValueError(f"{u} and {v} are already connected")
        self._evert(nu)
        self._expose(nu)
        self._expose(nv)
        nu.p = nv
        nv.r = nu
        self._update(nv)

    def cut(self, u: int, v: int) -> None:
        """Remove the edge ``u-v``."""
        nu, nv = self._node(u), self._node(v)
        self._evert(nu)
        self._expose(nv)
        parent = nv.l
        if parent is not nu or parent.sz != 1:
            raise ValueError(f"no edge between {u} and {v}")
        nv.l = None
        parent.p = None
        self._update(nv)

    def evert(self, v: int) -> None:
        """Make ``v`` the root of its tree."""
        self._evert(self._node(v))

    def set(self, v: int, x: Any) -> None:
        t = self._node(v)
        self._expose(t)
        t.val = x
        self._update(t)

    def get(self, v: int) -> Any:
        return self._node(v).val

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor under the current roots; -1 if disconnected."""
        nu, nv = self._node(u), self._node(v)
        if not self._connected(nu, nv):
            return -1
        self._expose(nu)
        return self._expose(nv).idx

    def query(self, u: int, v: int) -> Any:
        """Product of the values on the path from ``u`` to ``v``."""
        nu, nv = self._node(u), self._node(v)
        if not self._connected(nu, nv):
            raise ValueError(f"{u} and {v} are not connected")
        self._evert(nu)
        self._expose(nv)
        return nv.sum

    def is_connected(self, u: int, v: int) -> bool:
        return self._connected(self._node(u), self._node(v))

    def get_root(self, v: int) -> int:
        """Root of the tree containing ``v``."""
        x = self._node(v)
        self._expose(x)
        while True:
            self._push(x)
            if x.l is None:
                return x.idx
            x = x.l

    def get_kth(self, v: int, k: int) -> int:
        """The ancestor ``k`` steps above ``v`` (``k = 0`` is ``v`` itself)."""
        if k < 0:
            raise ValueError("k must be non-negative")
        x: _Node | None = self._node(v)
        assert x is not None
        self._expose(x)
        while x is not None:
            self._push(x)
            if x.r is not None and x.r.sz > k:
                x = x.r
                continue
            if x.r is not None:
                k -= x.r.sz
            if k == 0:
                return x.idx
            k -= 1
            x = x.l
        raise ValueError(f"vertex {v} has no ancestor that far up")

    def get_path(self, v: int) -> list[int]:
        """Vertices from ``v`` up to its root, in that order."""
        x = self._node(v)
        self._expose(x)
        res: list[int] = []
        stack: list[_Node] = []
        cur: _Node | None = x
        while stack or cur is not None:
            while cur is not None:
                self._push(cur)
                stack.append(cur)
                cur = cur.r
            node = stack.pop()
            res.append(node.idx)
            cur = node.l
        return res