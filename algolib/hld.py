"""Heavy-light decomposition of a tree rooted at vertex 0."""

from __future__ import annotations

from algolib.staticgraph import StaticGraph


class HLD:
    """Lays out the vertices so every root-ward path splits into O(log n) ranges.

    Ranges are half-open ``(l, r)`` over the positions given by ``idx``.
    """

    def __init__(self, g: StaticGraph) -> None:
        n = len(g)
        if n == 0:
            raise ValueError("tree must have a vertex")
        self._n = n
        par = [-1] * n
        children: list[list[int]] = [[] for _ in range(n)]
        order: list[int] = []
        stack = [0]
        while stack:
            v = stack.pop()
            order.append(v)
            for e in g[v]:
                w = e.to
                if w == par[v]:
                    continue
                children[v].append(w)
                par[w] = v
                stack.append(w)

        sub = [1] * n
        for v in reversed(order):
            if par[v] != -1:
                sub[par[v]] += sub[v]
        for ch in children:
            for i in range(len(ch)):
                if sub[ch[i]] > sub[ch[0]]:
                    ch[i], ch[0] = ch[0], ch[i]

        dep = [0] * n
        head = [0] * n
        tin = [0] * n
        t = 0
        stack = [0]
        while stack:
            v = stack.pop()
            tin[v] = t
            t += 1
            ch = children[v]
            for w in reversed(ch):
                dep[w] = dep[v] + 1
                head[w] = head[v] if w == ch[0] else w
                stack.append(w)

        self._par = par
        self._dep = dep
        self._head = head
        self._in = tin
        self._out = [tin[v] + sub[v] for v in range(n)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def idx(self, v: int) -> int:
        """Position of ``v`` in the layout."""
        self._check(v)
        return self._in[v]

    def lca(self, u: int, v: int) -> int:
        self._check(u)
        self._check(v)
        head, par, dep = self._head, self._par, self._dep
        while head[u] != head[v]:
            if dep[head[u]] <= dep[head[v]]:
                v = par[head[v]]
            else:
                u = par[head[u]]
        return u if dep[u] <= dep[v] else v

    def _ascend(self, u: int, v: int) -> list[tuple[int, int]]:
        head, tin = self._head, self._in
        res = []
        while head[u] != head[v]:
            res.append((tin[u], tin[head[u]]))
            u = self._par[head[u]]
        if u != v:
            res.append((tin[u], tin[v] + 1))
        return res

    def _descend(self, u: int, v: int) -> list[tuple[int, int]]:
        head, tin = self._head, self._in
        res = []
        while u != v:
            if head[u] == head[v]:
                res.append((tin[u] + 1, tin[v]))
                break
            res.append((tin[head[v]], tin[v]))
            v = self._par[head[v]]
        res.reverse()
        return res

    def path_query_commutative(self, u: int, v: int, vertex: bool) -> list[tuple[int, int]]:
        """Ranges ``(l, r)`` with ``l <= r`` covering the path from ``u`` to ``v``.

        With ``vertex`` false the lowest common ancestor is left out, so each
        position stands for the edge to its parent.
        """
        l = self.lca(u, v)
        res = []
        for a, b in self._ascend(u, l):
            s, t = a + 1, b
            res.append((t, s) if s > t else (s, t))
        if vertex:
            res.append((self._in[l], self._in[l] + 1))
        for a, b in self._descend(l, v):
            s, t = a, b + 1
            res.append((t, s) if s > t else (s, t))
        return res

    def path_query_noncommutative(self, u: int, v: int, vertex: bool) -> list[tuple[int, int]]:
        """Ranges in path order from ``u`` to ``v``.

        A pair ``(l, r)`` with ``l > r`` is the range ``[r, l)`` walked from
        high positions to low.
        """
        l = self.lca(u, v)
        res = [(a + 1, b) for a, b in self._ascend(u, l)]
        if vertex:
            res.append((self._in[l], self._in[l] + 1))
        res.extend((a, b + 1) for a, b in self._descend(l, v))
        return res

    def subtree_query(self, v: int, vertex: bool) -> tuple[int, int]:
        """Range of the subtree of ``v``; without ``vertex``, ``v`` itself is left out."""
        self._check(v)
        return self._in[v] + (0 if vertex else 1), self._out[v]

    def dist(self, u: int, v: int) -> int:
        """Number of edges between ``u`` and ``v``."""
        l = self.lca(u, v)
        return self._dep[u] + self._dep[v] - 2 * self._dep[l]