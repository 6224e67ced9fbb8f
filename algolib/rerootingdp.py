"""Rerooting dynamic programming: a tree DP evaluated for every root."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from algolib.staticgraph import Edge, StaticGraph


class RerootingDP:
    """Evaluates a tree DP with every vertex as root in linear time.

    ``g`` is a built tree with edges in both directions. A vertex's value is
    ``add_node(v, merge(add_edge(e, child_value), ...))`` folded from
    ``identity()`` over its neighbours.
    """

    def __init__(
        self,
        g: StaticGraph,
        merge: Callable[[Any, Any], Any],
        add_edge: Callable[[Edge, Any], Any],
        add_node: Callable[[int, Any], Any],
        identity: Callable[[], Any],
    ) -> None:
        n = len(g)
        if n == 0:
            raise ValueError("tree must have a vertex")
        self._n = n
        self._merge = merge
        self._add_edge = add_edge
        self._add_node = add_node
        self._identity = identity
        adj = [list(g[v]) for v in range(n)]
        self._adj = adj
        dp: list[list[Any]] = [[None] * len(es) for es in adj]
        self._dp = dp

        parent = [-1] * n
        order: list[int] = []
        seen = [False] * n
        seen[0] = True
        stack = [0]
        while stack:
            v = stack.pop()
            order.append(v)
            for e in adj[v]:
                if e.to != parent[v] and not seen[e.to]:
                    seen[e.to] = True
                    parent[e.to] = v
                    stack.append(e.to)

        below: list[Any] = [None] * n
        for v in reversed(order):
            res = identity()
            for i, e in enumerate(adj[v]):
                if e.to == parent[v]:
                    continue
                dp[v][i] = below[e.to]
                res = merge(add_edge(e, dp[v][i]), res)
            below[v] = add_node(v, res)

        from_parent: list[Any] = [None] * n
        from_parent[0] = identity()
        for v in order:
            pv = parent[v]
            es = adj[v]
            for i, e in enumerate(es):
                if e.to == pv:
                    dp[v][i] = add_node(pv, from_parent[v])
            sz = len(es)
            left = [identity()] * (sz + 1)
            right = [identity()] * (sz + 1)
            for i in range(sz):
                left[i + 1] = merge(add_edge(es[i], dp[v][i]), left[i])
                k = sz - i - 1
                right[k] = merge(add_edge(es[k], dp[v][k]), right[k + 1])
            for i, e in enumerate(es):
                if e.to == pv:
                    continue
                from_parent[e.to] = merge(left[i], right[i + 1])

    def get(self, v: int) -> Any:
        """The DP value of the whole tree rooted at ``v``."""
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")
        res = self._identity()
        for e, x in zip(self._adj[v], self._dp[v]):
            res = self._merge(self._add_edge(e, x), res)
        return self._add_node(v, res)