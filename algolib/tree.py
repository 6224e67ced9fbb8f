"""Rooted weighted tree with binary lifting: LCA, ancestors, distances."""

from __future__ import annotations

from collections import deque
from typing import Any

from algolib.staticgraph import StaticGraph


class Tree:
    """Rooted view of a tree given as a built graph with edges in both directions."""

    def __init__(self, g: StaticGraph, root: int = 0) -> None:
        n = len(g)
        if not 0 <= root < n:
            raise IndexError(f"vertex {root} out of range")
        self._n = n
        self._root = root
        depth = [-1] * n
        distance: list[Any] = [None] * n
        parent = [-1] * n
        depth[root] = 0
        distance[root] = 0
        queue = deque([root])
        while queue:
            v = queue.popleft()
            for e in g[v]:
                w = e.to
                if depth[w] == -1:
                    depth[w] = depth[v] + 1
                    distance[w] = distance[v] + e.cost
                    parent[w] = v
                    queue.append(w)
        first = [p if p != -1 else v for v, p in enumerate(parent)]
        up = [first]
        for _ in range(1, max(1, n.bit_length())):
            last = up[-1]
            up.append([last[w] for w in last])
        self._depth = depth
        self._distance = distance
        self._parent = parent
        self._up = up

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def _lift(self, v: int, k: int) -> int:
        for j, row in enumerate(self._up):
            if k >> j & 1:
                v = row[v]
        return v

    def lca(self, u: int, v: int) -> int:
        self._check(u)
        self._check(v)
        if self._depth[u] < 0 or self._depth[v] < 0:
            raise ValueError("vertex not reachable from the root")
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        u = self._lift(u, self._depth[u] - self._depth[v])
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]

    def la(self, v: int, k: int) -> int:
        """The ancestor of ``v`` that is ``k`` levels up."""
        self._check(v)
        if not 0 <= k <= self._depth[v]:
            raise ValueError(f"no ancestor {k} levels above {v}")
        return self._lift(v, k)

    def jump(self, u: int, v: int, i: int) -> int:
        """The ``i``-th vertex on the path from ``u`` to ``v``, or -1 if the path is shorter."""
        if i < 0:
            raise ValueError("i must be non-negative")
        l = self.lca(u, v)
        up = self._depth[u] - self._depth[l]
        cnt = up + self._depth[v] - self._depth[l]
        if cnt < i:
            return -1
        if i <= up:
            return self._lift(u, i)
        return self._lift(v, cnt - i)

    def dist(self, u: int, v: int) -> Any:
        """Weighted distance between ``u`` and ``v``."""
        l = self.lca(u, v)
        d = self._distance
        return d[u] + d[v] - 2 * d[l]

    def par(self, v: int) -> int:
        """Parent of ``v``; -1 for the root."""
        self._check(v)
        return self._parent[v]

    def dep(self, v: int) -> int:
        """Depth of ``v`` in edges; -1 when unreachable."""
        self._check(v)
        return self._depth[v]

    def onpath(self, u: int, v: int, w: int) -> bool:
        """Whether ``w`` lies on the path between ``u`` and ``v``."""
        self._check(w)
        return self.dist(u, w) + self.dist(v, w) == self.dist(u, v)