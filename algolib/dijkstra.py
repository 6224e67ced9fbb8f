"""Single-source shortest paths on non-negative weights (Dijkstra)."""

from __future__ import annotations

import heapq
import math
from typing import Any

from algolib.staticgraph import Edge, StaticGraph


def _run(g: StaticGraph, s: int, inf: Any) -> tuple[list[Any], list[Edge | None]]:
    n = len(g)
    if not 0 <= s < n:
        raise IndexError(f"vertex {s} out of range")
    dist: list[Any] = [inf] * n
    prev: list[Edge | None] = [None] * n
    dist[s] = 0
    pq: list[tuple[Any, int]] = [(0, s)]
    while pq:
        c, v = heapq.heappop(pq)
        if dist[v] < c:
            continue
        for e in g[v]:
            nc = c + e.cost
            if dist[e.to] > nc:
                dist[e.to] = nc
                prev[e.to] = e
                heapq.heappush(pq, (nc, e.to))
    return dist, prev


def dijkstra(g: StaticGraph, s: int, inf: Any = math.inf) -> list[Any]:
    """Distances from ``s``; unreachable vertices get ``inf``."""
    return _run(g, s, inf)[0]


class DijkstraRestore:
    """Shortest distances from one source, with the paths that realise them."""

    def __init__(self, g: StaticGraph, s: int, inf: Any = math.inf) -> None:
        self._s = s
        self._inf = inf
        self._dist, self._prev = _run(g, s, inf)

    def dists(self) -> list[Any]:
        return list(self._dist)

    def dist(self, t: int) -> Any:
        if not 0 <= t < len(self._dist):
            raise IndexError(f"vertex {t} out of range")
        return self._dist[t]

    def route(self, t: int) -> list[Edge]:
        """Edges of a shortest path to ``t``; empty for the source or an unreachable ``t``."""
        if self.dist(t) == self._inf or t == self._s:
            return []
        path: list[Edge] = []
        cur = t
        while cur != self._s:
            edge = self._prev[cur]
            assert edge is not None
            path.append(edge)
            cur = edge.from_
        path.reverse()
        return path