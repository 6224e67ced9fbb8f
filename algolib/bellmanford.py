"""Single-source shortest paths with negative edges (Bellman-Ford)."""

from __future__ import annotations

import math
from typing import Any

from algolib.staticgraph import StaticGraph


def bellman_ford(g: StaticGraph, s: int, inf: Any = math.inf) -> list[Any]:
    """Distances from ``s`` in the built graph ``g``.

    Unreachable vertices get ``inf``. Vertices whose distance can be made
    arbitrarily small by a negative cycle get ``-inf``.
    """
    n = len(g)
    if not 0 <= s < n:
        raise IndexError(f"vertex {s} out of range")
    edges = [e for u in range(n) for e in g[u]]
    dist: list[Any] = [inf] * n
    dist[s] = 0
    for _ in range(n - 1):
        updated = False
        for e in edges:
            if dist[e.from_] == inf:
                continue
            candidate = dist[e.from_] + e.cost
            if dist[e.to] > candidate:
                dist[e.to] = candidate
                updated = True
        if not updated:
            break
    negative = [False] * n
    for _ in range(n):
        for e in edges:
            u = e.from_
            if dist[u] == inf:
                continue
            candidate = dist[u] + e.cost
            if dist[e.to] > candidate:
                dist[e.to] = candidate
                negative[e.to] = True
            if negative[u]:
                negative[e.to] = True
    return [-inf if neg else d for d, neg in zip(dist, negative)]