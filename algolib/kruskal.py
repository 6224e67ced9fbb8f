"""Minimum spanning tree by Kruskal's algorithm."""

from __future__ import annotations

import math
from typing import Any

from algolib.staticgraph import Edge, StaticGraph


class _DisjointSets:
    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self.components = n

    def find(self, a: int) -> int:
        parent = self._parent
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self._parent[ra] = rb
        self.components -= 1
        return True


def kruskal(g: StaticGraph, m: int, inf: Any = math.inf) -> tuple[Any, list[Edge]]:
    """Total cost and edges of a minimum spanning tree.

    Every edge of ``g`` must carry an index in ``[0, m)``; an undirected edge
    added in both directions shares one index. A disconnected graph gives
    ``(inf, [])``.
    """
    slots: list[Edge | None] = [None] * m
    for v in range(len(g)):
        for e in g[v]:
            if not 0 <= e.idx < m:
                raise ValueError(f"edge index {e.idx} out of range")
            slots[e.idx] = e
    if any(e is None for e in slots):
        raise ValueError("some edge index in [0, m) is unused")
    edges = sorted((e for e in slots if e is not None), key=lambda e: e.cost)
    dsu = _DisjointSets(len(g))
    total: Any = 0
    tree: list[Edge] = []
    for e in edges:
        if dsu.union(e.from_, e.to):
            total += e.cost
            tree.append(e)
    if dsu.components > 1:
        return inf, []
    return total, tree