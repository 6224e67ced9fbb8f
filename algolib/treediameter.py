"""Diameter of a weighted tree."""

from __future__ import annotations

from typing import Any

from algolib.dijkstra import DijkstraRestore, dijkstra
from algolib.staticgraph import StaticGraph


def tree_diameter(g: StaticGraph) -> tuple[Any, list[int]]:
    """Length of a longest path and its vertices, from one end to the other.

    ``g`` must be a tree with edges in both directions and non-negative costs.
    """
    d1 = dijkstra(g, 0)
    s = max(range(len(d1)), key=d1.__getitem__)
    dij = DijkstraRestore(g, s)
    d2 = dij.dists()
    t = max(range(len(d2)), key=d2.__getitem__)
    route = dij.route(t)
    path = [route[0].from_] + [e.to for e in route] if route else []
    return d2[t], path