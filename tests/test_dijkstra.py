import math

import pytest

from algolib.dijkstra import DijkstraRestore, dijkstra
from algolib.staticgraph import StaticGraph

EDGES = [(0, 1, 10), (0, 2, 1), (2, 1, 2), (1, 3, 1), (2, 3, 7), (3, 4, 2), (4, 0, 3)]


def _graph(n, edges):
    g = StaticGraph(n)
    for i, (u, v, w) in enumerate(edges):
        g.add(u, v, w, i)
    g.build()
    return g


def test_detour_is_shorter():
    g = _graph(6, EDGES)
    assert dijkstra(g, 0)[1] == 3


def test_distances_are_tight():
    g = _graph(6, EDGES)
    dist = dijkstra(g, 0)
    assert dist[0] == 0
    assert dist[5] == math.inf
    for u, v, w in EDGES:
        if dist[u] != math.inf:
            assert dist[v] <= dist[u] + w
    for v in range(1, 5):
        assert any(dist[u] + w == dist[v] for u, x, w in EDGES if x == v)


def test_custom_infinity():
    inf = 2000000000
    g = _graph(6, EDGES)
    assert dijkstra(g, 0, inf)[5] == inf


def test_restore_matches_plain_dijkstra():
    g = _graph(6, EDGES)
    dij = DijkstraRestore(g, 0)
    assert dij.dists() == dijkstra(g, 0)
    assert [dij.dist(v) for v in range(6)] == dijkstra(g, 0)


def test_routes_are_shortest_paths():
    g = _graph(6, EDGES)
    dij = DijkstraRestore(g, 0)
    for t in range(1, 5):
        route = dij.route(t)
        assert route[0].from_ == 0
        assert route[-1].to == t
        for a, b in zip(route, route[1:]):
            assert a.to == b.from_
        assert sum(e.cost for e in route) == dij.dist(t)


def test_empty_routes():
    g = _graph(6, EDGES)
    dij = DijkstraRestore(g, 0)
    assert dij.route(0) == []
    assert dij.route(5) == []


def test_bad_vertex():
    g = _graph(6, EDGES)
    dij = DijkstraRestore(g, 0)
    with pytest.raises(IndexError):
        dij.dist(6)
    with pytest.raises(IndexError):
        dijkstra(g, -1)