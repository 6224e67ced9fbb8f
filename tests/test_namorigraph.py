import pytest

from algolib.namorigraph import NamoriGraph
from algolib.staticgraph import StaticGraph

EDGES = [(0, 1), (1, 2), (2, 0), (3, 0), (4, 3), (5, 1), (6, 5)]


def _graph(n, edges):
    g = StaticGraph(n)
    for i, (u, v) in enumerate(edges):
        g.add(u, v, 1, i)
        g.add(v, u, 1, i)
    g.build()
    return g


def test_cycle_is_closed():
    ng = NamoriGraph(_graph(7, EDGES))
    cyc = ng.cycle()
    assert len(cyc) == ng.len_cycle()
    for a, b in zip(cyc, cyc[1:] + cyc[:1]):
        assert a.to == b.from_
    assert len({e.idx for e in cyc}) == len(cyc)


def test_cycle_vertices_are_their_own_roots():
    ng = NamoriGraph(_graph(7, EDGES))
    on_cycle = {e.to for e in ng.cycle()}
    assert on_cycle == {0, 1, 2}
    for v in on_cycle:
        assert ng.root(v) == v
        assert ng.to_cycle(v) == 0


def test_tree_vertices_step_toward_cycle():
    ng = NamoriGraph(_graph(7, EDGES))
    for u, v in EDGES:
        if ng.to_cycle(u) > 0 or ng.to_cycle(v) > 0:
            assert ng.root(u) == ng.root(v)
            assert abs(ng.to_cycle(u) - ng.to_cycle(v)) == 1


def test_two_cycle_from_parallel_edges():
    ng = NamoriGraph(_graph(3, [(0, 1), (0, 1), (2, 1)]))
    assert ng.len_cycle() == 2
    assert ng.root(2) == 1
    assert ng.to_cycle(2) == 1


def test_bad_vertex():
    ng = NamoriGraph(_graph(7, EDGES))
    with pytest.raises(IndexError):
        ng.root(7)