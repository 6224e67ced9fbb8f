from algolib.dijkstra import dijkstra
from algolib.staticgraph import StaticGraph
from algolib.treediameter import tree_diameter

EDGES = [(0, 1, 3), (1, 2, 2), (1, 3, 7), (0, 4, 1), (4, 5, 6), (5, 6, 1)]


def _graph(n, edges):
    g = StaticGraph(n)
    for i, (u, v, w) in enumerate(edges):
        g.add(u, v, w, i)
        g.add(v, u, w, i)
    g.build()
    return g


def test_length_is_longest_pairwise_distance():
    g = _graph(7, EDGES)
    length, _ = tree_diameter(g)
    assert length == max(max(dijkstra(g, v)) for v in range(7))


def test_path_realises_length():
    g = _graph(7, EDGES)
    length, path = tree_diameter(g)
    cost = {(u, v): w for u, v, w in EDGES}
    cost.update({(v, u): w for u, v, w in EDGES})
    assert len(set(path)) == len(path)
    assert sum(cost[a, b] for a, b in zip(path, path[1:])) == length
    assert dijkstra(g, path[0])[path[-1]] == length


def test_path_graph():
    g = _graph(4, [(0, 1, 2), (1, 2, 3), (2, 3, 4)])
    length, path = tree_diameter(g)
    assert length == 9
    assert path in ([0, 1, 2, 3], [3, 2, 1, 0])


def test_single_vertex():
    assert tree_diameter(_graph(1, [])) == (0, [])