import pytest

from algolib.functionalgraph import FunctionalGraph
from algolib.staticgraph import StaticGraph

SUCC = [1, 2, 0, 0, 3, 5, 4]


def _graph(succ):
    g = StaticGraph(len(succ))
    for v, w in enumerate(succ):
        g.add(v, w, 1, v)
    g.build()
    return g


def _walk(v, k):
    for _ in range(k):
        v = SUCC[v]
    return v


def test_component_count():
    assert FunctionalGraph(_graph(SUCC)).cc() == 2


def test_roots_lie_on_cycles():
    fg = FunctionalGraph(_graph(SUCC))
    for v in range(len(SUCC)):
        r = fg.root(v)
        assert fg.to_cycle(r) == 0
        assert fg.next(v, fg.to_cycle(v)) == r
        assert fg.next(r, fg.len_cycle(v)) == r
        assert fg.len_cycle(v) == fg.len_cycle(r)


def test_cycles_are_closed_walks():
    fg = FunctionalGraph(_graph(SUCC))
    for v in range(len(SUCC)):
        cyc = fg.cycle(v)
        assert len(cyc) == fg.len_cycle(v)
        for a, b in zip(cyc, cyc[1:] + cyc[:1]):
            assert a.to == b.from_
        assert fg.root(v) in {e.from_ for e in cyc}
    assert sorted(len(c) for c in fg.all_cycles()) == sorted(
        {fg.len_cycle(v) for v in range(len(SUCC))}
    )


@pytest.mark.parametrize("k", range(12))
def test_next_matches_walking(k):
    fg = FunctionalGraph(_graph(SUCC))
    for v in range(len(SUCC)):
        assert fg.next(v, k) == _walk(v, k)


def test_next_with_huge_k():
    fg = FunctionalGraph(_graph(SUCC))
    k = 10**15 + 7
    for v in range(len(SUCC)):
        t = fg.to_cycle(v)
        assert fg.next(v, k) == fg.next(v, t + (k - t) % fg.len_cycle(v))


def test_errors():
    fg = FunctionalGraph(_graph(SUCC))
    with pytest.raises(ValueError):
        fg.next(0, -1)
    with pytest.raises(ValueError):
        fg.next(0, 1 << 60)
    with pytest.raises(IndexError):
        fg.root(len(SUCC))
    g = StaticGraph(2)
    g.add(0, 1, 1, 0)
    g.build()
    with pytest.raises(ValueError):
        FunctionalGraph(g)