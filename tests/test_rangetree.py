import operator
import random

import pytest

from algolib.rangetree import RangeTree


def _items(seed):
    rng = random.Random(seed)
    return [(rng.randrange(10), rng.randrange(10), rng.randrange(1, 50)) for _ in range(40)]


def _rects(seed):
    rng = random.Random(seed + 100)
    for _ in range(100):
        xl = rng.randrange(-1, 11)
        xr = rng.randrange(xl, 12)
        yl = rng.randrange(-1, 11)
        yr = rng.randrange(yl, 12)
        yield xl, xr, yl, yr


@pytest.mark.parametrize("seed", range(3))
def test_sum_against_scan(seed):
    items = _items(seed)
    tree = RangeTree.from_weighted(operator.add, lambda: 0, items)
    for xl, xr, yl, yr in _rects(seed):
        expected = sum(w for x, y, w in items if xl <= x < xr and yl <= y < yr)
        assert tree.prod(xl, xr, yl, yr) == expected


@pytest.mark.parametrize("seed", range(3))
def test_max_against_scan(seed):
    items = _items(seed)
    tree = RangeTree.from_weighted(max, lambda: -1, items)
    for xl, xr, yl, yr in _rects(seed):
        expected = max((w for x, y, w in items if xl <= x < xr and yl <= y < yr), default=-1)
        assert tree.prod(xl, xr, yl, yr) == expected


def test_set_replaces_value():
    tree = RangeTree(operator.add, lambda: 0, [(1, 2), (3, 4)])
    tree.add(1, 2, 5)
    tree.add(1, 2, 5)
    tree.set(1, 2, 3)
    tree.add(3, 4, 8)
    assert tree.get(1, 2) == 3
    assert tree.prod(0, 10, 0, 10) == 3 + 8


def test_unregistered_point():
    tree = RangeTree(operator.add, lambda: 0, [(1, 2)])
    with pytest.raises(KeyError):
        tree.add(2, 1, 1)


def test_build_lifecycle():
    tree = RangeTree(operator.add, lambda: 0)
    tree.add_point(0, 0)
    with pytest.raises(RuntimeError):
        tree.prod(0, 1, 0, 1)
    tree.build()
    with pytest.raises(RuntimeError):
        tree.add_point(1, 1)
    with pytest.raises(ValueError):
        tree.prod(2, 1, 0, 1)
    assert tree.get(0, 0) == 0