import operator
import random

import pytest

from algolib.dualsegmenttree import DualSegmentTree


@pytest.mark.parametrize("n", [1, 2, 5, 8, 13])
def test_range_add_matches_brute_force(n):
    rnd = random.Random(n)
    tree = DualSegmentTree(n, operator.add, lambda: 0)
    expected = [0] * n
    for _ in range(100):
        l = rnd.randint(0, n)
        r = rnd.randint(l, n)
        f = rnd.randint(-5, 5)
        tree.apply(l, r, f)
        for i in range(l, r):
            expected[i] += f
        assert [tree.get(i) for i in range(n)] == expected


def test_initial_values_are_kept():
    values = [3, 1, 4, 1, 5, 9]
    tree = DualSegmentTree(values, operator.add, lambda: 0)
    assert [tree[i] for i in range(len(values))] == values
    tree.apply(0, len(values), 2)
    assert [tree[i] for i in range(len(values))] == [v + 2 for v in values]


def test_max_composition():
    rnd = random.Random(3)
    n = 10
    tree = DualSegmentTree(n, max, lambda: 0)
    expected = [0] * n
    for _ in range(50):
        l = rnd.randint(0, n)
        r = rnd.randint(l, n)
        f = rnd.randint(0, 100)
        tree.apply(l, r, f)
        for i in range(l, r):
            expected[i] = max(expected[i], f)
    assert [tree[i] for i in range(n)] == expected


def test_apply_at_and_empty_range():
    tree = DualSegmentTree(4, operator.add, lambda: 0)
    tree.apply(2, 2, 7)
    tree.apply_at(1, 7)
    assert [tree[i] for i in range(4)] == [0, 7, 0, 0]
    assert len(tree) == 4


def test_errors():
    tree = DualSegmentTree(3, operator.add, lambda: 0)
    with pytest.raises(IndexError):
        tree.get(3)
    with pytest.raises(IndexError):
        tree.apply(1, 4, 1)
    with pytest.raises(IndexError):
        tree.apply(2, 1, 1)
    with pytest.raises(ValueError):
        DualSegmentTree(-1, operator.add, lambda: 0)