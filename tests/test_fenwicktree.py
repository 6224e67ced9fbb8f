import random
from itertools import accumulate

import pytest

from algolib.fenwicktree import FenwickTree


def test_range_sums_match_slices():
    rnd = random.Random(1)
    values = [rnd.randint(-50, 50) for _ in range(23)]
    fw = FenwickTree(values)
    for l in range(len(values) + 1):
        for r in range(l, len(values) + 1):
            assert fw.sum(l, r) == sum(values[l:r])


def test_add_updates_sums():
    rnd = random.Random(2)
    values = [0] * 17
    fw = FenwickTree(17)
    for _ in range(200):
        i = rnd.randrange(17)
        x = rnd.randint(-10, 10)
        values[i] += x
        fw.add(i, x)
        l = rnd.randint(0, 17)
        r = rnd.randint(l, 17)
        assert fw.sum(l, r) == sum(values[l:r])


def test_size_constructor_starts_at_zero():
    fw = FenwickTree(9)
    assert len(fw) == 9
    assert fw.sum(0, 9) == 0


def test_lower_bound_invariant():
    rnd = random.Random(3)
    values = [rnd.randint(0, 5) for _ in range(13)]
    fw = FenwickTree(values)
    prefix = list(accumulate(values))
    total = prefix[-1]
    for w in range(1, total + 1):
        k = fw.lower_bound(w)
        assert prefix[k - 1] >= w
        if k >= 2:
            assert prefix[k - 2] < w


def test_lower_bound_edges():
    values = [1, 2, 3]
    fw = FenwickTree(values)
    assert fw.lower_bound(0) == 0
    assert fw.lower_bound(-4) == 0
    assert fw.lower_bound(sum(values) + 1) == len(values) + 1


def test_errors():
    fw = FenwickTree(4)
    with pytest.raises(IndexError):
        fw.add(4, 1)
    with pytest.raises(IndexError):
        fw.sum(2, 1)
    with pytest.raises(IndexError):
        fw.sum(0, 5)
    with pytest.raises(ValueError):
        FenwickTree(-1)