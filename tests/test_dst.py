import math
import operator
import random

import pytest

from algolib.dst import DisjointSparseTable


@pytest.mark.parametrize("n", [0, 1, 2, 5, 8, 9, 16, 17])
def test_min_matches_slices(n):
    rnd = random.Random(n)
    values = [rnd.randint(-100, 100) for _ in range(n)]
    dst = DisjointSparseTable(values, min, lambda: math.inf)
    for l in range(n + 1):
        for r in range(l, n + 1):
            assert dst.prod(l, r) == min(values[l:r], default=math.inf)


@pytest.mark.parametrize("n", [3, 7, 12])
def test_noncommutative_order_is_kept(n):
    letters = [chr(ord("a") + i) for i in range(n)]
    dst = DisjointSparseTable(letters, operator.add, lambda: "")
    for l in range(n + 1):
        for r in range(l, n + 1):
            assert dst.prod(l, r) == "".join(letters[l:r])


def test_empty_range_is_identity():
    dst = DisjointSparseTable([4, 5], operator.add, lambda: 0)
    assert dst.prod(1, 1) == 0
    assert len(dst) == 2


def test_out_of_range():
    dst = DisjointSparseTable([1, 2, 3], min, lambda: math.inf)
    with pytest.raises(IndexError):
        dst.prod(0, 4)
    with pytest.raises(IndexError):
        dst.prod(2, 1)