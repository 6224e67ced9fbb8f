import random
from bisect import bisect_left, bisect_right

import pytest

from algolib.treapset import TreapSet

NONE = -1


def expected_ge(model, x):
    i = bisect_left(model, x)
    return (model[i], i) if i < len(model) else (NONE, len(model))


def expected_gt(model, x):
    i = bisect_right(model, x)
    return (model[i], i) if i < len(model) else (NONE, len(model))


def expected_le(model, x):
    i = bisect_right(model, x) - 1
    return (model[i], i) if i >= 0 else (NONE, len(model))


def expected_lt(model, x):
    i = bisect_left(model, x) - 1
    return (model[i], i) if i >= 0 else (NONE, len(model))


def test_set_ignores_duplicates():
    s = TreapSet(NONE)
    for x in [5, 3, 5, 1]:
        s.insert(x)
    assert list(s) == [1, 3, 5]
    assert len(s) == 3


def test_multiset_keeps_duplicates():
    s = TreapSet(NONE, multi=True)
    for x in [5, 3, 5, 1]:
        s.insert(x)
    assert list(s) == [1, 3, 5, 5]
    s.erase(5)
    assert list(s) == [1, 3, 5]


def test_empty_queries_return_none():
    s = TreapSet(NONE)
    assert s.ge(3) == (NONE, 0)
    assert s.lt(3) == (NONE, 0)
    assert 3 not in s


@pytest.mark.parametrize("multi", [False, True])
def test_random_operations_match_sorted_list(multi):
    rnd = random.Random(3 + multi)
    s = TreapSet(NONE, multi=multi)
    model = []
    for _ in range(800):
        x = rnd.randint(0, 40)
        kind = rnd.randrange(3)
        if kind == 0:
            s.insert(x)
            if multi or x not in model:
                model.insert(bisect_right(model, x), x)
        elif kind == 1:
            s.erase(x)
            if x in model:
                model.remove(x)
        assert (x in s) == (x in model)
        assert s.ge(x) == expected_ge(model, x)
        assert s.gt(x) == expected_gt(model, x)
        assert s.le(x) == expected_le(model, x)
        assert s.lt(x) == expected_lt(model, x)
        assert len(s) == len(model)
    assert list(s) == model
    assert [s[i] for i in range(len(model))] == model


def test_index_errors():
    s = TreapSet(NONE)
    s.insert(2)
    assert s[-1] == 2
    with pytest.raises(IndexError):
        s[1]