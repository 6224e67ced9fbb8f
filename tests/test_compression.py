import pytest

from algolib.compression import Compression


def test_ranks_are_sorted_distinct_values():
    values = [5, 3, 5, 1, 9, 3]
    c = Compression(values)
    assert len(c) == len(set(values))
    assert [c[i] for i in range(len(c))] == sorted(set(values))


def test_index_round_trip():
    values = [40, -7, 12, 40, 0]
    c = Compression(values)
    for v in values:
        assert c[c.index(v)] == v
    ranks = [c.index(v) for v in sorted(set(values))]
    assert ranks == list(range(len(c)))


def test_unknown_value_raises():
    c = Compression([1, 3, 5])
    with pytest.raises(KeyError):
        c.index(4)
    with pytest.raises(KeyError):
        c.index(6)
    assert c.index(5) == 2


def test_rank_out_of_range():
    c = Compression([1, 3])
    with pytest.raises(IndexError):
        c[2]
    with pytest.raises(IndexError):
        c[-1]
    assert (c[0], c[1]) == (1, 3)