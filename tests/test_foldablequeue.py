import operator
import random
from collections import deque

import pytest

from algolib.foldablequeue import FoldableQueue


def _make():
    return FoldableQueue(operator.add, lambda: "")


def test_empty():
    q = _make()
    assert len(q) == 0
    assert q.prod() == ""
    with pytest.raises(IndexError):
        q.pop()


def test_fifo_order():
    q = _make()
    for ch in "abc":
        q.push(ch)
    assert q.prod() == "abc"
    assert q.pop() == "a"
    q.push("d")
    assert q.prod() == "bcd"
    assert len(q) == 3


def test_min_fold():
    q = FoldableQueue(min, lambda: float("inf"))
    for x in (5, 3, 8):
        q.push(x)
    assert q.prod() == 3
    q.pop()
    q.pop()
    assert q.prod() == 8


def test_random_against_deque():
    rng = random.Random(11)
    q = _make()
    model = deque()
    for step in range(2000):
        if rng.random() < 0.55 or not model:
            ch = chr(ord("a") + step % 26)
            q.push(ch)
            model.append(ch)
        else:
            assert q.pop() == model.popleft()
        assert len(q) == len(model)
        assert q.prod() == "".join(model)