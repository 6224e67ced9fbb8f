import random

import pytest

from algolib.rectangleunion import RectangleUnion


def _cells(rects):
    return {
        (x, y)
        for l, r, d, u in rects
        for x in range(l, r)
        for y in range(d, u)
    }


def test_single_rectangle():
    assert RectangleUnion([(0, 2, 0, 3)]).area() == 6


def test_empty():
    assert RectangleUnion().area() == 0


def test_disjoint_areas_add_up():
    a = (0, 3, 0, 2)
    b = (5, 9, 4, 7)
    both = RectangleUnion([a, b]).area()
    assert both == RectangleUnion([a]).area() + RectangleUnion([b]).area()


def test_duplicates_and_nested_do_not_count_twice():
    outer = (-4, 6, -2, 5)
    single = RectangleUnion([outer]).area()
    assert RectangleUnion([outer, outer]).area() == single
    assert RectangleUnion([outer, (0, 2, 0, 1)]).area() == single


def test_add_after_construction():
    u = RectangleUnion()
    u.add(1, 4, 1, 4)
    u.add(2, 6, 2, 6)
    assert u.area() == RectangleUnion([(1, 4, 1, 4), (2, 6, 2, 6)]).area()
    assert u.area() == len(_cells([(1, 4, 1, 4), (2, 6, 2, 6)]))


@pytest.mark.parametrize("seed", range(5))
def test_random_against_cells(seed):
    rng = random.Random(seed)
    rects = []
    for _ in range(12):
        l = rng.randrange(-10, 10)
        r = rng.randrange(l + 1, 12)
        d = rng.randrange(-10, 10)
        u = rng.randrange(d + 1, 12)
        rects.append((l, r, d, u))
    assert RectangleUnion(rects).area() == len(_cells(rects))


def test_invalid_rectangles():
    u = RectangleUnion()
    with pytest.raises(ValueError):
        u.add(3, 3, 0, 1)
    with pytest.raises(ValueError):
        u.add(0, 1, 5, 2)