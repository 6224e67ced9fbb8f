import pytest

from algolib.rng import RandomNumberGenerator


def test_same_seed_same_sequence():
    a = RandomNumberGenerator(42)
    b = RandomNumberGenerator(42)
    assert [a(0, 1000) for _ in range(20)] == [b(0, 1000) for _ in range(20)]
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]


def test_integers_within_half_open_range():
    rng = RandomNumberGenerator(1)
    draws = [rng(-3, 4) for _ in range(500)]
    assert all(-3 <= x < 4 for x in draws)
    assert set(draws) == set(range(-3, 4))


def test_floats_within_unit_interval():
    rng = RandomNumberGenerator(2)
    assert all(0.0 <= rng.random() < 1.0 for _ in range(200))


def test_empty_range_rejected():
    rng = RandomNumberGenerator(3)
    with pytest.raises(ValueError):
        rng(5, 5)