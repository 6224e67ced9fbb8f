import math

import pytest

from algolib.factorial import Binomial

MOD = 998244353


def test_small_value():
    assert Binomial(MOD, 100).comb(5, 2) == 10


@pytest.mark.parametrize("n", [0, 1, 7, 50, 99])
def test_comb_matches_math(n):
    b = Binomial(MOD, 100)
    for k in range(n + 1):
        assert b.comb(n, k) == math.comb(n, k) % MOD


def test_fact_and_inverse():
    b = Binomial(MOD, 200)
    for n in range(200):
        assert b.fact(n) == math.factorial(n) % MOD
        assert b.fact(n) * b.inv_fact(n) % MOD == 1


def test_small_prime_modulus():
    b = Binomial(7, 7)
    for n in range(7):
        for k in range(n + 1):
            assert b.comb(n, k) == math.comb(n, k) % 7


def test_out_of_domain_is_zero():
    b = Binomial(MOD, 10)
    assert b.comb(3, 5) == 0
    assert b.comb(-1, 0) == 0
    assert b.comb(4, -2) == 0


def test_errors():
    b = Binomial(MOD, 10)
    with pytest.raises(IndexError):
        b.comb(10, 3)
    with pytest.raises(IndexError):
        b.fact(-1)
    with pytest.raises(ValueError):
        Binomial(7, 8)