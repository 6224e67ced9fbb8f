"""Deterministic primality testing and Pollard's rho factorisation."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from math import gcd

_MASK32 = 0xFFFFFFFF


def miller_rabin(n: int) -> bool:
    """Whether ``n`` is prime; deterministic for 64-bit ``n``."""
    if n <= 1:
        return False
    if n in (2, 7, 61):
        return True
    if n % 2 == 0:
        return False
    if n < 4759123141:
        bases = (2, 7, 61)
    else:
        bases = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)
    s = 0
    d = n - 1
    while d % 2 == 0:
        s += 1
        d >>= 1
    for a in bases:
        if a % n == 0:
            return True
        x = pow(a, d, n)
        if x == 1:
            continue
        for _ in range(s):
            if x == n - 1:
                break
            x = x * x % n
        else:
            return False
    return True


def _xorshift() -> Iterator[int]:
    x, y, z, w = 123456789, 362436069, 521288629, 88675123
    while True:
        t = (x ^ (x << 11)) & _MASK32
        x, y, z = y, z, w
        w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))
        yield w


def pollard(n: int) -> int:
    """A divisor of ``n > 1`` greater than 1; ``n`` itself when ``n`` is prime."""
    if n <= 1:
        raise ValueError("n must be greater than 1")
    if n % 2 == 0:
        return 2
    if miller_rabin(n):
        return n
    rand = _xorshift()
    i = 0
    while True:
        i += 1
        r = next(rand)

        def f(v: int) -> int:
            return (v * v + r) % n

        x, y = i, f(i)
        while True:
            p = gcd(y - x + n, n)
            if p == 0 or p == n:
                break
            if p != 1:
                return p
            x = f(x)
            y = f(f(y))


def prime_factorize(n: int) -> list[int]:
    """Prime factors of ``n >= 1`` with multiplicity, ascending."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return []
    p = pollard(n)
    if p == n:
        return [p]
    return sorted(prime_factorize(p) + prime_factorize(n // p))


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n >= 1``, ascending."""
    res = [1]
    for p, c in Counter(prime_factorize(n)).items():
        res = [d * p**k for d in res for k in range(c + 1)]
    return sorted(res)