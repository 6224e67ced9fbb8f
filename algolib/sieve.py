"""Sieve of Eratosthenes on a mod-30 wheel."""

from __future__ import annotations

_WHEEL = (1, 7, 11, 13, 17, 19, 23, 29)
_INDEX = {v: i for i, v in enumerate(_WHEEL)}


def _val(i: int) -> int:
    return i // 8 * 30 + _WHEEL[i % 8]


def _idx(x: int) -> int:
    return x // 30 * 8 + _INDEX[x % 30]


class Sieve:
    """Primality table for ``1 .. n`` storing only numbers coprime to 30."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        sz = -(-n // 30) * 8
        deleted = [False] * sz
        for i in range(1, sz):
            if deleted[i]:
                continue
            p = _val(i)
            if p * p > n:
                break
            for j in range(i, sz):
                q = _val(j)
                if q > n // p:
                    break
                deleted[_idx(p * q)] = True
        self._deleted = deleted

    def is_prime(self, x: int) -> bool:
        if x > self._n:
            raise IndexError(f"{x} beyond the sieve")
        if x < 2:
            return False
        if x in (2, 3, 5):
            return True
        if x % 2 == 0 or x % 3 == 0 or x % 5 == 0:
            return False
        return not self._deleted[_idx(x)]

    def primes(self) -> list[int]:
        """All primes up to ``n``, ascending."""
        return [x for x in range(2, self._n + 1) if self.is_prime(x)]