"""Factorials, inverse factorials and binomial coefficients modulo a prime."""

from __future__ import annotations


class Binomial:
    """Tables of ``n!`` and ``1/n!`` modulo the prime ``mod`` for ``n < limit``."""

    def __init__(self, mod: int = 998244353, limit: int = 510000) -> None:
        if limit < 2:
            raise ValueError("limit must be at least 2")
        if mod < limit:
            raise ValueError("mod must not be smaller than limit")
        self._mod = mod
        self._limit = limit
        fac = [1] * limit
        finv = [1] * limit
        inv = [0, 1] + [0] * (limit - 2)
        for i in range(2, limit):
            fac[i] = fac[i - 1] * i % mod
            inv[i] = (mod - inv[mod % i] * (mod // i) % mod) % mod
            finv[i] = finv[i - 1] * inv[i] % mod
        self._fac = fac
        self._finv = finv

    def _check(self, n: int) -> None:
        if not 0 <= n < self._limit:
            raise IndexError(f"{n} outside the table")

    def fact(self, n: int) -> int:
        self._check(n)
        return self._fac[n]

    def inv_fact(self, n: int) -> int:
        self._check(n)
        return self._finv[n]

    def comb(self, n: int, k: int) -> int:
        """``C(n, k)`` modulo ``mod``; zero when ``k > n`` or either is negative."""
        if n < k or n < 0 or k < 0:
            return 0
        self._check(n)
        return self._fac[n] * self._finv[k] % self._mod * self._finv[n - k] % self._mod