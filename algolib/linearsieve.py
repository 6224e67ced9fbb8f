"""Linear sieve: primes, smallest prime factors and the Moebius function."""

from __future__ import annotations


class LinearSieve:
    """Sieve over ``0 .. n`` recording each number's smallest prime factor."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.primes: list[int] = []
        self.spf = [0] * (n + 1)
        spf = self.spf
        primes = self.primes
        for i in range(2, n + 1):
            if spf[i] == 0:
                spf[i] = i
                primes.append(i)
            for p in primes:
                if p * i > n or p > spf[i]:
                    break
                spf[p * i] = p

    def is_prime(self, x: int) -> bool:
        if x > self.n:
            raise IndexError(f"{x} beyond the sieve")
        return x >= 2 and self.spf[x] == x

    def mobius(self) -> list[int]:
        """Moebius function values for ``0 .. n`` (index 0 holds 0)."""
        n = self.n
        res = [0] * (n + 1)
        if n >= 1:
            res[1] = 1
        for p in self.primes:
            res[p] = -1
        for i in range(2, n + 1):
            if res[i] == 0:
                continue
            for p in self.primes:
                if p * i > n or p >= self.spf[i]:
                    break
                res[p * i] = -res[i]
        return res