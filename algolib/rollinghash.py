"""Polynomial rolling hash modulo the Mersenne prime 2**61 - 1."""

from __future__ import annotations

import random
from collections.abc import Iterable

_MOD = (1 << 61) - 1
_DEFAULT_BASE = random.SystemRandom().randrange(2, _MOD - 1)


class RollingHash:
    """Prefix hashes of a string (or a sequence of integers) for O(1) substring hashes.

    Hashes are only comparable between instances with the same ``base``; the
    default base is chosen at random once per process.
    """

    def __init__(self, s: Iterable[str | int], base: int | None = None) -> None:
        b = (_DEFAULT_BASE if base is None else base) % _MOD
        prefix = [0]
        power = [1]
        for c in s:
            code = ord(c) if isinstance(c, str) else c
            prefix.append((prefix[-1] * b + code) % _MOD)
            power.append(power[-1] * b % _MOD)
        self._hash = prefix
        self._power = power

    def __len__(self) -> int:
        return len(self._hash) - 1

    def get(self, l: int, r: int) -> int:
        """Hash of the substring ``[l, r)``."""
        if not 0 <= l <= r <= len(self):
            raise IndexError(f"range [{l}, {r}) out of bounds")
        return (self._hash[r] - self._hash[l] * self._power[r - l]) % _MOD

    def connect(self, h1: int, h2: int, length: int) -> int:
        """Hash of the concatenation of ``h1`` and a ``length``-long string hashed as ``h2``."""
        if not 0 <= length <= len(self):
            raise IndexError(f"length {length} out of range")
        return (h1 * self._power[length] + h2) % _MOD


def lcp(rh1: RollingHash, l1: int, r1: int, rh2: RollingHash, l2: int, r2: int) -> int:
    """Length of the longest common prefix of ``[l1, r1)`` in ``rh1`` and ``[l2, r2)`` in ``rh2``."""
    if l1 > r1 or l2 > r2:
        raise ValueError("range bounds are reversed")
    if l1 == r1 or l2 == r2:
        return 0
    length = min(r1 - l1, r2 - l2)
    if rh1.get(l1, l1 + length) == rh2.get(l2, l2 + length):
        return length
    ok, ng = 0, length
    while ng - ok > 1:
        mid = (ok + ng) // 2
        if rh1.get(l1, l1 + mid) == rh2.get(l2, l2 + mid):
            ok = mid
        else:
            ng = mid
    return ok