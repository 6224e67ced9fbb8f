"""Set of small integers backed by a 64-ary tree of bit words."""

from __future__ import annotations

_B = 64


def _bsf(x: int) -> int:
    return (x & -x).bit_length() - 1


def _bsr(x: int) -> int:
    return x.bit_length() - 1


class FastSet:
    """Set over ``0 .. n-1`` with fast successor and predecessor queries."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._cnt = 0
        self._seg: list[list[int]] = []
        m = n
        while True:
            m = (m + _B - 1) // _B
            self._seg.append([0] * m)
            if m <= 1:
                break

    def _check(self, x: int) -> None:
        if not 0 <= x < self._n:
            raise IndexError(f"{x} out of range")

    def __contains__(self, x: int) -> bool:
        self._check(x)
        return bool(self._seg[0][x // _B] >> (x % _B) & 1)

    def insert(self, x: int) -> None:
        if x in self:
            return
        self._cnt += 1
        for level in self._seg:
            level[x // _B] |= 1 << (x % _B)
            x //= _B

    def erase(self, x: int) -> None:
        if x not in self:
            return
        self._cnt -= 1
        keep = 0
        for level in self._seg:
            word = (level[x // _B] & ~(1 << (x % _B))) | (keep << (x % _B))
            level[x // _B] = word
            keep = 1 if word else 0
            x //= _B

    def next(self, x: int) -> int | None:
        """Smallest element ``>= x``, or ``None``."""
        if x >= self._n:
            return None
        x = max(x, 0)
        for i, level in enumerate(self._seg):
            if x // _B == len(level):
                break
            d = level[x // _B] >> (x % _B)
            if not d:
                x = x // _B + 1
                continue
            x += _bsf(d)
            for j in range(i - 1, -1, -1):
                x = x * _B + _bsf(self._seg[j][x])
            return x
        return None

    def prev(self, x: int) -> int | None:
        """Largest element ``<= x``, or ``None``."""
        x = min(x, self._n - 1)
        if x < 0:
            return None
        for i, level in enumerate(self._seg):
            if x == -1:
                break
            d = level[x // _B] & ((2 << (x % _B)) - 1)
            if not d:
                x = x // _B - 1
                continue
            x = x - x % _B + _bsr(d)
            for j in range(i - 1, -1, -1):
                x = x * _B + _bsr(self._seg[j][x])
            return x
        return None

    def min(self) -> int | None:
        return self.next(0)

    def max(self) -> int | None:
        return self.prev(self._n - 1)

    def __len__(self) -> int:
        return self._cnt