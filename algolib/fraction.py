"""Exact rational numbers kept in lowest terms."""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Any


@total_ordering
class Fraction:
    """Rational ``p/q`` with ``q > 0`` and ``gcd(p, q) == 1``."""

    __slots__ = ("p", "q")

    def __init__(self, p: int = 0, q: int = 1) -> None:
        if q == 0:
            raise ZeroDivisionError("denominator is zero")
        if q < 0:
            p, q = -p, -q
        if p == 0:
            q = 1
        else:
            g = math.gcd(p, q)
            p //= g
            q //= g
        self.p = p
        self.q = q

    @staticmethod
    def _coerce(other: Any) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int):
            return Fraction(other)
        return None

    def __add__(self, other: Any) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(self.p * o.q + self.q * o.p, self.q * o.q)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(self.p * o.q - self.q * o.p, self.q * o.q)

    def __rsub__(self, other: Any) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: Any) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(self.p * o.p, self.q * o.q)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if o.p == 0:
            raise ZeroDivisionError("division by zero")
        return Fraction(self.p * o.q, self.q * o.p)

    def __rtruediv__(self, other: Any) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __neg__(self) -> Fraction:
        return Fraction(-self.p, self.q)

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self.p == o.p and self.q == o.q

    def __lt__(self, other: Any) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self.p * o.q < o.p * self.q

    def __hash__(self) -> int:
        return hash((self.p, self.q))

    def __str__(self) -> str:
        return f"{self.p}/{self.q}"

    def __repr__(self) -> str:
        return f"Fraction({self.p}, {self.q})"