"""Integer division helpers, gcd and linear Diophantine equations."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce


def div_floor(a: int, b: int) -> int:
    """``floor(a / b)``."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a // b


def div_ceil(a: int, b: int) -> int:
    """``ceil(a / b)``."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return -(-a // b)


def _ctz(v: int) -> int:
    return (v & -v).bit_length() - 1


def bin_gcd(a: int, b: int) -> int:
    """Non-negative gcd of ``a`` and ``b`` by the binary algorithm."""
    a, b = abs(a), abs(b)
    if a == 0 or b == 0:
        return a or b
    x, y = _ctz(a), _ctz(b)
    a >>= x
    b >>= y
    while a != b:
        if a < b:
            a, b = b, a
        a -= b
        a >>= _ctz(a)
    return a << min(x, y)


def gcd_all(values: Iterable[int]) -> int:
    """gcd of all values; 0 for none."""
    return reduce(bin_gcd, values, 0)


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if b == 0:
        return abs(a), (1 if a >= 0 else -1), 0
    q = _tdiv(a, b)
    g, y, x = ext_gcd(b, a - q * b)
    y -= q * x
    return g, x, y


def bezout_coef(a: int, b: int, c: int) -> tuple[int, int, int]:
    """``(g, x, y)`` with ``a*x + b*y == c`` and ``x`` the least non-negative choice.

    Raises ``ValueError`` when no integer solution exists.
    """
    g, x, y = ext_gcd(a, b)
    if g == 0:
        raise ValueError("a and b are both zero")
    if c % g:
        raise ValueError("no integer solution")
    a //= g
    b //= g
    c //= g
    if b == 0:
        return g, x * c, y
    nx = x * c
    ny = y * c
    q = div_floor(-nx, b) if b < 0 else div_ceil(-nx, b)
    return g, nx + b * q, ny - a * q