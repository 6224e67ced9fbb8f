"""Manacher's algorithm for odd-length palindromic radii."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def manacher(s: Sequence[Any]) -> list[int]:
    """For each centre ``i``, the largest ``r`` with ``s[i-r+1:i+r]`` a palindrome."""
    n = len(s)
    radius = [0] * n
    i = j = 0
    while i < n:
        while i - j >= 0 and i + j < n and s[i - j] == s[i + j]:
            j += 1
        radius[i] = j
        k = 1
        while i - k >= 0 and k + radius[i - k] < j:
            radius[i + k] = radius[i - k]
            k += 1
        i += k
        j -= k
    return radius