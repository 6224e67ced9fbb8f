"""Run-length encoding."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby
from typing import Any


def rle(seq: Iterable[Any]) -> list[tuple[Any, int]]:
    """Runs of equal consecutive items as ``(item, length)`` pairs."""
    return [(item, sum(1 for _ in run)) for item, run in groupby(seq)]