"""Random integers in half-open ranges and uniform floats."""

from __future__ import annotations

import random


class RandomNumberGenerator:
    """Thin wrapper over a Mersenne Twister engine.

    Without a seed the engine is seeded from the operating system.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._engine = random.Random(seed)

    def __call__(self, a: int, b: int) -> int:
        """Uniform integer in ``[a, b)``."""
        if a >= b:
            raise ValueError("empty range")
        return self._engine.randrange(a, b)

    def random(self) -> float:
        """Uniform float in ``[0, 1)``."""
        return self._engine.random()