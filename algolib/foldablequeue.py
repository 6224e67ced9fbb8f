"""Queue that can report the ordered product of its contents."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class FoldableQueue:
    """FIFO queue with the ``op``-product of all elements, oldest first.

    ``op`` must be associative and ``e()`` its identity.
    """

    def __init__(self, op: Callable[[Any, Any], Any], e: Callable[[], Any]) -> None:
        self._op = op
        self._e = e
        self._front: list[tuple[Any, Any]] = []
        self._back: list[tuple[Any, Any]] = []

    def push(self, x: Any) -> None:
        agg = self._op(self._back[-1][1], x) if self._back else x
        self._back.append((x, agg))

    def pop(self) -> Any:
        """Remove and return the oldest element."""
        if not self._front:
            if not self._back:
                raise IndexError("pop from an empty queue")
            now = self._e()
            for x, _ in reversed(self._back):
                now = self._op(x, now)
                self._front.append((x, now))
            self._back = []
        return self._front.pop()[0]

    def __len__(self) -> int:
        return len(self._front) + len(self._back)

    def prod(self) -> Any:
        """Product of all elements, oldest first."""
        left = self._front[-1][1] if self._front else self._e()
        right = self._back[-1][1] if self._back else self._e()
        return self._op(left, right)