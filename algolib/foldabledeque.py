"""Deque that can report the ordered product of its contents."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class FoldableDeque:
    """Double-ended queue with the ``op``-product of all elements, front to back.

    ``op`` must be associative and ``e()`` its identity. Operations are
    amortised constant time.
    """

    def __init__(self, op: Callable[[Any, Any], Any], e: Callable[[], Any]) -> None:
        self._op = op
        self._e = e
        self._front: list[tuple[Any, Any]] = []
        self._back: list[tuple[Any, Any]] = []

    def push_front(self, x: Any) -> None:
        agg = self._op(x, self._front[-1][1]) if self._front else x
        self._front.append((x, agg))

    def push_back(self, x: Any) -> None:
        agg = self._op(self._back[-1][1], x) if self._back else x
        self._back.append((x, agg))

    def _rebuild(self, front_items: list[Any], back_items: list[Any]) -> None:
        self._front = []
        now = self._e()
        for x in reversed(front_items):
            now = self._op(x, now)
            self._front.append((x, now))
        self._back = []
        now = self._e()
        for x in back_items:
            now = self._op(now, x)
            self._back.append((x, now))

    def pop_front(self) -> Any:
        """Remove and return the front element."""
        if self._front:
            return self._front.pop()[0]
        if not self._back:
            raise IndexError("pop from an empty deque")
        items = [x for x, _ in self._back]
        n = len(items)
        h = n // 2
        self._rebuild(items[1 : n - h], items[n - h :])
        return items[0]

    def pop_back(self) -> Any:
        """Remove and return the back element."""
        if self._back:
            return self._back.pop()[0]
        if not self._front:
            raise IndexError("pop from an empty deque")
        items = [x for x, _ in reversed(self._front)]
        n = len(items)
        h = n // 2
        self._rebuild(items[:h], items[h : n - 1])
        return items[-1]

    def __len__(self) -> int:
        return len(self._front) + len(self._back)

    def prod(self) -> Any:
        """Product of all elements from front to back."""
        left = self._front[-1][1] if self._front else self._e()
        right = self._back[-1][1] if self._back else self._e()
        return self._op(left, right)