"""Static adjacency-list graph: edges are collected first, then frozen by ``build``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Edge:
    """A directed edge ``from_ -> to`` with a cost and a caller-chosen index."""

    from_: int
    to: int
    cost: Any = 1
    idx: int = -1


class StaticGraph:
    """Graph on vertices ``0 .. n-1`` whose edges are grouped by source after ``build``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self._n = n
        self._pending: list[Edge] = []
        self._adj: list[tuple[Edge, ...]] | None = None

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    @property
    def built(self) -> bool:
        return self._adj is not None

    def add(self, u: int, v: int, cost: Any = 1, idx: int = -1) -> None:
        """Add the directed edge ``u -> v``; only allowed before ``build``."""
        if self._adj is not None:
            raise RuntimeError("graph is already built")
        self._check(u)
        self._check(v)
        self._pending.append(Edge(u, v, cost, idx))

    def build(self) -> None:
        """Freeze the graph; calling it again does nothing."""
        if self._adj is not None:
            return
        buckets: list[list[Edge]] = [[] for _ in range(self._n)]
        for edge in self._pending:
            buckets[edge.from_].append(edge)
        self._adj = [tuple(bucket) for bucket in buckets]
        self._pending = []

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, v: int) -> tuple[Edge, ...]:
        if self._adj is None:
            raise RuntimeError("graph is not built")
        self._check(v)
        return self._adj[v]