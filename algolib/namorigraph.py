"""Connected graphs with exactly one cycle (pseudotrees)."""

from __future__ import annotations

from collections import deque

from algolib.staticgraph import Edge, StaticGraph


class NamoriGraph:
    """Finds the unique cycle of an undirected pseudotree and the trees on it.

    Each undirected edge must be added in both directions with a shared index.
    """

    def __init__(self, g: StaticGraph) -> None:
        n = len(g)
        self._n = n
        deg = [len(g[v]) for v in range(n)]
        queue = deque(v for v in range(n) if deg[v] == 1)
        while queue:
            v = queue.popleft()
            for e in g[v]:
                w = e.to
                if deg[w] == 1:
                    continue
                deg[w] -= 1
                if deg[w] == 1:
                    queue.append(w)

        roots = [-1] * n
        arrive = [-1] * n
        es: list[Edge] = []
        for v in range(n):
            if roots[v] != -1 or deg[v] <= 1:
                continue
            now = next((e for e in g[v] if deg[e.to] > 1), None)
            if now is None:
                raise ValueError("graph has no cycle through a remaining vertex")
            while True:
                es.append(now)
                step = next(
                    (ne for ne in g[now.to] if ne.idx != now.idx and deg[ne.to] > 1),
                    None,
                )
                if step is None:
                    raise ValueError("graph is not a pseudotree")
                now = step
                if now.from_ == v:
                    break
            for e in es:
                roots[e.to] = e.to
                arrive[e.to] = 0

        for i in range(n):
            if roots[i] == -1:
                continue
            queue = deque([i])
            while queue:
                v = queue.popleft()
                for e in g[v]:
                    w = e.to
                    if roots[w] != -1:
                        continue
                    roots[w] = roots[v]
                    arrive[w] = arrive[v] + 1
                    queue.append(w)

        self._roots = roots
        self._arrive = arrive
        self._cycle = es

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def root(self, v: int) -> int:
        """Cycle vertex where the tree containing ``v`` hangs."""
        self._check(v)
        return self._roots[v]

    def to_cycle(self, v: int) -> int:
        """Distance in edges from ``v`` to the cycle."""
        self._check(v)
        return self._arrive[v]

    def len_cycle(self) -> int:
        return len(self._cycle)

    def cycle(self) -> list[Edge]:
        """The cycle's edges in walking order."""
        return list(self._cycle)