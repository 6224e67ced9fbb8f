"""Functional graphs: every vertex has exactly one outgoing edge."""

from __future__ import annotations

from collections import deque

from algolib.staticgraph import Edge, StaticGraph

_LOG = 60


class FunctionalGraph:
    """Decomposes a functional graph into cycles with trees hanging off them.

    The first outgoing edge of each vertex is taken as its successor.
    """

    def __init__(self, g: StaticGraph) -> None:
        n = len(g)
        succ: list[Edge] = []
        for v in range(n):
            out = g[v]
            if not out:
                raise ValueError(f"vertex {v} has no outgoing edge")
            succ.append(out[0])
        self._n = n
        self._succ = succ
        nxt = [e.to for e in succ]
        self._nxt = nxt

        rev: list[list[int]] = [[] for _ in range(n)]
        deg = [0] * n
        for v, w in enumerate(nxt):
            rev[w].append(v)
            deg[w] += 1
        queue = deque(v for v in range(n) if deg[v] == 0)
        while queue:
            w = nxt[queue.popleft()]
            deg[w] -= 1
            if deg[w] == 0:
                queue.append(w)

        roots = [-1] * n
        arrive = [-1] * n
        length = [-1] * n
        cycle_id = [0] * n
        for v in range(n):
            if deg[v] > 0:
                roots[v] = v
                arrive[v] = 0

        cycles: list[list[Edge]] = []
        for v in range(n):
            if roots[v] == -1 or length[v] != -1:
                continue
            es: list[Edge] = []
            now = succ[v]
            while True:
                es.append(now)
                now = succ[now.to]
                if now.from_ == v:
                    break
            for e in es:
                length[e.from_] = length[e.to] = len(es)
                cycle_id[e.from_] = cycle_id[e.to] = len(cycles)
            cycles.append(es)

        for i in range(n):
            if roots[i] == -1:
                continue
            queue = deque([i])
            while queue:
                v = queue.popleft()
                for w in rev[v]:
                    if roots[w] != -1:
                        continue
                    roots[w] = roots[v]
                    arrive[w] = arrive[v] + 1
                    length[w] = length[v]
                    cycle_id[w] = cycle_id[v]
                    queue.append(w)

        self._roots = roots
        self._arrive = arrive
        self._len = length
        self._id = cycle_id
        self._cycles = cycles
        self._table: list[list[int]] | None = None

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def cc(self) -> int:
        """Number of connected components, i.e. of cycles."""
        return len(self._cycles)

    def root(self, v: int) -> int:
        """First vertex on a cycle reached from ``v``."""
        self._check(v)
        return self._roots[v]

    def to_cycle(self, v: int) -> int:
        """Number of steps from ``v`` to its cycle."""
        self._check(v)
        return self._arrive[v]

    def len_cycle(self, v: int) -> int:
        """Length of the cycle that ``v`` reaches."""
        self._check(v)
        return self._len[v]

    def cycle(self, v: int) -> list[Edge]:
        """Edges of the cycle that ``v`` reaches."""
        self._check(v)
        return list(self._cycles[self._id[v]])

    def all_cycles(self) -> list[list[Edge]]:
        return [list(c) for c in self._cycles]

    def next(self, v: int, k: int) -> int:
        """Vertex reached from ``v`` after ``k`` steps, ``0 <= k < 2**60``."""
        self._check(v)
        if not 0 <= k < (1 << _LOG):
            raise ValueError("k must be in [0, 2**60)")
        if self._table is None:
            table = [list(self._nxt)]
            for _ in range(1, _LOG):
                last = table[-1]
                table.append([last[w] for w in last])
            self._table = table
        res = v
        for j, row in enumerate(self._table):
            if k >> j & 1:
                res = row[res]
        return res