"""Binary trie over fixed-width non-negative integers with a global xor."""

from __future__ import annotations


class _Node:
    __slots__ = ("cnt", "lazy", "ch")

    def __init__(self) -> None:
        self.cnt = 0
        self.lazy = 0
        self.ch: list[_Node | None] = [None, None]


def _count(t: _Node | None) -> int:
    return t.cnt if t is not None else 0


class BinaryTrie:
    """Ordered (multi)set of ``bits``-bit integers supporting ``xor_all``.

    Without ``multi`` every value is stored at most once.
    """

    def __init__(self, bits: int = 32, multi: bool = False) -> None:
        if bits <= 0:
            raise ValueError("bits must be positive")
        self._bits = bits
        self._multi = multi
        self._root: _Node | None = None

    def _in_range(self, x: int) -> bool:
        return 0 <= x < (1 << self._bits)

    @staticmethod
    def _push(t: _Node, b: int) -> None:
        if not t.lazy:
            return
        if (t.lazy >> b) & 1:
            t.ch[0], t.ch[1] = t.ch[1], t.ch[0]
        for child in t.ch:
            if child is not None:
                child.lazy ^= t.lazy
        t.lazy = 0

    def _insert(self, t: _Node | None, x: int, b: int) -> _Node:
        if t is None:
            t = _Node()
        if b < 0:
            t.cnt = t.cnt + 1 if self._multi else 1
            return t
        self._push(t, b)
        f = (x >> b) & 1
        t.ch[f] = self._insert(t.ch[f], x, b - 1)
        t.cnt = _count(t.ch[0]) + _count(t.ch[1])
        return t

    def _erase(self, t: _Node, x: int, b: int) -> _Node | None:
        t.cnt -= 1
        if t.cnt == 0:
            return None
        if b < 0:
            return t
        self._push(t, b)
        f = (x >> b) & 1
        child = t.ch[f]
        assert child is not None
        t.ch[f] = self._erase(child, x, b - 1)
        return t

    def __len__(self) -> int:
        return _count(self._root)

    def __bool__(self) -> bool:
        return self._root is not None

    def insert(self, x: int) -> None:
        """Insert ``x``, which must fit in ``bits`` bits."""
        if not self._in_range(x):
            raise ValueError(f"{x} does not fit in {self._bits} bits")
        self._root = self._insert(self._root, x, self._bits - 1)

    def erase(self, x: int) -> None:
        """Remove one copy of ``x``; raises ``KeyError`` if absent."""
        if self.count(x) == 0:
            raise KeyError(x)
        assert self._root is not None
        self._root = self._erase(self._root, x, self._bits - 1)

    def xor_all(self, x: int) -> None:
        """Replace every stored value ``v`` by ``v ^ x``."""
        if self._root is not None:
            self._root.lazy ^= x

    def __getitem__(self, k: int) -> int:
        """The ``k``-th smallest value (0-based)."""
        n = len(self)
        if k < 0:
            k += n
        if not 0 <= k < n:
            raise IndexError("index out of range")
        t = self._root
        res = 0
        for b in range(self._bits - 1, -1, -1):
            assert t is not None
            self._push(t, b)
            m = _count(t.ch[0])
            if k < m:
                t = t.ch[0]
            else:
                k -= m
                t = t.ch[1]
                res |= 1 << b
        return res

    def lower(self, x: int) -> int:
        """Number of stored values smaller than ``x``."""
        if x <= 0:
            return 0
        if x >= (1 << self._bits):
            return len(self)
        t = self._root
        res = 0
        for b in range(self._bits - 1, -1, -1):
            if t is None:
                break
            self._push(t, b)
            f = (x >> b) & 1
            if f:
                res += _count(t.ch[0])
            t = t.ch[f]
        return res

    def upper(self, x: int) -> int:
        """Number of stored values not greater than ``x``."""
        return self.lower(x + 1)

    def count(self, x: int) -> int:
        """Multiplicity of ``x``."""
        if self._root is None or not self._in_range(x):
            return 0
        t: _Node | None = self._root
        for b in range(self._bits - 1, -1, -1):
            assert t is not None
            self._push(t, b)
            t = t.ch[(x >> b) & 1]
            if t is None:
                return 0
        return t.cnt