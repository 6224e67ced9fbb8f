"""Prefix tree counting how many added words pass through each node."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TrieNode:
    """A node: its parent index, child indices by character, and pass count."""

    parent: int = -1
    children: dict[str, int] = field(default_factory=dict)
    count: int = 0


class Trie:
    """Trie whose nodes live in ``nodes``; node 0 is the root."""

    def __init__(self) -> None:
        self.nodes: list[TrieNode] = [TrieNode()]

    def add(self, s: str) -> None:
        """Add the word ``s``, counting it at every node on its path."""
        i = 0
        self.nodes[i].count += 1
        for c in s:
            nxt = self.nodes[i].children.get(c)
            if nxt is None:
                nxt = len(self.nodes)
                self.nodes[i].children[c] = nxt
                self.nodes.append(TrieNode(parent=i))
            i = nxt
            self.nodes[i].count += 1

    def __len__(self) -> int:
        return len(self.nodes)