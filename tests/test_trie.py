import random

from algolib.trie import Trie


def walk(trie, s):
    i = 0
    for c in s:
        i = trie.nodes[i].children[c]
    return i


def test_empty_trie_has_root_only():
    t = Trie()
    assert len(t) == 1
    assert t.nodes[0].count == 0
    assert t.nodes[0].parent == -1


def test_shared_prefix():
    t = Trie()
    t.add("abc")
    t.add("abd")
    assert len(t) == 5
    assert t.nodes[0].count == 2
    assert t.nodes[walk(t, "ab")].count == 2
    assert t.nodes[walk(t, "abc")].count == 1


def test_counts_equal_prefix_frequencies():
    rnd = random.Random(8)
    words = ["".join(rnd.choice("abc") for _ in range(rnd.randint(0, 5))) for _ in range(60)]
    t = Trie()
    for w in words:
        t.add(w)
    prefixes = {w[:k] for w in words for k in range(len(w) + 1)}
    assert len(t) == len(prefixes)
    for p in prefixes:
        assert t.nodes[walk(t, p)].count == sum(w.startswith(p) for w in words)


def test_parent_links_are_consistent():
    t = Trie()
    for w in ["tree", "trie", "try", "tea"]:
        t.add(w)
    for idx, node in enumerate(t.nodes[1:], start=1):
        assert idx in t.nodes[node.parent].children.values()
        assert node.parent < idx