# algolib

Data structures and algorithms for competitive programming and algorithmic
work, in plain Python. Every structure lives in its own module; import it
from there, e.g. `from algolib.treap import Treap`.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Contents

**Sequences and ranges**

- `algolib.fenwicktree.FenwickTree`: point add, half-open range sum, `lower_bound`
- `algolib.prefixsum.PrefixSum`, `PrefixSum2D`: static range and rectangle sums
- `algolib.dst.DisjointSparseTable`: O(1) range products for any associative operation
- `algolib.dualsegmenttree.DualSegmentTree`: range apply, point get
- `algolib.dualsegmenttree2d.DualSegmentTree2D`: rectangle apply, point get over registered points
- `algolib.rangetree.RangeTree`: point `set`/`add` and rectangle products over registered points
- `algolib.treap.Treap`: implicit sequence with insert, erase, range product, reverse, rotate
- `algolib.lazytreap.LazyTreap`: the same plus lazy range `apply`
- `algolib.foldablequeue.FoldableQueue`, `algolib.foldabledeque.FoldableDeque`:
  queues that report the ordered product of their contents
- `algolib.rectangleunion.RectangleUnion`: area of a union of axis-aligned rectangles

**Sets**

- `algolib.binarytrie.BinaryTrie`: fixed-width integer (multi)set with `xor_all`,
  order statistics, `lower`, `upper`, `count`
- `algolib.fastset.FastSet`: set over `0 .. n-1` with `next`, `prev`, `min`, `max`
  (returning `None` when nothing qualifies)
- `algolib.offlineset.OfflineSet`: ordered (multi)set over a universe fixed in advance
- `algolib.treapset.TreapSet`: ordered (multi)set on a treap
- `algolib.intervalset.IntervalSet`, `Interval`: disjoint half-open intervals carrying
  values, with optional `add`/`delete` callbacks and `mex`
- `algolib.compression.Compression`: coordinate compression

The neighbour queries `ge`, `gt`, `le`, `lt` of `OfflineSet` and `TreapSet`
return `(value, index)`, or `(none, len(set))` when no element qualifies.

**Graphs**

- `algolib.staticgraph.StaticGraph`, `Edge`: adjacency lists frozen by `build()`
- `algolib.dijkstra.dijkstra`, `DijkstraRestore` (distances and shortest-path edges)
- `algolib.bellmanford.bellman_ford`: vertices affected by a negative cycle get `-inf`
- `algolib.kruskal.kruskal`: minimum spanning tree; `(inf, [])` when disconnected
- `algolib.functionalgraph.FunctionalGraph`: cycles, tails and k-step successors
- `algolib.namorigraph.NamoriGraph`: the single cycle of a pseudotree and the trees on it

**Trees**

- `algolib.tree.Tree`: LCA, level ancestor, weighted distance, path jumps
- `algolib.hld.HLD`: heavy-light decomposition returning index ranges for paths and subtrees
- `algolib.lct.LinkCutTree`: link, cut, re-root, path products, root and k-th ancestor
- `algolib.rerootingdp.RerootingDP`: a tree DP evaluated for every root
- `algolib.treediameter.tree_diameter`: length and vertices of a longest path

**Number theory**

- `algolib.factorial.Binomial`: factorials, inverse factorials and `comb` modulo a prime
  (default 998244353, tables up to 510000)
- `algolib.fastprime`: `miller_rabin`, `pollard`, `prime_factorize`, `divisors`
- `algolib.fraction.Fraction`: exact rationals in lowest terms
- `algolib.numtheory`: `div_floor`, `div_ceil`, `bin_gcd`, `gcd_all`, `ext_gcd`, `bezout_coef`
- `algolib.linearsieve.LinearSieve` (primes, smallest prime factors, Moebius),
  `algolib.sieve.Sieve` (mod-30 wheel)

**Strings and miscellany**

- `algolib.manacher.manacher`: odd palindromic radii
- `algolib.rollinghash.RollingHash`, `lcp`: hashes modulo 2**61 - 1
- `algolib.trie.Trie`, `TrieNode`: prefix tree with pass counts
- `algolib.rle.rle`: run-length encoding
- `algolib.rng.RandomNumberGenerator`: random integers in `[a, b)` and floats in `[0, 1)`

## Example

```python
from algolib.staticgraph import StaticGraph
from algolib.dijkstra import dijkstra
from algolib.fenwicktree import FenwickTree

g = StaticGraph(3)
g.add(0, 1, 5, 0)
g.add(1, 2, 2, 1)
g.build()
print(dijkstra(g, 0))        # [0, 5, 7]

fw = FenwickTree([1, 2, 3, 4])
print(fw.sum(1, 3))          # 5
```

Out-of-range indices and invalid arguments raise exceptions (`IndexError`,
`ValueError`, `KeyError`) rather than returning sentinels.

## What is not included

There is no public union-find (disjoint-set) class, no Mo's-algorithm query
ordering and no offline dynamic connectivity. The package is a library only;
it has no command-line program.