# algokit

A library of classic algorithms and data structures in plain Python:
modular arithmetic, number theory, integer geometry, graph algorithms, range
queries and tree queries. The one runtime dependency is `sortedcontainers`,
used by the dynamic hulls.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.modint` | `ModInt` (default modulus 998244353) with arithmetic, `inv` and `pow`; `inv_mod(a, m)` |
| `algokit.arith` | `floor_div`, `ceil_div`, `highest_bit` |
| `algokit.sieve` | `linear_sieve(maximum)` returning a `Sieve` with `primes`, `prime` flags and `smallest_factor` |
| `algokit.crt` | `chinese_remainder(a1, m1, a2, m2)`, `chinese_remainder_all(residues, moduli)` for coprime moduli |
| `algokit.choose` | `Combinatorics`: `factorial`, `inv_factorial`, `choose`, `permute`, `inv_choose`, `inv_permute` modulo a prime |
| `algokit.mod_matrix` | `ModMatrix`: `zeros`, `identity`, `*` / `@` products, `apply` to a column, `power`, `format` |
| `algokit.float_matrix` | `FloatMatrix`, the same operations over floats |
| `algokit.fraction` | `Fraction`, always reduced, with a non-negative denominator; `inv`, `is_integer` |
| `algokit.primality` | `miller_rabin(n)`, exact for every `n < 2**64` |
| `algokit.point` | `Point` (`norm`, `dist`, `rotate90`, `top_half`) and `cross`, `dot`, `cross_sign`, `left_turn_strict`, `left_turn_lenient`, `collinear`, `area_signed_2x`, `distance_to_line`, `manhattan_dist`, `infinity_norm_dist`, `yx_compare`, `angle_compare` |
| `algokit.dp_hull` | `DPHull`: insert lines `a*x + b` in any order and query the maximum at any `x` |
| `algokit.monotonic_hull` | `MonotonicDPHull`: the same for non-decreasing slopes and non-decreasing queries |
| `algokit.online_hull` | `UpperHull` and `OnlineHull`: incremental convex hull with doubled area and point location |
| `algokit.manhattan_mst` | `manhattan_mst(points)` returning a list of `Edge(index1, index2, dist)` |
| `algokit.bridges` | `BridgeFinder`, `critical_connections(n, connections)` |
| `algokit.biconnected` | `BiconnectedComponents` (cut vertices, bridges, components) and `BlockCutTree` |
| `algokit.graph_basics` | `bipartite_components(n, edges)`, `topological_sort(adj)` |
| `algokit.arrays` | `closest_left`, `closest_right`, `compress_array`, `build_cartesian_tree` |
| `algokit.monotonic_rmq` | `MonotonicRMQ` (sliding-window min or max), `rmq_every_k(values, k, maximum_mode)` |
| `algokit.array_hash` | `ArrayHash`, a 64-bit array hash with O(1) `modify`; `splitmix64` |
| `algokit.sparse_table` | `SparseTableRMQ` over half-open ranges, ties going to the largest index |
| `algokit.block_rmq` | `BlockRMQ`, a block-bitmask RMQ with the same interface |
| `algokit.lca` | `LCA`: lowest common ancestor, distances, k-th ancestor, path nodes, diameter, center, compressed subtrees |
| `algokit.weighted_lca` | `WeightedLCA`, the same with edge weights and `get_weighted_dist` |
| `algokit.lazy_segtree` | `LazySegTree` over `Segment` (`maximum`, `total`) with `SegmentChange` (range add, range assign) |
| `algokit.heavy_light` | `SubtreeHeavyLight`: path and subtree updates and queries, on vertices or on edges |

## Examples

Modular arithmetic and binomials:

```python
from algokit.modint import ModInt
from algokit.choose import Combinatorics

x = ModInt(3, 998244353)
print(x.pow(10), x.inv() * x)   # 59049 1

comb = Combinatorics(998244353)
print(comb.choose(10, 3))       # 120
```

Matrix powers modulo a prime:

```python
from algokit.mod_matrix import ModMatrix

fib = ModMatrix([[1, 1], [1, 0]])
fib.power(10)[0, 1]             # 55
(fib @ fib)[0, 0]               # 2
```

Exact primality for 64-bit numbers:

```python
from algokit.primality import miller_rabin

miller_rabin(1_000_000_007)  # True
```

Maximum of linear functions:

```python
from algokit.dp_hull import DPHull

hull = DPHull()
hull.insert(2, 1)
hull.insert(-1, 5)
hull.query(3)   # max(2*3 + 1, -3 + 5) == 7
```

Bridges of a graph, in input order:

```python
from algokit.bridges import critical_connections

critical_connections(4, [[0, 1], [1, 2], [2, 0], [1, 3]])  # [[1, 3]]
```

Tree queries:

```python
from algokit.lca import LCA

tree = LCA(5)
for a, b in [(0, 1), (0, 2), (1, 3), (1, 4)]:
    tree.add_edge(a, b)
tree.build()
tree.get_lca(3, 4)   # 1
tree.get_dist(3, 2)  # 3
```

Path updates on a tree:

```python
from algokit.heavy_light import SubtreeHeavyLight
from algokit.lazy_segtree import Segment, SegmentChange

hld = SubtreeHeavyLight(4, vertex_mode=True)
for a, b in [(0, 1), (1, 2), (1, 3)]:
    hld.add_edge(a, b)
hld.build(Segment(0, 0))
hld.update_path(2, 3, SegmentChange(to_add=5))
hld.query_subtree(1).total   # 15
```

## Conventions

- Range queries use half-open ranges `[a, b)`.
- Graph and tree nodes are numbered from `0`.
- Operations whose preconditions fail, such as querying an empty hull,
  inverting zero modulo a prime or asking for an out-of-range node, raise an
  exception instead of returning an undefined result.

## What this package does not do

algokit is a library only. It installs no command-line programs and reads
no input files; every structure is built and queried from Python code.