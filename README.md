# algokit

A toolbox of classic algorithms for contest-style problem solving, written as
plain Python modules you can import one at a time. The only runtime
dependency is `sortedcontainers`, used by the closest-pair sweep.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Algebra

- `algokit.walsh` — `fwht(values, inverse=False)` and `xor_multiply(p1, p2)`
  (XOR convolution). Lengths must be a power of two; an inverse transform that
  is not divisible by the length raises `ValueError`.
- `algokit.fft` — `fft(values, invert=False)` returns complex coefficients for a
  power-of-two length. `multiply(a, b)` multiplies integer coefficient lists,
  directly when either is shorter than 500 and otherwise through an FFT on
  15-bit halves; `multiply_slow` is the direct convolution.
  `multiply_mod(a, b, mod)` gives the product modulo `mod` for coefficients in
  `[0, mod)`.
- `algokit.ntt` — `NumberTheoreticTransform(mod)` for an odd prime modulus, with
  `transform`, `multiply` and `square`. The module-level `multiply(a, b)` works
  modulo 998244353 (directly when either input has at most 5 terms);
  `multiply_crt(a, b, mod=100003)` works for any modulus by combining two NTT
  primes with the Chinese remainder theorem. `mod_inverse(a, mod)` raises
  `ValueError` when no inverse exists.
- `algokit.interpolation` — `interpolate(xs, ys)` (floating point) and
  `interpolate_mod(xs, ys, mod)` return the coefficients `a[0..n-1]` of the
  polynomial through the given points.
- `algokit.ternary` — `xor3(a, b, mod=None)` and `dxor3(a, b, mod=None)`: base-3
  digit-wise addition and subtraction without carries, optionally reduced
  modulo `mod`.
- `algokit.simplex` — `LPSolver(a, b, c).solve()` maximises `c·x` subject to
  `A x <= b`, `x >= 0` and returns `(value, x)`; the value is `-inf` when the
  problem is infeasible and `inf` when it is unbounded, with `x` then `None`.
- `algokit.matrix` — `naive_multiply`, `strassen`, `matrix_power(mat, exponent)`
  (exponent at least 1) and the helpers `zero_matrix`, `submatrix`, `expand`
  (pad to a power-of-two square), `add`, `subtract`.

### Geometry

- `algokit.geometry` — a frozen 2D `Point` with `+`, `-`, scalar `*` and `/`;
  `cross`, `dot`, `dist`, `dist2`, `perp`, `rotl`, `rotr`, `rotate`, `unit`,
  `normal`, `to_radian`, `to_degree`; predicates `is_parallel`,
  `is_collinear` (three or four points), `is_left`, `opposite_sides`,
  `is_between`, `segment_intersect`, `in_triangle`, `is_convex`; measures
  `line_dist`, `segment_distance`, `polygon_area`. `line_intersection(a, b, c, d)`
  returns `(Intersection, point)`, where `Intersection` is `POINT`, `NONE` or
  `INFINITE` and the point is `None` unless it is `POINT`.
- `algokit.vectors` — a frozen 3D `Vector` (`*` with a vector is the cross
  product, `|` the dot product, `norm`, `norm2`) and `Line` in the form
  `a*x + b*y = c`, built with `Line.from_points` or `Line.from_coefficients`.
  Functions: `radian`, `degree`, `lies_collinear`, `lines_parallel`,
  `line_intersection`, `lies_on_segment`, `dist_point_line`, `rotate_x`,
  `rotate_y`, `rotate_z`, `cross2d`, `is_cw`, `collinear`, `is_convex`,
  `polygon_area`.
- `algokit.circles` — `Circle(center, r2)` with a `radius` property,
  `Circle.from_points(*points)` for zero to three points (three collinear points
  raise `ValueError`), `Circle.covers(p)`, and `min_covering_circle(points)`.
- `algokit.closest_pair` — `closest_pair_distance(points)` by a sweep line;
  fewer than two points give infinity.

### Graphs

- `algokit.twosat` — `TwoSat(n)`: literal `2*i` means variable `i` is true and
  `2*i + 1` that it is false. Add clauses with `add_implication`, `add_or`,
  `add_xor`, `force_true`; `solve()` returns a list of booleans or `None`.
- `algokit.connectivity` — `articulation_points(n, edges)`, `bridges(n, edges)`
  and `bridge_tree(n, edges)` for vertices `1..n`, edges numbered by position.
- `algokit.trees` — `tree_diameter(n, adj)` returns `(length, a, b)`;
  `LCA(n, adj).lca(u, v)` by binary lifting with the tree rooted at 1.
- `algokit.flow` — `Dinic(n)` with `add_edge(s, t, capacity, directed)`,
  `max_flow`, `min_cut`, `directed_flow`, `undirected_flow`; and
  `push_relabel_max_flow(capacity, s, t)` on a capacity matrix.
- `algokit.dsu` — `BipartiteDSU(n)` with `root(x)` returning `(root, parity)`
  and `merge(a, b)`; the `bipartite` and `components` attributes track the graph.
- `algokit.euler` — `euler_path(n, edges, src)` returns edge numbers of an Euler
  path or cycle from `src`, raising `ValueError` if there is none;
  `path_vertices(edges, ending, edge_path)` turns it into vertices.
- `algokit.toposort` — `topological_sort(n, adj)` lists vertices so that each
  comes after the vertices it points to (reverse it for the usual order);
  a cycle raises `ValueError`.
- `algokit.search` — `ternary_max`, `integer_peak` and `integer_ternary` find
  the maximum of unimodal functions; `ternary_search(values, x)` finds an index
  in a sorted sequence or returns -1.

### Strings

- `algokit.strings` — `prefix_function(s)` (KMP borders) and `manachers(s)`,
  which returns odd and even palindrome radii.
- `algokit.suffix_array` — `SuffixArray(text, need_rmq=True, alphabet=256)`
  over a string or integer sequence, with `order`, `rank`, `lcp_array`,
  `lcp(a, b)` and `compare(a, b, length)`; `SparseTable(values, maximum=False)`
  answers range minimum or maximum queries.

### Optimisation

- `algokit.annealing` — `solve_grid(grid, timeout=1.8, seed=None)` anneals for
  `timeout` seconds of CPU time over a square 0/1 grid (side at least 10) and
  returns disjoint `Rect` regions, each scoring the difference between the ones
  and zeros it covers.

## Examples

```python
from algokit.strings import prefix_function
from algokit.walsh import xor_multiply
from algokit.flow import Dinic

prefix_function("abab")          # [0, 0, 1, 2]
xor_multiply([1, 2], [3, 4])     # XOR convolution of two length-2 sequences

net = Dinic(4)
net.add_edge(0, 1, 3, True)
net.add_edge(1, 3, 2, True)
net.add_edge(0, 2, 2, True)
net.add_edge(2, 3, 3, True)
net.max_flow(0, 3)               # 4
```

## Command-line tools

Two commands are installed with the package.

```
algokit-closest-pair [FILE]
```

reads a count `n` followed by `n` pairs of coordinates from `FILE`, or from
standard input when no file is given, and prints the smallest distance between
any two of the points.

```
algokit-anneal [FILE] [--timeout SECONDS] [--seed N]
```

reads a size `n` followed by an `n × n` grid of 0s and 1s from `FILE` or
standard input, searches for `--timeout` CPU seconds (default 1.8), and prints
the number of chosen rectangles followed by one line `i1 j1 i2 j2` per
rectangle. `--seed` makes a run repeatable.

## What is not included

There is no heavy-light decomposition and no segment tree; path queries on
trees beyond lowest common ancestors are left to the caller.