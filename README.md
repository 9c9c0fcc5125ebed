# contestlib

Pure-Python data structures and 2-D geometry routines for algorithmic work.
It has no runtime dependencies and needs Python 3.10 or later.

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

All indices count from 0 and all ranges are inclusive at both ends unless
stated otherwise. Out-of-range indices raise `IndexError`; invalid arguments
such as an empty input array raise `ValueError`.

### Range queries

- `contestlib.segment_tree`
  - `SegmentTree(values)`: `update(idx, value)` sets an element, `query(left, right)` returns a sum.
  - `LazySegmentTree(values)`: `update_range(left, right, value)` adds to a range, `query_range(left, right)` returns a sum.
- `contestlib.advanced_segment_trees`
  - `MaxSegmentTree` and `GCDSegmentTree`: point assignment with `update`, range maximum or gcd with `query`.
  - `SegmentTree2D(matrix)`: `update(x, y, value)` and rectangle sums with `query(x1, y1, x2, y2)`.
  - `RangeAssignmentTree`: `update_range` sets every element of a range to one value; `query_range` returns a sum.
  - `XORSegmentTree`: `update_range` xors a value into a range; `query_range` returns the xor of a range.
- `contestlib.sparse_segment_tree`
  - `LazySparseSegmentTree(n)`: indices `0 .. n-1`, all starting at zero. `range_add(left, right, value)` and `query(left, right)`, which returns `(minimum, maximum)`. Nodes are created only where needed, so `n` may be as large as `10**18`.
- `contestlib.persistent_segment_tree`
  - `PersistentSegmentTree(values)`: `update(version, idx, value)` derives a new version and returns its number; `query(version, left, right)` sums a range of any version; `version_count()`; `kth_smallest(version1, version2, left, right, k)` treats elements as counts per position and returns the position holding the k-th unit of the difference between two versions.
- `contestlib.fenwick`
  - `FenwickTree(size)` or `FenwickTree.from_values(values)`: `update(idx, delta)`, `prefix_sum(idx)`, `range_sum(left, right)`, `lower_bound(k)`.
  - `FenwickTree2D(rows, cols)`: `update(x, y, delta)`, `prefix_sum(x, y)`, `range_sum(x1, y1, x2, y2)`.
- `contestlib.sparse_table`
  - `SparseTable(values, merge)`: constant-time `query(left, right)` for an idempotent merge such as `min`, `max` or `math.gcd`.
- `contestlib.merge_sort_tree`
  - `MergeSortTree(values)`: `count_less_equal`, `count_less`, `count_greater`, `count_in_range(left, right, low, high)` and `kth_smallest(left, right, k)` (1-based `k`).
  - `PersistentMergeSortTree(values)`: `count_less_equal`.
  - `WaveletTree(values)`: `kth_smallest(left, right, k)`.

### Trees, sets and graphs

- `contestlib.balanced_trees`
  - `Treap(seed=None)`: `insert`, `remove`, `find`, `len()`, `kth_element(k)` (1-based), `inorder()`.
  - `SplayTree()`: `insert`, `find` (splays a found key to the root), `inorder()`.
  - `AVLTree()`: `insert`, `remove`, `find`, `inorder()`.
  - All three hold distinct keys; inserting an existing key does nothing.
- `contestlib.skip_list`
  - `SkipList(seed=None)`: `insert`, `search` (also `in`), `remove`, `levels()` returning the values on each level from the top down, and `display()` which prints them.
- `contestlib.btree`
  - `BTree(t=3)`: a B-tree of minimum degree `t` with `insert`, `search` and `inorder()`. Duplicate keys are kept.
- `contestlib.cartesian_tree`
  - `CartesianTree(values)`: a min-heap by value, ordered by position; `inorder()` and `preorder()` return `(value, index)` pairs.
- `contestlib.dsu`
  - `DisjointSet(n)`: `find`, `unite` (returns `False` if already joined), `connected`, `size_of`, `components()`.
- `contestlib.heavy_light`
  - `HeavyLightDecomposition(n)`: `add_edge(u, v)`, then `build()` to root the tree at vertex 0; afterwards `update(v, value)` sets a vertex value and `query(u, v)` sums the path. `build()` raises `ValueError` if the edges do not form a tree, and updating or querying before `build()` raises `RuntimeError`.
- `contestlib.link_cut_tree`
  - `LinkCutTree(n, values=None)`: `link(u, v)` (raises `ValueError` if already connected), `cut(u, v)` (returns whether an edge was removed), `connected(u, v)` and `path_sum(u, v)`.
- `contestlib.centroid`
  - `CentroidDecomposition(n)`: `add_edge(u, v)`, `compute_subtree_sizes`, `find_centroid`, and `decompose(v=0)`, which returns the centroids in the order they are removed.

### Strings

- `contestlib.trie`: `Trie` of lowercase words with `insert(word)` and `count(word)`; other characters raise `ValueError`.
- `contestlib.suffix_trie`: `SuffixTrie(text)` with `contains(pattern)` (also `in`) for substring tests. Its size is quadratic in the text.
- `contestlib.rope`: `Rope(text="")` with `char_at`, `insert(index, text)`, `remove(start, length)`, `substring(start, length)`, `len()` and `str()`.

### Geometry

- `contestlib.geometry`: `Point` (vector arithmetic, `dot`, `cross`, `norm`, `normalize`, `rotate`, `perpendicular`, `angle`, `Point.polar`, `distance_to`), `Line`, `Circle`, `Rectangle`, `Triangle`, the `Orientation` enum, and the functions `distance`, `distance_squared`, `cross`, `dot`, `collinear`, `orientation`, `on_segment`, `angle` and `signed_angle`.
- `contestlib.circles`: `tangent_points`, `tangent_lines`, `circumcircle`, `circle_circle_intersection`, `line_circle_intersection`, `circles_intersect`, `circle_line_intersect`, `circle_distance`, `circle_inside_circle`, `circle_intersection_area`, `common_tangents`, `smallest_enclosing_circle(points, rng=None)`, `circles_through_two_points`, `invert_point`, `power_of_point`, `radical_axis`, `are_concyclic` and `apollonius_circle`. Cases with no answer, such as the circumcircle of collinear points or the radical axis of concentric circles, raise `ValueError`.
- `contestlib.polygons`: `polygon_area` (signed), `polygon_area_abs`, `polygon_perimeter`, `is_convex`, `point_in_polygon`, `point_in_convex_polygon`, `point_on_polygon_boundary`, `convex_hull` (Graham scan), `convex_hull_andrew`, `polygon_centroid`, `polygons_intersect`, `minkowski_sum`, `rotate_polygon`, `translate_polygon`, `scale_polygon`, `BoundingBox` and `bounding_box`, `is_simple_polygon`, `polygon_orientation`, `reverse_polygon`, `ensure_counter_clockwise`, `ensure_clockwise` and `convex_polygon_diameter`.

Floating-point comparisons in the geometry modules use a tolerance of `1e-9`, and `Point` equality is tolerant in the same way.

## Examples

```python
from contestlib.segment_tree import SegmentTree
from contestlib.fenwick import FenwickTree
from contestlib.dsu import DisjointSet

st = SegmentTree([1, 3, 5, 7, 9, 11])
st.query(1, 3)        # 15
st.update(1, 10)
st.query(1, 3)        # 22

ft = FenwickTree.from_values([1, 3, 5, 7, 9, 11])
ft.prefix_sum(2)      # 9
ft.range_sum(1, 3)    # 15

ds = DisjointSet(5)
ds.unite(0, 1)
ds.unite(2, 3)
ds.connected(0, 1)    # True
ds.size_of(0)         # 2
ds.components()       # 3
```

```python
from contestlib.geometry import Point, Triangle
from contestlib.polygons import convex_hull, polygon_area_abs

tri = Triangle(Point(0, 0), Point(4, 0), Point(2, 3))
tri.area()            # 6.0

hull = convex_hull([Point(0, 0), Point(1, 1), Point(2, 0), Point(1, 2), Point(0, 2)])
polygon_area_abs(hull)
```

```python
from contestlib.rope import Rope

rope = Rope("Hello World")
rope.insert(5, ", Beautiful")
str(rope)             # "Hello, Beautiful World"
```

## What is not included

- There are no dedicated line and segment routines beyond those on `Line` and in `contestlib.geometry`: no segment-segment intersection, point-to-segment distance, projection or reflection.
- There is no closest-pair search, rectangle-union area, half-plane intersection, Voronoi diagram or Delaunay triangulation.
- The package is a library only; it installs no command-line tool.