# classicalgo

A small library of classic algorithms in plain Python, using nothing outside
the standard library. Every function takes plain Python values (lists, tuples,
strings, integers) and returns new values; the inputs are never changed.

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

### `classicalgo.graphs`

Vertices are the integers `0 .. vertex_count - 1`. Weighted edges are
`(u, v, weight)` tuples.

- `DisjointSet(size)`: union-find with path compression and union by rank.
  `find(x)` returns the representative of `x`'s set. `union(x, y)` merges two
  sets and returns `False` if they were already one set. A negative size
  raises `ValueError`.
- `kruskal(vertex_count, edges)`: the edges of a minimum spanning forest, in
  the order they were chosen.
- `prim(vertex_count, edges, source)`: the tree edges
  `(parent, vertex, weight)` reached from `source`, in the order they were
  added.
- `max_flow_dfs(capacity, source, sink)`: maximum flow by Ford-Fulkerson with
  depth-first augmenting paths.
- `max_flow_bfs(capacity, source, sink)`: maximum flow by Edmonds-Karp with
  breadth-first augmenting paths.

  Both flow functions take a square capacity matrix. They raise `ValueError`
  if the matrix is not square or if source and sink are the same, and
  `IndexError` if either one is outside the network.
- `greedy_vertex_cover(vertex_count, edges)`: an approximate vertex cover
  over unweighted `(u, v)` edges. For each edge that is still uncovered it
  takes both ends, working in vertex order. The cover is returned as a sorted
  list.
- `dijkstra(vertex_count, edges, source)`: shortest distances over undirected
  edges. A negative weight raises `ValueError`.
- `bellman_ford(vertex_count, edges, source)`: shortest distances over
  directed edges.

  Both shortest-path functions give `math.inf` for unreachable vertices.

### `classicalgo.matrices`

- `matrix_chain_order(dimensions)`: for matrices of size
  `d[i] x d[i+1]`, returns a `ChainOrder` with the minimum number of scalar
  multiplications (`cost`) and the bracketing (`parenthesization`). The
  matrices are named `A`, `B`, `C` and so on, for example `"((A(BC))((DE)F))"`.
  Fewer than two dimensions raises `ValueError`.
- `matrix_add(first, second, sign=1)`: returns `first + sign * second` for two
  matrices of the same shape. Different shapes raise `ValueError`.
- `strassen(first, second)`: Strassen multiplication of two square matrices
  of the same size, where the size is a power of two. Any other input raises
  `ValueError`.

### `classicalgo.hull`

- `Point(x, y)`: a frozen point that orders by `x`, then by `y`. Every
  function that takes points also accepts `(x, y)` tuples.
- `orientation(p, q, r)`: returns `COLLINEAR`, `CLOCKWISE` or
  `COUNTERCLOCKWISE` (the values `0`, `1` and `2`) for the turn `p -> q -> r`.
- `convex_hull_brute_force(points)`: returns every point that ends a hull
  edge, sorted by `x` and then `y`. Points that lie on a hull edge are
  included. Fewer than three points raises `ValueError`.
- `graham_scan(points)`: returns the hull vertices in clockwise order, ending
  with the lowest point (the leftmost one if there is a tie). It raises
  `ValueError` when there are no points or when all the points are collinear.
- `convex_hull_divide_and_conquer(points)`: sorts the points by `x` and builds
  the hull by merging the hulls of the two halves.
- `merge_hulls(left, right)`: joins two hulls along their upper and lower
  tangents. Every point of `left` must lie to the left of `right`.

### `classicalgo.search`

- `solve_puzzle(start, goal=GOAL)`: solves the sliding-tile puzzle by A*
  search, where `0` is the blank. The estimate is the number of moves so far
  plus the number of misplaced tiles. It returns a `PuzzleSolution` with the
  `board` reached and the number of `steps`. Boards of the wrong shape, boards
  whose tiles do not match the goal, and unsolvable positions raise
  `ValueError`. `GOAL` is the solved 4x4 board.
- `misplaced_tiles(board, goal=GOAL)`: the number of non-blank tiles that are
  not in their goal position.
- `rabin_karp(text, pattern, modulus=2**31 - 1)`: every index at which
  `pattern` occurs in `text`, found with a rolling hash. An empty pattern or a
  modulus that is not positive raises `ValueError`.
- `subsets_with_sum(values, target)`: yields each subset of non-negative
  `values` that adds up to `target`. Each subset is a list in ascending order.
  A negative value raises `ValueError`.

### `classicalgo.sorting`

`insertion_sort`, `selection_sort`, `quick_sort` (the last element of each
range is the pivot) and `merge_sort` (top-down). Each one takes any iterable
and returns a new sorted list.

## Example

```python
from classicalgo.graphs import prim, max_flow_bfs
from classicalgo.matrices import matrix_chain_order, strassen
from classicalgo.search import rabin_karp
from classicalgo.sorting import merge_sort

edges = [(0, 1, 10), (1, 3, 15), (2, 3, 4), (2, 0, 6), (0, 3, 5)]
tree = prim(4, edges, 0)          # [(0, 3, 5), (3, 2, 4), (0, 1, 10)]

flow = max_flow_bfs(
    [
        [0, 16, 13, 0, 0, 0],
        [0, 0, 10, 12, 0, 0],
        [0, 4, 0, 0, 14, 0],
        [0, 0, 9, 0, 0, 20],
        [0, 0, 0, 7, 0, 4],
        [0, 0, 0, 0, 0, 0],
    ],
    0,
    5,
)                                 # 23

order = matrix_chain_order([30, 35, 15, 5, 10, 20, 25])
product = strassen([[7, 8], [2, 9]], [[14, 5], [5, 18]])
hits = rabin_karp("1234", "123")  # [0]
ordered = merge_sort([2, 4, 1, 3])  # [1, 2, 3, 4]
```

## What it does not do

This is a library only. It has no command-line program, and it prints
nothing. Every result is returned to the caller.