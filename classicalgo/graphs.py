"""Graph algorithms: spanning trees, maximum flow, vertex cover and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int, int]


class DisjointSet:
    """Union-find over the integers ``0 .. size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [1] * size

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one set."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        elif self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True


def _adjacency(vertex_count: int, edges: Iterable[Edge]) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))
    return adjacency


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, in the order they were chosen."""
    forest = DisjointSet(vertex_count)
    chosen: list[Edge] = []
    if vertex_count <= 1:
        return chosen
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        if forest.union(u, v):
            chosen.append((u, v, w))
            if len(chosen) == vertex_count - 1:
                break
    return chosen


def prim(vertex_count: int, edges: Iterable[Edge], source: int) -> list[Edge]:
    """Return the tree edges ``(parent, vertex, weight)`` reached from ``source``, in order added."""
    adjacency = _adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    heap: list[tuple[int, int, int]] = [(0, source, -1)]
    chosen: list[Edge] = []
    while heap:
        weight, u, parent = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        if parent != -1:
            chosen.append((parent, u, weight))
        for v, w in adjacency[u]:
            if not visited[v]:
                heapq.heappush(heap, (w, v, u))
    return chosen


def _check_network(capacity: Sequence[Sequence[int]], source: int, sink: int) -> list[list[int]]:
    size = len(capacity)
    if any(len(row) != size for row in capacity):
        raise ValueError("capacity matrix must be square")
    if not (0 <= source < size and 0 <= sink < size):
        raise IndexError("source or sink outside the network")
    if source == sink:
        raise ValueError("source and sink must differ")
    return [list(row) for row in capacity]


def _augment(residual: list[list[int]], parent: list[int], source: int, sink: int) -> int:
    path: list[tuple[int, int]] = []
    v = sink
    while v != source:
        path.append((parent[v], v))
        v = parent[v]
    bottleneck = min(residual[u][v] for u, v in path)
    for u, v in path:
        residual[u][v] -= bottleneck
        residual[v][u] += bottleneck
    return bottleneck


def _dfs_path(residual: list[list[int]], source: int, sink: int) -> list[int] | None:
    size = len(residual)
    visited = [False] * size
    parent = [-1] * size
    visited[source] = True
    stack = [iter(enumerate(residual[source]))]
    owners = [source]
    while stack:
        u = owners[-1]
        for v, cap in stack[-1]:
            if not visited[v] and cap > 0:
                visited[v] = True
                parent[v] = u
                if v == sink:
                    return parent
                stack.append(iter(enumerate(residual[v])))
                owners.append(v)
                break
        else:
            stack.pop()
            owners.pop()
    return None


def _bfs_path(residual: list[list[int]], source: int, sink: int) -> list[int] | None:
    size = len(residual)
    visited = [False] * size
    parent = [-1] * size
    visited[source] = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, cap in enumerate(residual[u]):
            if not visited[v] and cap > 0:
                visited[v] = True
                parent[v] = u
                if v == sink:
                    return parent
                queue.append(v)
    return None


def max_flow_dfs(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Maximum flow by Ford-Fulkerson with depth-first augmenting paths."""
    residual = _check_network(capacity, source, sink)
    total = 0
    while (parent := _dfs_path(residual, source, sink)) is not None:
        total += _augment(residual, parent, source, sink)
    return total


def max_flow_bfs(capacity: Sequence[Sequence[int]], source: int, sink: int) -> int:
    """Maximum flow by Edmonds-Karp (breadth-first augmenting paths)."""
    residual = _check_network(capacity, source, sink)
    total = 0
    while (parent := _bfs_path(residual, source, sink)) is not None:
        total += _augment(residual, parent, source, sink)
    return total


def greedy_vertex_cover(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Approximate vertex cover: take both ends of each still-uncovered edge, in vertex order."""
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    covered = [False] * vertex_count
    for u, neighbours in enumerate(adjacency):
        if covered[u]:
            continue
        for v in neighbours:
            if not covered[v]:
                covered[u] = covered[v] = True
                break
    return [vertex for vertex, taken in enumerate(covered) if taken]


def dijkstra(vertex_count: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Shortest distances from ``source`` over undirected, non-negative edges; ``inf`` if unreachable."""
    edges = list(edges)
    if any(w < 0 for _, _, w in edges):
        raise ValueError("Dijkstra's algorithm needs non-negative weights")
    adjacency = _adjacency(vertex_count, edges)
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adjacency[u]:
            if dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                heapq.heappush(heap, (dist[v], v))
    return dist


def bellman_ford(vertex_count: int, edges: Iterable[Edge], source: int) -> list[float]:
    """Shortest distances from ``source`` over directed edges; ``inf`` if unreachable."""
    edges = list(edges)
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for u, v, w in edges:
            if dist[u] != math.inf and dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
    return dist