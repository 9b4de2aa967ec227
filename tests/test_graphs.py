import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from classicalgo.graphs import (
    DisjointSet,
    bellman_ford,
    dijkstra,
    greedy_vertex_cover,
    kruskal,
    max_flow_bfs,
    max_flow_dfs,
    prim,
)

MST_EDGES = [(0, 1, 10), (1, 3, 15), (2, 3, 4), (2, 0, 6), (0, 3, 5)]

FLOW_NETWORK = [
    [0, 16, 13, 0, 0, 0],
    [0, 0, 10, 12, 0, 0],
    [0, 4, 0, 0, 14, 0],
    [0, 0, 9, 0, 0, 20],
    [0, 0, 0, 7, 0, 4],
    [0, 0, 0, 0, 0, 0],
]

PATH_EDGES = [(1, 3, 2), (4, 3, -1), (2, 4, 1), (1, 2, 1), (0, 1, 5)]


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(min_value=1, max_value=8))
    edges = []
    for v in range(1, n):
        u = draw(st.integers(min_value=0, max_value=v - 1))
        edges.append((u, v, draw(st.integers(min_value=0, max_value=50))))
    extra = draw(
        st.lists(
            st.tuples(
                st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 50)
            ),
            max_size=12,
        )
    )
    return n, edges + extra


def _spans(n, tree):
    sets = DisjointSet(n)
    for u, v, _ in tree:
        sets.union(u, v)
    return len({sets.find(x) for x in range(n)}) == 1


def test_disjoint_set_union_and_find():
    sets = DisjointSet(5)
    assert sets.union(0, 1) is True
    assert sets.union(3, 4) is True
    assert sets.find(0) == sets.find(1)
    assert sets.find(1) != sets.find(3)
    assert sets.union(1, 0) is False
    sets.union(1, 4)
    assert sets.find(0) == sets.find(3)
    assert sets.find(2) == 2


def test_kruskal_on_example():
    tree = kruskal(4, MST_EDGES)
    assert len(tree) == 3
    assert sum(w for _, _, w in tree) == 19
    assert _spans(4, tree)


def test_prim_matches_kruskal_on_example():
    tree = prim(4, MST_EDGES, 0)
    assert len(tree) == 3
    assert tree[0][0] == 0
    assert sum(w for _, _, w in tree) == sum(w for _, _, w in kruskal(4, MST_EDGES))


def test_prim_skips_unreachable_vertices():
    tree = prim(4, [(0, 1, 3)], 0)
    assert tree == [(0, 1, 3)]


@settings(max_examples=60)
@given(connected_graphs())
def test_spanning_trees_agree(graph):
    n, edges = graph
    by_kruskal = kruskal(n, edges)
    by_prim = prim(n, edges, 0)
    assert len(by_kruskal) == len(by_prim) == n - 1
    assert sum(w for *_, w in by_kruskal) == sum(w for *_, w in by_prim)
    assert _spans(n, by_kruskal)
    assert _spans(n, by_prim)


def test_max_flow_on_example():
    assert max_flow_dfs(FLOW_NETWORK, 0, 5) == 23
    assert max_flow_bfs(FLOW_NETWORK, 0, 5) == max_flow_dfs(FLOW_NETWORK, 0, 5)


def test_max_flow_does_not_modify_input():
    original = [row[:] for row in FLOW_NETWORK]
    max_flow_bfs(FLOW_NETWORK, 0, 5)
    max_flow_dfs(FLOW_NETWORK, 0, 5)
    assert FLOW_NETWORK == original


@settings(max_examples=60)
@given(
    st.integers(min_value=2, max_value=6).flatmap(
        lambda n: st.lists(
            st.lists(st.integers(0, 20), min_size=n, max_size=n),
            min_size=n,
            max_size=n,
        )
    )
)
def test_max_flow_variants_agree(capacity):
    sink = len(capacity) - 1
    by_dfs = max_flow_dfs(capacity, 0, sink)
    assert by_dfs == max_flow_bfs(capacity, 0, sink)
    assert 0 <= by_dfs <= sum(capacity[0][1:])


def test_max_flow_rejects_same_source_and_sink():
    with pytest.raises(ValueError):
        max_flow_bfs(FLOW_NETWORK, 2, 2)
    with pytest.raises(ValueError):
        max_flow_dfs(FLOW_NETWORK, 2, 2)


def test_max_flow_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        max_flow_bfs([[0, 1], [0]], 0, 1)


def test_vertex_cover_covers_every_edge():
    edges = [(0, 1), (0, 2), (1, 3), (3, 4), (4, 5), (5, 6)]
    cover = greedy_vertex_cover(7, edges)
    chosen = set(cover)
    assert all(u in chosen or v in chosen for u, v in edges)
    assert cover == sorted(cover)
    assert len(cover) % 2 == 0


def test_vertex_cover_without_edges_is_empty():
    assert greedy_vertex_cover(4, []) == []


def test_bellman_ford_satisfies_edge_constraints():
    dist = bellman_ford(5, PATH_EDGES, 0)
    assert dist[0] == 0
    assert all(dist[v] <= dist[u] + w for u, v, w in PATH_EDGES)
    assert all(math.isfinite(d) for d in dist)


def test_bellman_ford_marks_unreachable():
    dist = bellman_ford(5, PATH_EDGES, 1)
    assert dist[0] == math.inf
    assert dist[1] == 0


def test_dijkstra_rejects_negative_weights():
    with pytest.raises(ValueError):
        dijkstra(5, PATH_EDGES, 0)


@settings(max_examples=60)
@given(connected_graphs())
def test_dijkstra_matches_bellman_ford(graph):
    n, edges = graph
    both_ways = edges + [(v, u, w) for u, v, w in edges]
    assert dijkstra(n, edges, 0) == bellman_ford(n, both_ways, 0)