import random

import pytest

from algokit.manhattan_mst import Edge, manhattan_mst
from algokit.point import Point


def _prim_total(points):
    n = len(points)
    if n == 0:
        return 0
    in_tree = [False] * n
    best = [float("inf")] * n
    best[0] = 0
    total = 0
    for _ in range(n):
        u = min((i for i in range(n) if not in_tree[i]), key=lambda i: best[i])
        in_tree[u] = True
        total += best[u]
        for v in range(n):
            if not in_tree[v]:
                d = abs(points[u][0] - points[v][0]) + abs(points[u][1] - points[v][1])
                best[v] = min(best[v], d)
    return total


def _is_spanning_tree(n, edges):
    parent = list(range(n))

    def find(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for e in edges:
        a, b = find(e.index1), find(e.index2)
        if a == b:
            return False
        parent[a] = b
    return len(edges) == max(n - 1, 0)


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_matches_prim(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 60)
    points = [(rng.randint(-40, 40), rng.randint(-40, 40)) for _ in range(n)]
    mst = manhattan_mst(points)
    assert _is_spanning_tree(n, mst)
    assert sum(e.dist for e in mst) == _prim_total(points)


def test_edge_distances_are_manhattan():
    rng = random.Random(11)
    points = [(rng.randint(-100, 100), rng.randint(-100, 100)) for _ in range(40)]
    for e in manhattan_mst(points):
        (x1, y1), (x2, y2) = points[e.index1], points[e.index2]
        assert e.dist == abs(x1 - x2) + abs(y1 - y2)


def test_edges_sorted_by_distance():
    rng = random.Random(21)
    points = [(rng.randint(0, 20), rng.randint(0, 20)) for _ in range(30)]
    dists = [e.dist for e in manhattan_mst(points)]
    assert dists == sorted(dists)


def test_accepts_point_objects_and_duplicates():
    points = [Point(0, 0), Point(0, 0), Point(3, 4)]
    mst = manhattan_mst(points)
    assert _is_spanning_tree(3, mst)
    assert sum(e.dist for e in mst) == _prim_total([tuple(p) for p in points])


def test_trivial_inputs():
    assert manhattan_mst([]) == []
    assert manhattan_mst([(5, 5)]) == []
    assert manhattan_mst([(0, 0), (1, 2)]) in ([Edge(0, 1, 3)], [Edge(1, 0, 3)])