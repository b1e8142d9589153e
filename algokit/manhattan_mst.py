"""Minimum spanning tree of points under the Manhattan metric in O(n log n)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_Pt = tuple[int, int, int]  # (x, y, original index)


@dataclass(frozen=True)
class Edge:
    """An edge between the points with the given input indices."""

    index1: int
    index2: int
    dist: int


class _UnionFind:
    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.size = [1] * n

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def unite(self, a: int, b: int) -> bool:
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self.size[a] < self.size[b]:
            a, b = b, a
        self.parent[b] = a
        self.size[a] += self.size[b]
        return True


def _has_better_sum(a: _Pt | None, b: _Pt | None) -> bool:
    if a is None:
        return False
    if b is None:
        return True
    return a[0] + a[1] < b[0] + b[1]


def _solve(points: list[_Pt], closest: list[_Pt | None], start: int, end: int) -> None:
    if end - start <= 1:
        return

    mid = (start + end) // 2
    _solve(points, closest, start, mid)
    _solve(points, closest, mid, end)
    right = mid
    merged: list[_Pt] = []
    merged_closest: list[_Pt | None] = []
    min_sum: _Pt | None = None

    # Merge by y - x while tracking the right-half point with the smallest x + y.
    for i in range(start, mid):
        left = points[i]
        while right < end and points[right][1] - points[right][0] <= left[1] - left[0]:
            merged.append(points[right])
            merged_closest.append(closest[right])
            if _has_better_sum(points[right], min_sum):
                min_sum = points[right]
            right += 1

        if _has_better_sum(min_sum, closest[i]):
            closest[i] = min_sum

        merged.append(left)
        merged_closest.append(closest[i])

    points[start : start + len(merged)] = merged
    closest[start : start + len(merged_closest)] = merged_closest


def manhattan_mst(points: Iterable[Iterable[int]]) -> list[Edge]:
    """Return the MST edges, in increasing distance, for points given as ``(x, y)``."""
    pts: list[_Pt] = []
    for index, point in enumerate(points):
        x, y = point
        pts.append((x, y, index))
    n = len(pts)
    edges: list[Edge] = []

    # One candidate edge per point in each of the four octants to its right.
    for rep in range(4):
        pts.sort(key=lambda p: (p[1], p[0]))
        closest: list[_Pt | None] = [None] * n
        _solve(pts, closest, 0, n)

        for p, c in zip(pts, closest):
            if c is not None:
                edges.append(Edge(p[2], c[2], abs(p[0] - c[0]) + abs(p[1] - c[1])))

        if rep % 2 == 0:
            pts = [(y, x, i) for x, y, i in pts]
        else:
            pts = [(-y, x, i) for x, y, i in pts]

    edges.sort(key=lambda e: e.dist)
    uf = _UnionFind(n)
    return [e for e in edges if uf.unite(e.index1, e.index2)]