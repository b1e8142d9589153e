"""Bridges of an undirected graph (edges whose removal disconnects it)."""

from __future__ import annotations

from collections.abc import Sequence


class BridgeFinder:
    """Finds bridges in an undirected multigraph on nodes ``0..n-1``."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"node count must be non-negative, got {n}")
        self.n = n
        self.adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        self.edge_list: list[tuple[int, int]] = []
        self.is_bridge: list[bool] = []

    @property
    def edges(self) -> int:
        return len(self.edge_list)

    def _check_node(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"node {v} out of range for {self.n} nodes")

    def add_edge(self, a: int, b: int) -> None:
        """Add an undirected edge; parallel edges are allowed."""
        self._check_node(a)
        self._check_node(b)
        index = len(self.edge_list)
        self.adj[a].append((b, index))
        self.adj[b].append((a, index))
        self.edge_list.append((a, b))

    def solve(self) -> list[bool]:
        """Compute and return ``is_bridge``, one flag per edge in insertion order."""
        n = self.n
        adj = self.adj
        tour_start = [-1] * n
        low_link = [0] * n
        is_bridge = [False] * len(self.edge_list)
        tour = 0

        for root in range(n):
            if tour_start[root] >= 0:
                continue
            tour_start[root] = low_link[root] = tour
            tour += 1
            frames = [(root, -1, iter(adj[root]))]

            while frames:
                node, parent_edge, neighbours = frames[-1]
                descended = False
                for neigh, index in neighbours:
                    # Skip only the edge we arrived by, so parallel edges still count.
                    if index == parent_edge:
                        continue
                    if tour_start[neigh] >= 0:
                        low_link[node] = min(low_link[node], tour_start[neigh])
                    else:
                        tour_start[neigh] = low_link[neigh] = tour
                        tour += 1
                        frames.append((neigh, index, iter(adj[neigh])))
                        descended = True
                        break
                if descended:
                    continue

                frames.pop()
                if frames:
                    parent = frames[-1][0]
                    is_bridge[parent_edge] = low_link[node] > tour_start[parent]
                    low_link[parent] = min(low_link[parent], low_link[node])

        self.is_bridge = is_bridge
        return is_bridge


def critical_connections(n: int, connections: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the bridge edges of the graph, in the order they were given."""
    finder = BridgeFinder(n)
    for a, b in connections:
        finder.add_edge(a, b)
    flags = finder.solve()
    return [list(edge) for edge, bridge in zip(connections, flags) if bridge]