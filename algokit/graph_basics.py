"""Bipartiteness checking and topological sorting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bipartite_components(
    n: int, edges: Iterable[tuple[int, int]]
) -> list[tuple[list[int], list[int]]] | None:
    """Split each connected component into its two sides.

    Returns one ``(even_side, odd_side)`` pair per component, in order of
    the smallest node, or None if the graph is not bipartite.
    """
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise IndexError(f"edge ({a}, {b}) out of range for {n} nodes")
        adj[a].append(b)
        adj[b].append(a)

    depth = [-1] * n
    components: list[tuple[list[int], list[int]]] = []

    for start in range(n):
        if depth[start] >= 0:
            continue
        sides: tuple[list[int], list[int]] = ([], [])
        components.append(sides)
        depth[start] = 0
        sides[0].append(start)
        frames = [(start, -1, iter(adj[start]))]

        while frames:
            node, parent, neighbours = frames[-1]
            descended = False
            for neigh in neighbours:
                if neigh == parent:
                    continue
                if depth[neigh] < 0:
                    depth[neigh] = depth[node] + 1
                    sides[depth[neigh] % 2].append(neigh)
                    frames.append((neigh, node, iter(adj[neigh])))
                    descended = True
                    break
                if depth[neigh] % 2 == depth[node] % 2:
                    return None
            if not descended:
                frames.pop()

    return components


def topological_sort(adj: Sequence[Iterable[int]]) -> list[int]:
    """Order the nodes of a directed graph so every edge points forward.

    If the graph has a cycle, the result holds fewer than ``len(adj)`` nodes.
    """
    adj = [list(neighbours) for neighbours in adj]
    in_degree = [0] * len(adj)
    for neighbours in adj:
        for v in neighbours:
            in_degree[v] += 1

    order = [v for v, degree in enumerate(in_degree) if degree == 0]
    for node in order:
        for v in adj[node]:
            in_degree[v] -= 1
            if in_degree[v] == 0:
                order.append(v)
    return order