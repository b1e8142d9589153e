"""Lowest common ancestors and path queries on a forest."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby

from algokit.sparse_table import SparseTableRMQ


class LCA:
    """Rooted-forest queries built from an Euler tour and heavy-light ordering.

    Construct with a node count and call ``add_edge``, or pass an adjacency
    list. Call ``build`` before querying. Unconnected nodes have LCA -1.
    """

    def __init__(self, n: int | Sequence[Iterable] = 0) -> None:
        if isinstance(n, int):
            self._reset(n)
        else:
            adj = [list(neighbours) for neighbours in n]
            self._reset(len(adj))
            self.adj = adj

    def _reset(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"node count must be non-negative, got {n}")
        self.n = n
        self.adj: list[list] = [[] for _ in range(n)]
        self.parent = [-1] * n
        self.depth = [0] * n
        self.subtree_size = [0] * n
        self.euler: list[int] = []
        self.first_occurrence = [0] * n
        self.tour_start = [0] * n
        self.tour_end = [0] * n
        self.postorder = [0] * n
        self.tour_list = [0] * n
        self.rev_tour_list: list[int] = []
        self.heavy_root = [0] * n
        self.rmq: SparseTableRMQ | None = None
        self.built = False

    def _check_node(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"node {v} out of range for {self.n} nodes")

    def add_edge(self, a: int, b: int) -> None:
        """Add an undirected tree edge."""
        self._check_node(a)
        self._check_node(b)
        self.adj[a].append(b)
        self.adj[b].append(a)

    def degree(self, v: int) -> int:
        """Number of edges at ``v``, counting the edge to its parent after building."""
        return len(self.adj[v]) + (1 if self.built and self.parent[v] >= 0 else 0)

    def _child_nodes(self, node: int) -> list[int]:
        return self.adj[node]

    def _root_dfs(self, root: int, visited: list[bool]) -> None:
        """Orient the tree containing ``root``: parents, depths, sizes, heavy-first children."""
        adj, parent, depth, size = self.adj, self.parent, self.depth, self.subtree_size
        visited[root] = True
        depth[root] = 0
        order = [root]
        for node in order:
            children = [c for c in adj[node] if c != parent[node]]
            for child in children:
                if visited[child]:
                    raise ValueError("graph is not a forest")
                visited[child] = True
                parent[child] = node
                depth[child] = depth[node] + 1
                order.append(child)
            adj[node] = children

        for node in reversed(order):
            size[node] = 1 + sum(size[c] for c in adj[node])
            adj[node].sort(key=size.__getitem__, reverse=True)

    def build(self, root: int = -1, build_rmq: bool = True) -> None:
        """Root every tree (at ``root`` when valid, else at its smallest node) and index it."""
        n = self.n
        self.parent = [-1] * n
        visited = [False] * n
        starts = ([root] if 0 <= root < n else []) + [i for i in range(n) if i != root]
        for start in starts:
            if not visited[start]:
                self._root_dfs(start, visited)

        parent = self.parent
        euler: list[int] = []
        tour = 0
        post_tour = 0

        def enter(node: int, heavy: bool) -> None:
            nonlocal tour
            self.heavy_root[node] = self.heavy_root[parent[node]] if heavy else node
            self.first_occurrence[node] = len(euler)
            euler.append(node)
            self.tour_list[tour] = node
            self.tour_start[node] = tour
            tour += 1

        for tree_root in range(n):
            if parent[tree_root] >= 0:
                continue
            enter(tree_root, False)
            frames = [(tree_root, iter(enumerate(self._child_nodes(tree_root))))]
            while frames:
                node, children = frames[-1]
                step = next(children, None)
                if step is not None:
                    position, child = step
                    enter(child, position == 0)
                    frames.append((child, iter(enumerate(self._child_nodes(child)))))
                    continue
                frames.pop()
                self.tour_end[node] = tour
                self.postorder[node] = post_tour
                post_tour += 1
                if frames:
                    euler.append(frames[-1][0])
            # A -1 between trees lets queries detect unconnected nodes.
            euler.append(-1)

        self.euler = euler
        self.rev_tour_list = self.tour_list[::-1]
        euler_depths = [node if node < 0 else self.depth[node] for node in euler]
        self.rmq = SparseTableRMQ(euler_depths) if build_rmq else None
        self.built = True

    def _require_rmq(self) -> SparseTableRMQ:
        if self.rmq is None:
            raise RuntimeError("call build() with build_rmq=True first")
        return self.rmq

    def _diameter(self, depths: Sequence) -> tuple:
        if not self.built:
            raise RuntimeError("call build() first")
        # Maximise depths[u] - 2 * depths[x] + depths[v] for u, x, v in Euler order.
        u_max = (-1, -1)
        ux_max = (-1, -1)
        uxv_max = (-1, (-1, -1))
        for node in self.euler:
            if node < 0:
                break
            u_max = max(u_max, (depths[node], node))
            ux_max = max(ux_max, (u_max[0] - 2 * depths[node], u_max[1]))
            uxv_max = max(uxv_max, (ux_max[0] + depths[node], (ux_max[1], node)))
        return uxv_max

    def get_diameter(self) -> tuple[int, tuple[int, int]]:
        """``(length, (a, b))`` for a longest path in the tree containing node 0."""
        return self._diameter(self.depth)

    def get_center(self) -> tuple[int, int]:
        """The midpoint node(s) of the diameter."""
        length, (a, b) = self.get_diameter()
        return (
            self.get_kth_node_on_path(a, b, length // 2),
            self.get_kth_node_on_path(a, b, (length + 1) // 2),
        )

    def get_lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``, or -1 if unconnected."""
        rmq = self._require_rmq()
        a = self.first_occurrence[a]
        b = self.first_occurrence[b]
        if a > b:
            a, b = b, a
        return self.euler[rmq.query_index(a, b + 1)]

    def is_ancestor(self, a: int, b: int) -> bool:
        """Whether ``a`` is ``b`` or an ancestor of ``b``."""
        return self.tour_start[a] <= self.tour_start[b] < self.tour_end[a]

    def on_path(self, x: int, a: int, b: int) -> bool:
        """Whether ``x`` lies on the path between ``a`` and ``b``."""
        return (self.is_ancestor(x, a) or self.is_ancestor(x, b)) and self.is_ancestor(
            self.get_lca(a, b), x
        )

    def get_dist(self, a: int, b: int) -> int:
        """Number of edges between ``a`` and ``b``."""
        return self.depth[a] + self.depth[b] - 2 * self.depth[self.get_lca(a, b)]

    def child_ancestor(self, a: int, b: int) -> int:
        """The child of ``a`` that is an ancestor of ``b``; ``a`` must be a strict ancestor."""
        if a == b or not self.is_ancestor(a, b):
            raise ValueError(f"{a} is not a strict ancestor of {b}")
        rmq = self._require_rmq()
        # Relies on the RMQ choosing the latest index on ties.
        index = rmq.query_index(self.first_occurrence[a], self.first_occurrence[b] + 1)
        return self.euler[index + 1]

    def get_kth_ancestor(self, a: int, k: int) -> int:
        """The ancestor ``k`` levels above ``a``, or -1 if there is none."""
        while a >= 0:
            root = self.heavy_root[a]
            if self.depth[root] <= self.depth[a] - k:
                return self.tour_list[self.tour_start[a] - k]
            k -= self.depth[a] - self.depth[root] + 1
            a = self.parent[root]
        return a

    def get_kth_node_on_path(self, a: int, b: int, k: int) -> int:
        """The node ``k`` steps from ``a`` along the path to ``b``."""
        anc = self.get_lca(a, b)
        first_half = self.depth[a] - self.depth[anc]
        second_half = self.depth[b] - self.depth[anc]
        if not 0 <= k <= first_half + second_half:
            raise ValueError(f"k={k} is outside the path of length {first_half + second_half}")
        if k < first_half:
            return self.get_kth_ancestor(a, k)
        return self.get_kth_ancestor(b, first_half + second_half - k)

    def get_common_node(self, a: int, b: int, c: int) -> int:
        """The node minimising the total distance to ``a``, ``b`` and ``c``."""
        # The deepest of the three pairwise LCAs; the other two coincide.
        return self.get_lca(a, b) ^ self.get_lca(b, c) ^ self.get_lca(c, a)

    def compress_tree(self, nodes: Iterable[int]) -> list[tuple[int, int]]:
        """Minimal subtree spanning ``nodes`` as ``(node, parent)`` pairs; the first parent is -1."""
        order = self.tour_start.__getitem__
        nodes = sorted(nodes, key=order)
        if not nodes:
            return []
        lcas = [self.get_lca(a, b) for a, b in zip(nodes, nodes[1:])]
        unique = [node for node, _ in groupby(sorted(nodes + lcas, key=order))]
        result = [(unique[0], -1)]
        result.extend((cur, self.get_lca(cur, prev)) for prev, cur in zip(unique, unique[1:]))
        return result