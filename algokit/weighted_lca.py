"""Lowest common ancestors on a forest with weighted edges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class _MinIndexTable:
    """Sparse table returning the index of a range minimum, ties going to the later index."""

    def __init__(self, values: Sequence[int]) -> None:
        self.values = list(values)
        n = len(self.values)
        self.table: list[list[int]] = []
        if n == 0:
            return
        self.table.append(list(range(n)))
        for k in range(1, n.bit_length()):
            prev = self.table[k - 1]
            half = 1 << (k - 1)
            self.table.append(
                [self._better(prev[i], prev[i + half]) for i in range(n - (1 << k) + 1)]
            )

    def _better(self, a: int, b: int) -> int:
        return a if self.values[a] < self.values[b] else b

    def query_index(self, a: int, b: int) -> int:
        if not 0 <= a < b <= len(self.values):
            raise IndexError("invalid range")
        level = (b - a).bit_length() - 1
        row = self.table[level]
        return self._better(row[a], row[b - (1 << level)])


class WeightedLCA:
    """LCA queries plus weighted distances.

    The adjacency list holds ``(node, weight)`` pairs.
    """

    def __init__(self, n: int | Sequence[Iterable[tuple[int, int]]] = 0) -> None:
        if isinstance(n, int):
            self._reset(n)
        else:
            adj = [[(node, weight) for node, weight in edges] for edges in n]
            self._reset(len(adj))
            self.adj = adj

    def _reset(self, n: int) -> None:
        self.n = n
        self.adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        self.parent = [-1] * n
        self.depth = [0] * n
        self.subtree_size = [0] * n
        self.weight_depth = [0] * n
        self.up_weight = [0] * n
        self.euler: list[int] = []
        self.first_occurrence = [0] * n
        self.tour_start = [0] * n
        self.tour_end = [0] * n
        self.postorder = [0] * n
        self.tour_list = [0] * n
        self.rev_tour_list: list[int] = []
        self.heavy_root = [0] * n
        self._rmq: _MinIndexTable | None = None
        self.built = False

    def _check_node(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"node {v} out of range")

    def add_edge(self, a: int, b: int, weight) -> None:
        """Add an undirected tree edge of the given weight."""
        self._check_node(a)
        self._check_node(b)
        self.adj[a].append((b, weight))
        self.adj[b].append((a, weight))

    def degree(self, v: int) -> int:
        """Number of edges touching ``v``."""
        return len(self.adj[v]) + (1 if self.built and self.parent[v] >= 0 else 0)

    def _erase_edge(self, source: int, target: int) -> None:
        edges = self.adj[source]
        for i, (node, _) in enumerate(edges):
            if node == target:
                edges[i] = edges[-1]
                edges.pop()
                return

    def _root_dfs(self, root: int, visited: list[bool]) -> None:
        adj, parent, depth, size = self.adj, self.parent, self.depth, self.subtree_size
        weight_depth = self.weight_depth
        visited[root] = True
        parent[root] = -1
        depth[root] = 0
        weight_depth[root] = 0
        order = [root]
        for node in order:
            self._erase_edge(node, parent[node])
            for child, weight in adj[node]:
                if visited[child]:
                    raise ValueError("graph is not a forest")
                visited[child] = True
                parent[child] = node
                depth[child] = depth[node] + 1
                self.up_weight[child] = weight
                weight_depth[child] = weight_depth[node] + weight
                order.append(child)

        for node in reversed(order):
            size[node] = 1 + sum(size[c] for c, _ in adj[node])
            adj[node].sort(key=lambda edge: size[edge[0]], reverse=True)

    def _tour(self, root: int, counters: list[int]) -> None:
        euler = self.euler

        def enter(node: int) -> None:
            self.first_occurrence[node] = len(euler)
            euler.append(node)
            self.tour_list[counters[0]] = node
            self.tour_start[node] = counters[0]
            counters[0] += 1

        self.heavy_root[root] = root
        enter(root)
        stack = [[root, 0]]
        while stack:
            top = stack[-1]
            node, i = top
            children = self.adj[node]
            if i < len(children):
                top[1] += 1
                child = children[i][0]
                self.heavy_root[child] = self.heavy_root[node] if i == 0 else child
                enter(child)
                stack.append([child, 0])
            else:
                stack.pop()
                self.tour_end[node] = counters[0]
                self.postorder[node] = counters[1]
                counters[1] += 1
                if stack:
                    euler.append(stack[-1][0])

    def build(self, root: int = -1, build_rmq: bool = True) -> None:
        """Root every tree of the forest and prepare for queries."""
        n = self.n
        self.parent = [-1] * n
        visited = [False] * n
        if 0 <= root < n:
            self._root_dfs(root, visited)
        for i in range(n):
            if not visited[i]:
                self._root_dfs(i, visited)

        self.euler = []
        counters = [0, 0]
        for i in range(n):
            if self.parent[i] < 0:
                self._tour(i, counters)
                # Separates trees so that disconnected nodes have LCA -1.
                self.euler.append(-1)

        self.rev_tour_list = self.tour_list[::-1]
        euler_depths = [node if node < 0 else self.depth[node] for node in self.euler]
        self._rmq = _MinIndexTable(euler_depths) if build_rmq else None
        self.built = True

    def _require_rmq(self) -> _MinIndexTable:
        if self._rmq is None:
            raise RuntimeError("build() with build_rmq=True must be called first")
        return self._rmq

    def get_diameter(self) -> tuple:
        """``(weight, (a, b))`` for a heaviest path in the tree containing node 0."""
        if not self.built:
            raise RuntimeError("build() must be called first")
        wd = self.weight_depth
        u_max = (-1, -1)
        ux_max = (-1, -1)
        uxv_max = (-1, (-1, -1))
        for node in self.euler:
            if node < 0:
                break
            u_max = max(u_max, (wd[node], node))
            ux_max = max(ux_max, (u_max[0] - 2 * wd[node], u_max[1]))
            uxv_max = max(uxv_max, (ux_max[0] + wd[node], (ux_max[1], node)))
        return uxv_max

    def get_center(self) -> tuple[int, int]:
        """The node(s) at the middle of the diameter path."""
        length, (a, b) = self.get_diameter()
        length = int(length)
        return (
            self.get_kth_node_on_path(a, b, length // 2),
            self.get_kth_node_on_path(a, b, (length + 1) // 2),
        )

    def get_lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``, or -1 if they are not connected."""
        rmq = self._require_rmq()
        a = self.first_occurrence[a]
        b = self.first_occurrence[b]
        if a > b:
            a, b = b, a
        return self.euler[rmq.query_index(a, b + 1)]

    def is_ancestor(self, a: int, b: int) -> bool:
        """Whether ``a`` is an ancestor of ``b`` (or equal to it)."""
        return self.tour_start[a] <= self.tour_start[b] < self.tour_end[a]

    def on_path(self, x: int, a: int, b: int) -> bool:
        """Whether ``x`` lies on the path between ``a`` and ``b``."""
        return (self.is_ancestor(x, a) or self.is_ancestor(x, b)) and self.is_ancestor(
            self.get_lca(a, b), x
        )

    def get_dist(self, a: int, b: int) -> int:
        """Number of edges on the path between ``a`` and ``b``."""
        return self.depth[a] + self.depth[b] - 2 * self.depth[self.get_lca(a, b)]

    def get_weighted_dist(self, a: int, b: int):
        """Total edge weight on the path between ``a`` and ``b``."""
        wd = self.weight_depth
        return wd[a] + wd[b] - 2 * wd[self.get_lca(a, b)]

    def child_ancestor(self, a: int, b: int) -> int:
        """The child of ``a`` that is an ancestor of ``b``; ``a`` must be a strict ancestor."""
        if a == b or not self.is_ancestor(a, b):
            raise ValueError("a must be a strict ancestor of b")
        rmq = self._require_rmq()
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
        """The node ``k`` edges along the path from ``a`` to ``b``."""
        anc = self.get_lca(a, b)
        first_half = self.depth[a] - self.depth[anc]
        second_half = self.depth[b] - self.depth[anc]
        if not 0 <= k <= first_half + second_half:
            raise ValueError("k is outside the path")
        if k < first_half:
            return self.get_kth_ancestor(a, k)
        return self.get_kth_ancestor(b, first_half + second_half - k)

    def get_common_node(self, a: int, b: int, c: int) -> int:
        """The deepest of the pairwise LCAs of three nodes."""
        return self.get_lca(a, b) ^ self.get_lca(b, c) ^ self.get_lca(c, a)

    def compress_tree(self, nodes: Iterable[int]) -> list[tuple[int, int]]:
        """Minimal subtree spanning ``nodes`` as ``(node, parent)`` pairs in tour order."""
        ordered = sorted(nodes, key=lambda v: self.tour_start[v])
        if not ordered:
            return []
        lcas = [self.get_lca(x, y) for x, y in zip(ordered, ordered[1:])]
        merged = sorted(ordered + lcas, key=lambda v: self.tour_start[v])
        unique: list[int] = []
        for node in merged:
            if not unique or unique[-1] != node:
                unique.append(node)
        result = [(unique[0], -1)]
        result.extend(
            (node, self.get_lca(node, prev)) for prev, node in zip(unique, unique[1:])
        )
        return result