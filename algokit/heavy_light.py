"""Heavy-light decomposition with path and subtree updates and queries."""

from __future__ import annotations

from collections.abc import Callable

from algokit.lazy_segtree import LazySegTree, Segment, SegmentChange


class SubtreeHeavyLight:
    """Path and subtree operations on a forest, backed by one lazy segment tree.

    In vertex mode the values live on vertices; otherwise each edge's value
    lives on its lower endpoint, and a path or subtree excludes its top vertex.
    """

    def __init__(self, n: int = 0, vertex_mode: bool = True) -> None:
        if n < 0:
            raise ValueError(f"node count must be non-negative, got {n}")
        self.n = n
        self.vertex_mode = vertex_mode
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.parent = [-1] * n
        self.depth = [0] * n
        self.subtree_size = [0] * n
        self.tour_start = [0] * n
        self.tour_end = [0] * n
        self.chain_root = [0] * n
        self.full_tree = LazySegTree(n)

    def _check_node(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"node {v} out of range for {self.n} nodes")

    def add_edge(self, a: int, b: int) -> None:
        """Add an undirected tree edge."""
        self._check_node(a)
        self._check_node(b)
        self.adj[a].append(b)
        self.adj[b].append(a)

    def _orient(self, root: int, visited: list[bool]) -> None:
        adj, parent, depth, size = self.adj, self.parent, self.depth, self.subtree_size
        visited[root] = True
        parent[root] = -1
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
            # Heaviest child first so it continues the chain.
            adj[node].sort(key=size.__getitem__, reverse=True)

    def _chain(self, root: int, tour: int) -> int:
        chain_root, tour_start = self.chain_root, self.tour_start
        chain_root[root] = root
        tour_start[root] = tour
        tour += 1
        frames = [(root, iter(enumerate(self.adj[root])))]
        while frames:
            node, children = frames[-1]
            step = next(children, None)
            if step is not None:
                position, child = step
                chain_root[child] = chain_root[node] if position == 0 else child
                tour_start[child] = tour
                tour += 1
                frames.append((child, iter(enumerate(self.adj[child]))))
                continue
            frames.pop()
            self.tour_end[node] = tour
        return tour

    def build(self, initial: Segment) -> None:
        """Root each tree at its smallest node and set every position to ``initial``."""
        visited = [False] * self.n
        tour = 0
        for i in range(self.n):
            if not visited[i]:
                self._orient(i, visited)
                tour = self._chain(i, tour)
        self.full_tree.build(initial.copy() for _ in range(self.n))

    def _subtree_range(self, v: int) -> tuple[int, int]:
        self._check_node(v)
        return self.tour_start[v] + (0 if self.vertex_mode else 1), self.tour_end[v]

    def update_subtree(self, v: int, change: SegmentChange) -> None:
        """Apply ``change`` to everything in the subtree of ``v``."""
        self.full_tree.update(*self._subtree_range(v), change)

    def query_subtree(self, v: int) -> Segment:
        """Aggregate of everything in the subtree of ``v``."""
        return self.full_tree.query(*self._subtree_range(v))

    def _process_path(self, u: int, v: int, op: Callable[[int, int], None]) -> int:
        self._check_node(u)
        self._check_node(v)
        chain_root, depth, tour_start = self.chain_root, self.depth, self.tour_start
        while chain_root[u] != chain_root[v]:
            # Pull up the chain whose root is deeper.
            if depth[chain_root[u]] > depth[chain_root[v]]:
                u, v = v, u
            root = chain_root[v]
            op(tour_start[root], tour_start[v] + 1)
            v = self.parent[root]
            if v < 0:
                raise ValueError("nodes are not connected")
        if depth[u] > depth[v]:
            u, v = v, u
        # u is now an ancestor of v.
        op(tour_start[u] + (0 if self.vertex_mode else 1), tour_start[v] + 1)
        return u

    def get_lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        return self._process_path(u, v, lambda a, b: None)

    def query_path(self, u: int, v: int) -> Segment:
        """Aggregate of everything on the path between ``u`` and ``v``."""
        answer = Segment()
        tree = self.full_tree
        self._process_path(u, v, lambda a, b: answer.join(tree.query(a, b)))
        return answer

    def update_path(self, u: int, v: int, change: SegmentChange) -> None:
        """Apply ``change`` to everything on the path between ``u`` and ``v``."""
        tree = self.full_tree
        self._process_path(u, v, lambda a, b: tree.update(a, b, change))