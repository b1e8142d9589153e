"""Biconnected components, cut vertices and the block-vertex tree."""

from __future__ import annotations


class BiconnectedComponents:
    """Cut vertices, bridges and biconnected components of an undirected graph."""

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"node count must be non-negative, got {n}")
        self.n = n
        self.adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        self.edge_list: list[tuple[int, int]] = []
        self.is_cut: list[bool] = [False] * n
        self.is_bridge: list[bool] = []
        self.components: list[list[int]] = []

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

    def build(self, root: int = -1) -> None:
        """Compute ``is_cut``, ``is_bridge`` and ``components``.

        The search starts from ``root`` when it is a valid node.
        Each component is a sorted list of its nodes.
        """
        n = self.n
        adj = self.adj
        tour_start = [-1] * n
        low_link = [0] * n
        is_cut = [False] * n
        is_bridge = [False] * len(self.edge_list)
        components: list[list[int]] = []
        stack: list[int] = []
        tour = 0

        starts = ([root] if 0 <= root < n else []) + list(range(n))
        for start in starts:
            if tour_start[start] >= 0:
                continue
            tour_start[start] = low_link[start] = tour
            tour += 1
            # Frame: node, edge used to reach it, neighbour iterator, children, stack size.
            frames = [[start, -1, iter(adj[start]), 0, 0]]

            while frames:
                frame = frames[-1]
                node, parent_edge, neighbours = frame[0], frame[1], frame[2]
                descended = False
                for neigh, index in neighbours:
                    if index == parent_edge:
                        continue
                    if tour_start[neigh] >= 0:
                        low_link[node] = min(low_link[node], tour_start[neigh])
                        if tour_start[neigh] < tour_start[node]:
                            stack.append(node)
                    else:
                        frame[4] = len(stack)
                        tour_start[neigh] = low_link[neigh] = tour
                        tour += 1
                        frames.append([neigh, index, iter(adj[neigh]), 0, 0])
                        descended = True
                        break
                if descended:
                    continue

                frames.pop()
                if not frames:
                    # The root is a cut vertex iff it has more than one child.
                    is_cut[node] = frame[3] > 1
                    continue

                parent_frame = frames[-1]
                parent = parent_frame[0]
                parent_frame[3] += 1
                size = parent_frame[4]
                low_link[parent] = min(low_link[parent], low_link[node])

                if low_link[node] > tour_start[parent]:
                    is_bridge[parent_edge] = True
                    components.append(sorted((parent, node)))
                elif low_link[node] == tour_start[parent]:
                    stack.append(parent)
                    components.append(sorted(set(stack[size:])))
                    del stack[size:]
                else:
                    stack.append(parent)

                if low_link[node] >= tour_start[parent]:
                    is_cut[parent] = True

        self.is_cut = is_cut
        self.is_bridge = is_bridge
        self.components = components


class BlockCutTree:
    """Tree joining each node to the biconnected components that contain it.

    Nodes ``0..n-1`` are graph nodes; node ``n + c`` stands for component ``c``.
    Call ``build`` after the components have been built.
    """

    def __init__(self, bi_comps: BiconnectedComponents) -> None:
        self.bi_comps = bi_comps
        self.n = 0
        self.size = 0
        self.adj: list[list[int]] = []
        self.parent: list[int] = []
        self.depth: list[int] = []

    def build(self) -> None:
        n = self.bi_comps.n
        components = self.bi_comps.components
        size = n + len(components)
        adj: list[list[int]] = [[] for _ in range(size)]
        for c, component in enumerate(components):
            for x in component:
                adj[x].append(n + c)
                adj[n + c].append(x)

        parent = [-1] * size
        depth = [0] * size
        seen = [False] * size
        for root in range(size):
            if seen[root]:
                continue
            seen[root] = True
            todo = [root]
            while todo:
                node = todo.pop()
                for neigh in adj[node]:
                    if not seen[neigh]:
                        seen[neigh] = True
                        parent[neigh] = node
                        depth[neigh] = depth[node] + 1
                        todo.append(neigh)

        self.n = n
        self.size = size
        self.adj = adj
        self.parent = parent
        self.depth = depth

    def same_biconnected_component(self, a: int, b: int) -> bool:
        """Whether graph nodes ``a`` and ``b`` share a biconnected component."""
        depth, parent = self.depth, self.parent
        if depth[a] > depth[b]:
            a, b = b, a
        # Distinct nodes share a component iff they are two steps apart in the tree.
        return (
            a == b
            or (depth[b] == depth[a] + 2 and parent[parent[b]] == a)
            or (parent[a] >= 0 and parent[a] == parent[b])
        )