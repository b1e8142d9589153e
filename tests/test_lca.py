import pytest

from algokit.lca import LCA

EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)]


def _tree(edges=EDGES, n=6, **build_args):
    lca = LCA(n)
    for a, b in edges:
        lca.add_edge(a, b)
    lca.build(**build_args)
    return lca


def _walk_up(lca, a, k):
    for _ in range(k):
        if a < 0:
            break
        a = lca.parent[a]
    return a


def test_lca_small_tree():
    lca = _tree()
    assert lca.get_lca(3, 4) == 1
    assert lca.get_lca(3, 5) == 0
    assert lca.get_lca(4, 1) == 1
    assert lca.get_lca(2, 2) == 2


def test_lca_is_common_ancestor_everywhere():
    lca = _tree()
    for a in range(6):
        for b in range(6):
            anc = lca.get_lca(a, b)
            assert lca.is_ancestor(anc, a) and lca.is_ancestor(anc, b)
            assert lca.get_dist(a, b) == lca.get_dist(b, a)


def test_on_path_agrees_with_distances():
    lca = _tree()
    for x in range(6):
        for a in range(6):
            for b in range(6):
                dist_check = lca.get_dist(a, x) + lca.get_dist(x, b) == lca.get_dist(a, b)
                assert lca.on_path(x, a, b) == dist_check


def test_diameter_matches_distance():
    lca = _tree()
    length, (a, b) = lca.get_diameter()
    assert length == lca.get_dist(a, b)
    assert length == max(lca.get_dist(x, y) for x in range(6) for y in range(6))


def test_center_of_path():
    lca = _tree([(0, 1), (1, 2), (2, 3), (3, 4)], 5)
    assert lca.get_center() == (2, 2)


def test_kth_ancestor_matches_parent_walk():
    lca = _tree([(0, 1), (1, 2), (2, 3), (1, 4), (4, 5), (0, 6)], 7)
    for a in range(7):
        for k in range(6):
            assert lca.get_kth_ancestor(a, k) == _walk_up(lca, a, k)


def test_kth_node_on_path_walks_the_path():
    lca = _tree()
    for a in range(6):
        for b in range(6):
            dist = lca.get_dist(a, b)
            path = [lca.get_kth_node_on_path(a, b, k) for k in range(dist + 1)]
            assert path[0] == a and path[-1] == b
            assert all(lca.get_dist(u, v) == 1 for u, v in zip(path, path[1:]))


def test_kth_node_out_of_range_raises():
    lca = _tree()
    with pytest.raises(ValueError):
        lca.get_kth_node_on_path(3, 5, lca.get_dist(3, 5) + 1)


def test_child_ancestor():
    lca = _tree()
    for a in range(6):
        for b in range(6):
            if a != b and lca.is_ancestor(a, b):
                child = lca.child_ancestor(a, b)
                assert lca.parent[child] == a
                assert lca.is_ancestor(child, b)


def test_child_ancestor_rejects_non_ancestor():
    lca = _tree()
    with pytest.raises(ValueError):
        lca.child_ancestor(3, 3)
    with pytest.raises(ValueError):
        lca.child_ancestor(3, 5)


def test_common_node_minimises_distance_sum():
    lca = _tree()
    for a, b, c in [(3, 4, 5), (3, 5, 2), (4, 4, 0)]:
        common = lca.get_common_node(a, b, c)
        total = sum(lca.get_dist(common, v) for v in (a, b, c))
        assert total == min(sum(lca.get_dist(x, v) for v in (a, b, c)) for x in range(6))


def test_compress_tree():
    lca = _tree()
    result = lca.compress_tree([5, 3, 4])
    nodes = [node for node, _ in result]
    assert set(nodes) == {0, 1, 3, 4, 5}
    assert result[0][1] == -1
    for node, par in result[1:]:
        assert par in nodes and lca.is_ancestor(par, node) and par != node
    assert lca.compress_tree([]) == []


def test_degree_counts_parent_edge_after_build():
    lca = _tree()
    for v in range(6):
        assert lca.degree(v) == sum(v in edge for edge in EDGES)


def test_disconnected_nodes_have_no_lca():
    lca = _tree([(0, 1), (2, 3)], 4)
    assert lca.get_lca(0, 2) == -1
    assert lca.get_lca(1, 0) == 0
    assert lca.get_lca(3, 2) == 2


def test_build_with_root_and_adjacency_input():
    lca = LCA([[1], [0, 2], [1]])
    lca.build(root=2)
    assert lca.parent[2] == -1
    assert lca.depth[0] == lca.get_dist(0, 2)
    assert lca.get_lca(0, 1) == 1


def test_cycle_is_rejected():
    lca = LCA(3)
    for a, b in [(0, 1), (1, 2), (2, 0)]:
        lca.add_edge(a, b)
    with pytest.raises(ValueError):
        lca.build()


def test_queries_before_build_raise():
    lca = LCA(2)
    lca.add_edge(0, 1)
    with pytest.raises(RuntimeError):
        lca.get_diameter()
    with pytest.raises(RuntimeError):
        lca.get_lca(0, 1)


def test_bad_node_in_add_edge():
    with pytest.raises(IndexError):
        LCA(2).add_edge(0, 2)