import pytest

from algokit.weighted_lca import WeightedLCA

EDGES = [(0, 1, 4), (0, 2, 1), (1, 3, 2), (1, 4, 7), (2, 5, 3)]


def _tree(edges=EDGES, n=6):
    lca = WeightedLCA(n)
    for a, b, w in edges:
        lca.add_edge(a, b, w)
    lca.build()
    return lca


def test_adjacent_nodes_have_edge_weight_distance():
    lca = _tree()
    for a, b, w in EDGES:
        assert lca.get_weighted_dist(a, b) == w
        assert lca.get_weighted_dist(b, a) == w
        assert lca.get_dist(a, b) == 1


def test_up_weight_is_parent_edge_weight():
    lca = _tree()
    weights = {frozenset((a, b)): w for a, b, w in EDGES}
    for v in range(6):
        if lca.parent[v] >= 0:
            assert lca.up_weight[v] == weights[frozenset((v, lca.parent[v]))]


def test_weighted_distance_is_additive_along_paths():
    lca = _tree()
    for x in range(6):
        for a in range(6):
            for b in range(6):
                if lca.on_path(x, a, b):
                    assert (
                        lca.get_weighted_dist(a, x) + lca.get_weighted_dist(x, b)
                        == lca.get_weighted_dist(a, b)
                    )


def test_diameter_is_heaviest_path():
    lca = _tree()
    length, (a, b) = lca.get_diameter()
    assert length == lca.get_weighted_dist(a, b)
    assert length == max(lca.get_weighted_dist(x, y) for x in range(6) for y in range(6))


def test_center_with_unit_weights():
    lca = _tree([(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 4, 1)], 5)
    assert lca.get_center() == (2, 2)


def test_lca_and_ancestry():
    lca = _tree()
    assert lca.get_lca(3, 4) == 1
    assert lca.get_lca(3, 5) == 0
    for a in range(6):
        for b in range(6):
            anc = lca.get_lca(a, b)
            assert lca.is_ancestor(anc, a) and lca.is_ancestor(anc, b)


def test_child_ancestor_and_kth_ancestor():
    lca = _tree()
    for a in range(6):
        for b in range(6):
            if a != b and lca.is_ancestor(a, b):
                child = lca.child_ancestor(a, b)
                assert lca.parent[child] == a
                assert lca.get_kth_ancestor(b, lca.depth[b] - lca.depth[a]) == a


def test_kth_node_on_path_and_common_node():
    lca = _tree()
    dist = lca.get_dist(3, 5)
    path = [lca.get_kth_node_on_path(3, 5, k) for k in range(dist + 1)]
    assert path[0] == 3 and path[-1] == 5
    assert all(lca.get_dist(u, v) == 1 for u, v in zip(path, path[1:]))
    common = lca.get_common_node(3, 4, 5)
    assert lca.get_lca(3, 4) == common


def test_compress_tree_parents_are_ancestors():
    lca = _tree()
    result = lca.compress_tree([3, 5])
    assert result[0][1] == -1
    assert {node for node, _ in result} == {0, 3, 5}
    for node, par in result[1:]:
        assert lca.is_ancestor(par, node)


def test_degree_after_build():
    lca = _tree()
    for v in range(6):
        assert lca.degree(v) == sum(v in (a, b) for a, b, _ in EDGES)


def test_adjacency_constructor():
    lca = WeightedLCA([[(1, 5)], [(0, 5), (2, 6)], [(1, 6)]])
    lca.build()
    assert lca.get_weighted_dist(0, 2) == 11
    assert lca.get_diameter()[0] == lca.get_weighted_dist(0, 2)


def test_disconnected_and_errors():
    lca = _tree([(0, 1, 3), (2, 3, 4)], 4)
    assert lca.get_lca(1, 3) == -1
    with pytest.raises(ValueError):
        lca.get_kth_node_on_path(0, 1, 2)
    cyclic = WeightedLCA(3)
    for a, b in [(0, 1), (1, 2), (2, 0)]:
        cyclic.add_edge(a, b, 1)
    with pytest.raises(ValueError):
        cyclic.build()