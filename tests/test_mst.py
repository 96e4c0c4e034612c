import itertools

import networkx as nx
import numpy as np
import pytest

from grapho_mst.core import Edge, build_distance_matrix, compute_mst
from grapho_mst.utils import Bounds, generate_vertices


def _complete_graph(dm):
    g = nx.Graph()
    n = len(dm)
    g.add_nodes_from(range(n))
    for i, j in itertools.combinations(range(n), 2):
        g.add_edge(i, j, weight=float(dm[i, j]))
    return g


def _dfs_order(tree, start):
    adj = tree.adjacency()
    visited = []
    seen = set()
    stack = [start]
    while stack:
        v = stack.pop()
        if v in seen:
            continue
        seen.add(v)
        visited.append(v)
        stack.extend(e.other(v) for e in adj[v])
    return visited


def test_square_tree(square_tree, square_dm):
    assert set(square_tree.edges()) == {Edge(0, 1), Edge(1, 2), Edge(0, 3)}
    assert square_tree.total_weight(square_dm) == pytest.approx(30.0)


@pytest.mark.parametrize("count", [2, 3, 10, 60, 200])
def test_tree_has_n_minus_one_edges(count):
    points = generate_vertices(count, Bounds(0, 0, 1, 1), seed=count)
    tree = compute_mst(build_distance_matrix(points))
    assert len(tree) == count
    assert len(tree.edges()) == count - 1


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_weight_matches_independent_mst(seed):
    points = generate_vertices(40, Bounds(0, 0, 100, 50), seed=seed)
    dm = build_distance_matrix(points)
    tree = compute_mst(dm)
    expected = nx.minimum_spanning_tree(_complete_graph(dm)).size(weight="weight")
    assert tree.total_weight(dm) == pytest.approx(expected)


def test_tree_is_connected_and_acyclic(random_tree, random_points):
    n = len(random_points)
    for start in (0, n // 2, n - 1):
        order = _dfs_order(random_tree, start)
        assert len(order) == n
        assert sorted(order) == list(range(n))
    assert nx.is_tree(random_tree.to_networkx())


def test_other_roots_give_same_weight(random_dm):
    weights = [compute_mst(random_dm, root=r).total_weight(random_dm) for r in (0, 5, 59)]
    assert weights == pytest.approx([weights[0]] * 3)


def test_compute_mst_is_idempotent(random_dm):
    first = compute_mst(random_dm)
    second = compute_mst(random_dm)
    assert set(first.edges()) == set(second.edges())
    assert [(e.v, e.w) if e else None for e in first.parent_edges] == \
           [(e.v, e.w) if e else None for e in second.parent_edges]


def test_each_vertex_attaches_by_its_parent_edge(random_tree):
    for v, e in enumerate(random_tree.parent_edges):
        if v == random_tree.root:
            assert e is None
        else:
            assert v in (e.v, e.w)


def test_cut_property(random_tree, random_dm):
    """Removing any tree edge, it is the lightest edge across the resulting cut."""
    g = random_tree.to_networkx()
    n = len(random_dm)
    for e in random_tree.edges():
        g.remove_edge(e.v, e.w)
        side = np.zeros(n, dtype=bool)
        side[list(nx.node_connected_component(g, e.v))] = True
        crossing = random_dm[np.ix_(side, ~side)]
        assert random_dm[e.v, e.w] == pytest.approx(crossing.min())
        g.add_edge(e.v, e.w)


def test_empty_matrix_gives_empty_tree():
    tree = compute_mst(np.zeros((0, 0)))
    assert len(tree) == 0
    assert tree.edges() == []


def test_single_vertex():
    tree = compute_mst(build_distance_matrix([(3, 4)]))
    assert len(tree) == 1
    assert tree.edges() == []


def test_root_out_of_range(square_dm):
    with pytest.raises(ValueError):
        compute_mst(square_dm, root=4)


def test_coincident_points():
    dm = build_distance_matrix([(0, 0), (0, 0), (5, 0)])
    tree = compute_mst(dm)
    assert tree.total_weight(dm) == pytest.approx(5.0)
    assert len(tree.edges()) == 2
