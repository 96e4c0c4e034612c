import itertools
import math

import networkx as nx
import pytest

from grapho_mst.config import InvalidEndpoints, NoPathFound
from grapho_mst.core import (Edge, SpanningTree, build_distance_matrix, compute_mst,
                             compute_shortest_path)


def _path_to_root(tree, v):
    path = [v]
    while tree.parent(v) is not None:
        v = tree.parent(v)
        path.append(v)
    return path


def _length_via_root(tree, dm, source, target):
    """Tree distance from both root walks with their common part removed."""
    up_source = _path_to_root(tree, source)[::-1]
    up_target = _path_to_root(tree, target)[::-1]
    common = 0
    while (common < min(len(up_source), len(up_target))
           and up_source[common] == up_target[common]):
        common += 1

    def walk_length(walk):
        return sum(dm[a, b] for a, b in zip(walk[:-1], walk[1:]))

    return walk_length(up_source[common - 1:]) + walk_length(up_target[common - 1:])


def test_square_path_follows_tree(square_tree, square_dm):
    path = compute_shortest_path(square_tree, square_dm, 0, 2)
    assert path.vertices == [0, 1, 2]
    assert path.length == pytest.approx(20.0)
    assert path.length != pytest.approx(math.sqrt(200))


def test_square_path_through_root(square_tree, square_dm):
    path = compute_shortest_path(square_tree, square_dm, 3, 2)
    assert path.vertices == [3, 0, 1, 2]
    assert path.length == pytest.approx(30.0)
    assert path.steps() == [(3, 0), (0, 1), (1, 2)]


def test_adjacent_vertices():
    dm = build_distance_matrix([(0, 0), (3, 4)])
    tree = compute_mst(dm)
    path = compute_shortest_path(tree, dm, 1, 0)
    assert path.vertices == [1, 0]
    assert path.length == pytest.approx(5.0)


def test_length_is_sum_of_edge_weights(random_tree, random_dm):
    for source, target in [(0, 59), (12, 40), (33, 1)]:
        path = compute_shortest_path(random_tree, random_dm, source, target)
        assert path.vertices[0] == source
        assert path.vertices[-1] == target
        assert path.length == pytest.approx(sum(e.weight(random_dm) for e in path.edges))


def test_path_edges_are_tree_edges(random_tree, random_dm):
    tree_edges = set(random_tree.edges())
    path = compute_shortest_path(random_tree, random_dm, 3, 57)
    assert set(path.edges) <= tree_edges
    assert len(set(path.vertices)) == len(path.vertices)


def test_agrees_with_root_walks(random_tree, random_dm):
    for source, target in itertools.combinations(range(0, 60, 7), 2):
        path = compute_shortest_path(random_tree, random_dm, source, target)
        expected = _length_via_root(random_tree, random_dm, source, target)
        assert path.length == pytest.approx(expected)


def test_agrees_with_networkx(random_tree, random_dm):
    g = random_tree.to_networkx(random_dm)
    for source, target in [(0, 1), (10, 50), (59, 20)]:
        path = compute_shortest_path(random_tree, random_dm, source, target)
        assert path.vertices == nx.shortest_path(g, source, target)


def test_symmetry(random_tree, random_dm):
    for a, b in [(0, 30), (7, 44), (58, 2)]:
        forward = compute_shortest_path(random_tree, random_dm, a, b)
        backward = compute_shortest_path(random_tree, random_dm, b, a)
        assert forward.length == pytest.approx(backward.length)
        assert forward.vertices == backward.vertices[::-1]


def test_does_not_change_tree_edges(random_tree, random_dm):
    before = [(e.v, e.w) if e else None for e in random_tree.parent_edges]
    compute_shortest_path(random_tree, random_dm, 5, 50)
    compute_shortest_path(random_tree, random_dm, 50, 5)
    after = [(e.v, e.w) if e else None for e in random_tree.parent_edges]
    assert before == after


@pytest.mark.parametrize("source,target", [(2, 2), (-1, 2), (0, 4), (4, 0), (0, -3)])
def test_invalid_endpoints(square_tree, square_dm, source, target):
    with pytest.raises(InvalidEndpoints):
        compute_shortest_path(square_tree, square_dm, source, target)


def test_invalid_endpoints_is_value_error(square_tree, square_dm):
    with pytest.raises(ValueError):
        compute_shortest_path(square_tree, square_dm, 1, 1)


def test_no_path_found(square_dm):
    broken = SpanningTree([None, Edge(0, 1), Edge(1, 2), None])
    with pytest.raises(NoPathFound):
        compute_shortest_path(broken, square_dm, 0, 3)
    # the reachable part still works
    assert compute_shortest_path(broken, square_dm, 0, 2).vertices == [0, 1, 2]
