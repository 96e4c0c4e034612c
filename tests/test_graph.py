import networkx as nx
import pytest

from grapho_mst.core import Edge, PathResult, SpanningTree, build_adjacency


def test_edge_is_direction_agnostic():
    assert Edge(1, 2) == Edge(2, 1)
    assert hash(Edge(1, 2)) == hash(Edge(2, 1))
    assert len({Edge(1, 2), Edge(2, 1), Edge(2, 3)}) == 2


def test_edge_traversal_direction():
    e = Edge(4, 9)
    assert e.other(4) == 9
    assert e.other(9) == 4
    assert e.oriented(9) == (9, 4)
    # orientation never changes the stored endpoints
    assert (e.v, e.w) == (4, 9)
    with pytest.raises(ValueError):
        e.other(5)


def test_build_adjacency():
    adj = build_adjacency([Edge(0, 1), Edge(1, 2)], 4)
    assert adj[0] == [Edge(0, 1)]
    assert adj[1] == [Edge(0, 1), Edge(1, 2)]
    assert adj[3] == []


def test_tree_skips_root_slot(square_tree):
    assert square_tree.parent_edges[0] is None
    assert len(square_tree.edges()) == 3
    assert square_tree.parent(0) is None
    for v in range(1, 4):
        assert square_tree.parent(v) is not None


def test_tree_weight_and_networkx(square_tree, square_dm):
    assert square_tree.total_weight(square_dm) == pytest.approx(30.0)
    g = square_tree.to_networkx(square_dm)
    assert nx.is_tree(g)
    assert g.size(weight="weight") == pytest.approx(30.0)


def test_tree_to_geodataframes(square_tree, square_points):
    nodes_gdf, edges_gdf = square_tree.to_geodataframes(square_points)
    assert len(nodes_gdf) == 4
    assert len(edges_gdf) == 3
    assert nodes_gdf.loc[nodes_gdf["is_root"], "id"].tolist() == [0]
    assert edges_gdf["length"].sum() == pytest.approx(30.0)


def test_path_result_edges_and_reverse():
    path = PathResult(2, 0, [2, 1, 0], 20.0)
    assert path.steps() == [(2, 1), (1, 0)]
    assert path.edges == [Edge(1, 2), Edge(0, 1)]
    assert len(path) == 2

    back = path.reversed()
    assert back.source == 0 and back.target == 2
    assert back.vertices == [0, 1, 2]
    assert back.length == path.length


def test_empty_tree():
    tree = SpanningTree([])
    assert len(tree) == 0
    assert tree.edges() == []
